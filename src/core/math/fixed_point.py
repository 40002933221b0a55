"""
FixedPrice — беззнаковое число с фиксированной точкой

Цена (quote за одну единицу base) хранится как целое inner:

    value = inner / 2**128

Inner ограничен 2**256 - 1: 128 бит целой части и 128 бит дробной. Этого
достаточно, чтобы отношение двух u128-сумм с масштабом до 10**18 считалось
без потери точности и без переполнения.

Операции разделены так же, как в numerical_safeguards:
- checked_*    : None, если результат не представим
- saturating_* : прижатие к границам типа
"""

from decimal import Decimal, localcontext
from fractions import Fraction
from functools import total_ordering
from typing import Final, Optional

# Количество дробных бит
FRACTIONAL_BITS: Final[int] = 128

# Inner-представление единицы
FIXED_ONE: Final[int] = 1 << FRACTIONAL_BITS

# Максимальное inner-значение
FIXED_INNER_MAX: Final[int] = (1 << 256) - 1


@total_ordering
class FixedPrice:
    """
    Неотрицательная рациональная цена с фиксированной точкой.

    Immutable, hashable, полностью упорядочена по inner.
    """

    __slots__ = ("_inner",)

    def __init__(self, inner: int):
        if isinstance(inner, bool) or not isinstance(inner, int):
            raise TypeError(f"inner must be an integer, got {type(inner).__name__}")
        if inner < 0 or inner > FIXED_INNER_MAX:
            raise ValueError(f"inner {inner} out of range [0, 2**256 - 1]")
        self._inner = inner

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_inner(cls, inner: int) -> "FixedPrice":
        return cls(inner)

    @classmethod
    def from_integer(cls, value: int) -> "FixedPrice":
        """
        Целое значение.

        Raises:
            ValueError: Если значение отрицательное или не помещается в тип
        """
        return cls(value * FIXED_ONE)

    @classmethod
    def zero(cls) -> "FixedPrice":
        return cls(0)

    @classmethod
    def max_value(cls) -> "FixedPrice":
        return cls(FIXED_INNER_MAX)

    @classmethod
    def checked_from_rational(cls, numerator: int, denominator: int) -> Optional["FixedPrice"]:
        """
        numerator / denominator с округлением вниз.

        Returns:
            FixedPrice или None при нулевом знаменателе / переполнении
        """
        if numerator < 0 or denominator < 0:
            raise ValueError("numerator and denominator must be non-negative")
        if denominator == 0:
            return None

        inner = numerator * FIXED_ONE // denominator
        if inner > FIXED_INNER_MAX:
            return None
        return cls(inner)

    @classmethod
    def saturating_from_rational(cls, numerator: int, denominator: int) -> "FixedPrice":
        """
        numerator / denominator, прижатое к максимуму.

        Нулевой знаменатель даёт максимальное значение.
        """
        price = cls.checked_from_rational(numerator, denominator)
        if price is None:
            return cls.max_value()
        return price

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    @property
    def inner(self) -> int:
        return self._inner

    def is_zero(self) -> bool:
        return self._inner == 0

    def checked_div(self, other: "FixedPrice") -> Optional["FixedPrice"]:
        """self / other или None при делении на ноль или переполнении."""
        if other._inner == 0:
            return None

        inner = self._inner * FIXED_ONE // other._inner
        if inner > FIXED_INNER_MAX:
            return None
        return FixedPrice(inner)

    def checked_mul(self, other: "FixedPrice") -> Optional["FixedPrice"]:
        """self * other или None при переполнении."""
        inner = self._inner * other._inner // FIXED_ONE
        if inner > FIXED_INNER_MAX:
            return None
        return FixedPrice(inner)

    def saturating_mul(self, other: "FixedPrice") -> "FixedPrice":
        result = self.checked_mul(other)
        if result is None:
            return FixedPrice.max_value()
        return result

    # -------------------------------------------------------------------------
    # Конверсия
    # -------------------------------------------------------------------------

    def to_fraction(self) -> Fraction:
        """Точное рациональное значение."""
        return Fraction(self._inner, FIXED_ONE)

    def to_decimal(self, places: int = 18) -> Decimal:
        """Десятичное значение, обрезанное до places знаков после запятой."""
        whole, remainder = divmod(self._inner, FIXED_ONE)
        fractional = remainder * 10**places // FIXED_ONE
        with localcontext() as ctx:
            ctx.prec = len(str(whole)) + places + 1
            return Decimal(whole) + Decimal(fractional).scaleb(-places)

    def __float__(self) -> float:
        return float(self.to_fraction())

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedPrice):
            return NotImplemented
        return self._inner == other._inner

    def __lt__(self, other: "FixedPrice") -> bool:
        if not isinstance(other, FixedPrice):
            return NotImplemented
        return self._inner < other._inner

    def __hash__(self) -> int:
        return hash(self._inner)

    def __repr__(self) -> str:
        return f"FixedPrice({self.to_decimal()})"

    def __str__(self) -> str:
        text = format(self.to_decimal(), "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text
