"""
Permill — доля в миллионных частях

Толерантность проскальзывания ордера хранится как целое число частей на
миллион: 10_000 = 1%, 1_000_000 = 100%.

Умножение `permill * amount` округляет к ближайшему целому, при равенстве
половин вниз. mul_floor всегда округляет вниз.
"""

from typing import Final

from pydantic import BaseModel, Field

from src.core.math.numerical_safeguards import validate_balance

# Знаменатель Permill
PERMILL_ACCURACY: Final[int] = 1_000_000


class Permill(BaseModel):
    """
    Доля в диапазоне [0, 1] с точностью 1/1_000_000.

    Immutable модель (frozen=True).
    """

    parts: int = Field(..., ge=0, le=PERMILL_ACCURACY, description="Частей на миллион")

    model_config = {"frozen": True}

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_parts(cls, parts: int) -> "Permill":
        return cls(parts=parts)

    @classmethod
    def from_percent(cls, percent: int) -> "Permill":
        """Permill из целого числа процентов (1 → 1%)."""
        return cls(parts=percent * 10_000)

    @classmethod
    def from_perthousand(cls, perthousand: int) -> "Permill":
        """Permill из промилле (1 → 0.1%)."""
        return cls(parts=perthousand * 1_000)

    @classmethod
    def from_rational(cls, numerator: int, denominator: int) -> "Permill":
        """
        Permill из дроби numerator/denominator с округлением вниз.

        Дробь больше единицы прижимается к 100%.

        Raises:
            ValueError: Если denominator равен нулю или аргументы отрицательные
        """
        if denominator == 0:
            raise ValueError("denominator cannot be zero")
        if numerator < 0 or denominator < 0:
            raise ValueError("numerator and denominator must be non-negative")

        parts = numerator * PERMILL_ACCURACY // denominator
        return cls(parts=min(parts, PERMILL_ACCURACY))

    @classmethod
    def zero(cls) -> "Permill":
        return cls(parts=0)

    @classmethod
    def one(cls) -> "Permill":
        return cls(parts=PERMILL_ACCURACY)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def mul_floor(self, amount: int) -> int:
        """amount * parts / 1_000_000 с округлением вниз."""
        validate_balance(amount)
        return amount * self.parts // PERMILL_ACCURACY

    def __mul__(self, amount: int) -> int:
        if not isinstance(amount, int) or isinstance(amount, bool):
            return NotImplemented

        validate_balance(amount)
        quotient, remainder = divmod(amount * self.parts, PERMILL_ACCURACY)
        # Ближайшее целое, половина округляется вниз
        if remainder * 2 > PERMILL_ACCURACY:
            quotient += 1
        return quotient

    __rmul__ = __mul__

    def is_zero(self) -> bool:
        return self.parts == 0

    def to_percent(self) -> float:
        """Доля в процентах (только для отображения)."""
        return self.parts / 10_000

    def __str__(self) -> str:
        return f"{self.to_percent():g}%"
