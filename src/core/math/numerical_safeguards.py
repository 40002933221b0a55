"""
Numerical Safeguards — u128 Balance Arithmetic

Все суммы в системе: целые числа в минимальных единицах актива (raw amount),
в диапазоне Balance = [0, 2**128 - 1].

Модуль даёт два семейства операций:
- saturating_* : никогда не падают, результат прижимается к границам Balance
- checked_*    : возвращают None, если результат не представим в Balance

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна saturating-операция не бросает исключение на валидных входах
2. Результат всегда лежит в [0, BALANCE_MAX]
3. Все операции детерминированы и воспроизводимы
"""

from typing import Final, Optional

# =============================================================================
# ГРАНИЦЫ BALANCE
# =============================================================================

# Разрядность Balance (u128)
BALANCE_BITS: Final[int] = 128

# Максимальное представимое значение Balance
BALANCE_MAX: Final[int] = (1 << BALANCE_BITS) - 1

# Минимальное значение Balance (беззнаковый тип)
BALANCE_MIN: Final[int] = 0


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_balance(value: object) -> bool:
    """
    Проверка, что значение является валидным Balance.

    bool отклоняется явно: True/False не являются суммами.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return BALANCE_MIN <= value <= BALANCE_MAX


def validate_balance(value: int, name: str = "amount") -> int:
    """
    Валидация Balance.

    Args:
        value: Проверяемое значение
        name: Имя параметра для сообщения об ошибке

    Returns:
        value без изменений

    Raises:
        TypeError: Если value не целое число
        ValueError: Если value вне диапазона [0, BALANCE_MAX]
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")

    if value < BALANCE_MIN:
        raise ValueError(f"{name} cannot be negative: {value}")

    if value > BALANCE_MAX:
        raise ValueError(f"{name} {value} exceeds u128 maximum {BALANCE_MAX}")

    return value


def clamp_balance(value: int) -> int:
    """Прижатие произвольного целого к диапазону Balance."""
    if value < BALANCE_MIN:
        return BALANCE_MIN
    if value > BALANCE_MAX:
        return BALANCE_MAX
    return value


# =============================================================================
# CHECKED ОПЕРАЦИИ
# =============================================================================


def checked_add(a: int, b: int) -> Optional[int]:
    """a + b или None при переполнении."""
    result = a + b
    if result > BALANCE_MAX:
        return None
    return result


def checked_sub(a: int, b: int) -> Optional[int]:
    """a - b или None, если результат отрицательный."""
    result = a - b
    if result < BALANCE_MIN:
        return None
    return result


def checked_mul(a: int, b: int) -> Optional[int]:
    """a * b или None при переполнении."""
    result = a * b
    if result > BALANCE_MAX:
        return None
    return result


def checked_div(a: int, b: int) -> Optional[int]:
    """
    Целочисленное деление с округлением вниз.

    Returns:
        a // b или None при делении на ноль
    """
    if b == 0:
        return None
    return a // b


# =============================================================================
# SATURATING ОПЕРАЦИИ
# =============================================================================


def saturating_add(a: int, b: int) -> int:
    """
    Сложение с насыщением.

    Examples:
        >>> saturating_add(1, 2)
        3
        >>> saturating_add(BALANCE_MAX, 1) == BALANCE_MAX
        True
    """
    return clamp_balance(a + b)


def saturating_sub(a: int, b: int) -> int:
    """
    Вычитание с насыщением (никогда не уходит ниже нуля).

    Examples:
        >>> saturating_sub(5, 3)
        2
        >>> saturating_sub(3, 5)
        0
    """
    return clamp_balance(a - b)


def saturating_mul(a: int, b: int) -> int:
    """Умножение с насыщением на BALANCE_MAX."""
    return clamp_balance(a * b)


def saturating_pow(base: int, exponent: int) -> int:
    """
    Возведение в степень с насыщением.

    Большие степени не вычисляются целиком: как только промежуточный
    результат превышает BALANCE_MAX, возвращается BALANCE_MAX.

    Args:
        base: Основание (Balance)
        exponent: Неотрицательный показатель степени

    Raises:
        ValueError: Если exponent отрицательный
    """
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")

    if base in (0, 1) or exponent == 0:
        return clamp_balance(base**exponent)

    result = 1
    for _ in range(exponent):
        result *= base
        if result > BALANCE_MAX:
            return BALANCE_MAX
    return result
