"""
Fixed-Point Price Calculator

    price = (quote_amount / quote_unit) / (base_amount / base_unit)

Обе дроби строятся с насыщением, деление checked. Нулевой base amount
(после масштабирования) даёт SlippageOverflow, а не ошибку деления.
"""

from src.core.domain.errors import SlippageOverflow
from src.core.math.fixed_point import FixedPrice


def price(quote_amount: int, quote_unit: int, base_amount: int, base_unit: int) -> FixedPrice:
    """
    Цена quote за одну единицу base.

    Args:
        quote_amount: Количество quote актива (raw)
        quote_unit: Raw amount одной единицы quote актива
        base_amount: Количество base актива (raw), должно быть > 0
        base_unit: Raw amount одной единицы base актива

    Returns:
        FixedPrice

    Raises:
        SlippageOverflow: Если отношение не представимо (в том числе base_amount == 0)
    """
    quote_per_unit = FixedPrice.saturating_from_rational(quote_amount, quote_unit)
    base_per_unit = FixedPrice.saturating_from_rational(base_amount, base_unit)

    result = quote_per_unit.checked_div(base_per_unit)
    if result is None:
        raise SlippageOverflow(
            f"Price not representable: quote={quote_amount}/{quote_unit} "
            f"base={base_amount}/{base_unit}"
        )
    return result
