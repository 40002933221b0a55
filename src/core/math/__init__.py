"""
Core math modules

Целочисленная u128-арифметика, доли Permill и цены с фиксированной точкой.
"""

# Numerical Safeguards (u128 Balance)
from src.core.math.numerical_safeguards import (
    BALANCE_BITS,
    BALANCE_MAX,
    BALANCE_MIN,
    checked_add,
    checked_div,
    checked_mul,
    checked_sub,
    clamp_balance,
    is_balance,
    saturating_add,
    saturating_mul,
    saturating_pow,
    saturating_sub,
    validate_balance,
)

# Permill
from src.core.math.per_thing import PERMILL_ACCURACY, Permill

# Fixed point
from src.core.math.fixed_point import (
    FIXED_INNER_MAX,
    FIXED_ONE,
    FRACTIONAL_BITS,
    FixedPrice,
)

__all__ = [
    # Numerical Safeguards: Constants
    "BALANCE_BITS",
    "BALANCE_MAX",
    "BALANCE_MIN",
    # Numerical Safeguards: Checked
    "checked_add",
    "checked_div",
    "checked_mul",
    "checked_sub",
    # Numerical Safeguards: Saturating
    "clamp_balance",
    "saturating_add",
    "saturating_mul",
    "saturating_pow",
    "saturating_sub",
    # Numerical Safeguards: Validation
    "is_balance",
    "validate_balance",
    # Permill
    "PERMILL_ACCURACY",
    "Permill",
    # Fixed point
    "FIXED_INNER_MAX",
    "FIXED_ONE",
    "FRACTIONAL_BITS",
    "FixedPrice",
]
