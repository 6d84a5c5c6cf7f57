"""
Core math modules для joint-account

Численные примитивы, используемые калькулятором долей.
"""

from joint_account.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Sign / validity
    is_close,
    is_sign_negative,
    is_valid_float,
    # Validation
    validate_finite,
    validate_non_negative,
)

__all__ = [
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "is_close",
    "is_sign_negative",
    "is_valid_float",
    "validate_finite",
    "validate_non_negative",
]
