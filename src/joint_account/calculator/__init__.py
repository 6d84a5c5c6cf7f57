"""
Calculator module.

Proportional split of a shared transfer between two parties.
"""

from joint_account.calculator.proportional_split import (
    NOT_ENOUGH_MONEY_MESSAGE,
    CalculationError,
    InsufficientFunds,
    InvalidSplitInput,
    ProportionalSplitCalculator,
    SplitCalculatorConfig,
    SplitResult,
    compute,
)

__all__ = [
    "NOT_ENOUGH_MONEY_MESSAGE",
    "CalculationError",
    "InsufficientFunds",
    "InvalidSplitInput",
    "ProportionalSplitCalculator",
    "SplitCalculatorConfig",
    "SplitResult",
    "compute",
]
