"""
joint-account — split a shared transfer between two incomes.

Both parties end up with the same remaining balance; nobody contributes a
negative amount.
"""

from joint_account.calculator import (
    CalculationError,
    InsufficientFunds,
    InvalidSplitInput,
    ProportionalSplitCalculator,
    SplitCalculatorConfig,
    SplitResult,
    compute,
)
from joint_account.core.domain import SplitRequest, TransferResult

__version__ = "0.1.0"

__all__ = [
    "CalculationError",
    "InsufficientFunds",
    "InvalidSplitInput",
    "ProportionalSplitCalculator",
    "SplitCalculatorConfig",
    "SplitRequest",
    "SplitResult",
    "TransferResult",
    "compute",
]
