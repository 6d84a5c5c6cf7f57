"""
Domain models and value objects.

Contains the request and per-party result of a two-way transfer split.
"""

from joint_account.core.domain.split import SplitRequest, TransferResult, format_amount

__all__ = [
    "SplitRequest",
    "TransferResult",
    "format_amount",
]
