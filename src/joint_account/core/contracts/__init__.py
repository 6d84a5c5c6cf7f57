"""
Contract Validation Module

JSON Schema контракты запроса и результата разделения перевода.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    SplitRequestValidator,
    SplitResultValidator,
    validate_split_request,
    validate_split_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "SplitRequestValidator",
    "SplitResultValidator",
    # Functions
    "validate_split_request",
    "validate_split_result",
]
