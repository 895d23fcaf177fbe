"""
Contract Validation Module

Валидация JSON контрактов запроса и результата разложения.
"""

from .validators import (
    ChangeRequestValidator,
    ChangeResultValidator,
    ContractValidator,
    SchemaLoader,
    StrictIntegerValidator,
    validate_change_request,
    validate_change_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "StrictIntegerValidator",
    "ContractValidator",
    "ChangeRequestValidator",
    "ChangeResultValidator",
    # Functions
    "validate_change_request",
    "validate_change_result",
]
