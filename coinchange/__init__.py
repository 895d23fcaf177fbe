"""
coinchange — greedy change-making over a validated set of denominations.

Usage:
    denominations = DenominationSet.from_values([1, 2, 5])
    coin_change(8, denominations)  # [Coin(value=5), Coin(value=2), Coin(value=1)]
"""

from coinchange.calculator import (
    CalculatorConfig,
    ChangeBreakdown,
    ChangeCalculator,
    change_from_payload,
    coin_change,
)
from coinchange.core.contracts import (
    ChangeRequestValidator,
    ChangeResultValidator,
    validate_change_request,
    validate_change_result,
)
from coinchange.core.domain import Coin, DenominationSet, make_coins
from coinchange.core.errors import ValidationErrorKind, error_kinds

__all__ = [
    # Domain
    "Coin",
    "make_coins",
    "DenominationSet",
    # Errors
    "ValidationErrorKind",
    "error_kinds",
    # Calculator
    "coin_change",
    "ChangeCalculator",
    "CalculatorConfig",
    "ChangeBreakdown",
    "change_from_payload",
    # Contracts
    "ChangeRequestValidator",
    "ChangeResultValidator",
    "validate_change_request",
    "validate_change_result",
]
