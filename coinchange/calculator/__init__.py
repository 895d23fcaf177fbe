"""
Greedy change-making calculator.
"""

from coinchange.calculator.greedy import (
    CalculatorConfig,
    ChangeBreakdown,
    ChangeCalculator,
    coin_change,
    validate_amount,
)
from coinchange.calculator.payloads import change_from_payload

__all__ = [
    "coin_change",
    "validate_amount",
    "ChangeCalculator",
    "CalculatorConfig",
    "ChangeBreakdown",
    "change_from_payload",
]
