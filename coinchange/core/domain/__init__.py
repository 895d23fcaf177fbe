"""
Domain models and value objects.

Contains the coin denomination value object and the validated set of
denominations.
"""

from coinchange.core.domain.coin import Coin, make_coins
from coinchange.core.domain.denominations import UNIT_VALUE, DenominationSet

__all__ = [
    # Coin model
    "Coin",
    "make_coins",
    # Denomination set
    "DenominationSet",
    "UNIT_VALUE",
]
