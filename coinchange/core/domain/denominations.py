"""
DenominationSet — Набор допустимых номиналов

Immutable Pydantic модель: валидируется один раз при конструировании,
дальше инварианты гарантированы на всё время жизни.

Порядок проверок (первая сработавшая определяет ошибку):
1. Нет номинала 1 (включая пустой набор) → missing_unit_denomination
2. Повторяющиеся номиналы → duplicate_denomination

Дубликаты отклоняются, а не схлопываются молча.
"""

from typing import Any, Iterable, Tuple

from pydantic import BaseModel, Field, field_validator

from coinchange.core.domain.coin import Coin, make_coins
from coinchange.core.errors import ValidationErrorKind, domain_error


# =============================================================================
# CONSTANTS
# =============================================================================

UNIT_VALUE = 1


# =============================================================================
# DENOMINATION SET MODEL
# =============================================================================


class DenominationSet(BaseModel):
    """
    Набор различных номиналов, обязательно содержащий единичный.

    Хранит ровно переданные монеты в исходном порядке; порядок
    семантически не значим.
    """

    coins: Tuple[Coin, ...] = Field(..., description="Номиналы без повторов, включая 1")

    model_config = {"frozen": True}

    @field_validator("coins")
    @classmethod
    def validate_denominations(cls, v: Tuple[Coin, ...]) -> Tuple[Coin, ...]:
        """
        Проверка инвариантов набора.

        Единичный номинал гарантирует, что жадное разложение всегда
        заканчивается точной суммой.
        """
        values = [coin.value for coin in v]

        if UNIT_VALUE not in values:
            raise domain_error(ValidationErrorKind.MISSING_UNIT_DENOMINATION)

        if len(set(values)) < len(values):
            raise domain_error(ValidationErrorKind.DUPLICATE_DENOMINATION)

        return v

    @classmethod
    def from_values(cls, values: Iterable[int]) -> "DenominationSet":
        """
        Набор из целых номиналов.

        Args:
            values: Номиналы (каждый > 0)

        Returns:
            Валидированный DenominationSet

        Raises:
            pydantic.ValidationError: zero_coin для нулевого номинала,
                иначе ошибки самого набора
        """
        return cls(coins=make_coins(*values))

    @property
    def values(self) -> Tuple[int, ...]:
        """Номиналы как int в исходном порядке"""
        return tuple(coin.value for coin in self.coins)

    @property
    def largest(self) -> Coin:
        return max(self.coins)

    def descending(self) -> Tuple[Coin, ...]:
        """Монеты от большего номинала к меньшему"""
        return tuple(sorted(self.coins, reverse=True))

    def __len__(self) -> int:
        return len(self.coins)

    def __contains__(self, item: Any) -> bool:
        if isinstance(item, Coin):
            return item in self.coins
        if isinstance(item, int) and not isinstance(item, bool):
            return item in self.values
        return False
