"""
Жадное разложение суммы на монеты

Алгоритм:
1. Номиналы сортируются по убыванию
2. Для каждого номинала d: count, remaining = divmod(remaining, d)
3. Монета d добавляется count раз

Единичный номинал (инвариант DenominationSet) гарантирует, что после
последнего шага остаток равен нулю.

Жадный выбор НЕ гарантирует минимальное число монет для произвольных
(неканонических) наборов номиналов. Это наблюдаемое поведение, и оно
сохраняется как есть.
"""

import logging
from dataclasses import dataclass
from itertools import groupby
from typing import Any, Dict, List, Optional, Tuple

from coinchange.core.domain.coin import Coin
from coinchange.core.domain.denominations import DenominationSet

logger = logging.getLogger(__name__)


# =============================================================================
# VALIDATION
# =============================================================================


def validate_amount(amount: int) -> None:
    """
    Проверка суммы для разложения.

    Args:
        amount: Сумма в минимальных единицах

    Raises:
        TypeError: Если сумма не int (bool тоже отклоняется)
        ValueError: Если сумма отрицательная
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise TypeError(f"Amount must be an integer, got {type(amount).__name__}")

    if amount < 0:
        raise ValueError(f"Amount cannot be negative: {amount}")


# =============================================================================
# GREEDY DECOMPOSITION
# =============================================================================


def coin_change(amount: int, denominations: DenominationSet) -> List[Coin]:
    """
    Разложение суммы на монеты, начиная с наибольшего номинала.

    Набор номиналов повторно не валидируется: DenominationSet уже
    гарантирует наличие единичного номинала.

    Args:
        amount: Сумма (int >= 0)
        denominations: Валидированный набор номиналов

    Returns:
        Монеты по убыванию номинала, сумма которых равна amount.
        Для amount == 0 пустой список.

    Raises:
        TypeError, ValueError: Если amount не является int >= 0
    """
    validate_amount(amount)

    coins: List[Coin] = []
    remaining = amount

    for coin in denominations.descending():
        count, remaining = divmod(remaining, coin)
        coins.extend([coin] * count)

    logger.debug(
        "coin_change amount=%d denominations=%s coins=%d",
        amount,
        denominations.values,
        len(coins),
    )
    return coins


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class ChangeBreakdown:
    """Результат разложения с разбивкой по номиналам."""

    amount: int
    coins: Tuple[Coin, ...]

    # (номинал, количество) по убыванию номинала, только count > 0
    counts: Tuple[Tuple[Coin, int], ...]

    coin_count: int

    @classmethod
    def from_coins(cls, amount: int, coins: List[Coin]) -> "ChangeBreakdown":
        """
        Сборка результата из списка coin_change.

        Args:
            amount: Запрошенная сумма
            coins: Монеты по убыванию номинала
        """
        counts = tuple((coin, len(list(group))) for coin, group in groupby(coins))
        return cls(
            amount=amount,
            coins=tuple(coins),
            counts=counts,
            coin_count=len(coins),
        )

    def to_payload(self) -> Dict[str, Any]:
        """Представление в виде dict по контракту change_result"""
        return {
            "amount": self.amount,
            "coins": [coin.value for coin in self.coins],
            "counts": [{"value": coin.value, "count": count} for coin, count in self.counts],
            "coin_count": self.coin_count,
        }


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CalculatorConfig:
    """Конфигурация калькулятора сдачи.

    max_amount ограничивает принимаемые суммы: результат растёт линейно
    с суммой при малых номиналах. None означает без ограничения.
    """

    max_amount: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_amount is not None:
            validate_amount(self.max_amount)


# =============================================================================
# CALCULATOR
# =============================================================================


class ChangeCalculator:
    """Калькулятор сдачи для фиксированного набора номиналов."""

    def __init__(
        self,
        denominations: DenominationSet,
        config: Optional[CalculatorConfig] = None,
    ):
        """Инициализация калькулятора.

        Args:
            denominations: Валидированный набор номиналов
            config: конфигурация (опционально, используется default)
        """
        self.denominations = denominations
        self.config = config or CalculatorConfig()

    def calculate(self, amount: int) -> ChangeBreakdown:
        """Разложение суммы с разбивкой по номиналам.

        Args:
            amount: Сумма (int >= 0)

        Returns:
            ChangeBreakdown; breakdown.coins совпадает с coin_change

        Raises:
            TypeError: Если amount не int
            ValueError: Если amount отрицательный или больше config.max_amount
        """
        validate_amount(amount)

        max_amount = self.config.max_amount
        if max_amount is not None and amount > max_amount:
            raise ValueError(f"Amount {amount} exceeds configured maximum {max_amount}")

        return ChangeBreakdown.from_coins(amount, coin_change(amount, self.denominations))
