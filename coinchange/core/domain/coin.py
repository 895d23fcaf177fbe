"""
Coin — Номинал монеты

Immutable Pydantic модель одного допустимого номинала.
Значение: целое строго больше нуля; нулевой номинал отклоняется
с видом ошибки zero_coin.

Монета ведёт себя как целочисленный делитель/модуль/слагаемое справа
от обычного int, чтобы жадный алгоритм мог писать `remaining // coin`
и `divmod(remaining, coin)` без ручной распаковки.
"""

from typing import Any, List, Tuple

from pydantic import BaseModel, Field, field_validator

from coinchange.core.errors import ValidationErrorKind, domain_error


# =============================================================================
# COIN MODEL
# =============================================================================


class Coin(BaseModel):
    """
    Номинал монеты.

    Immutable модель (frozen=True): равенство и hash по значению,
    полный порядок по значению.
    """

    value: int = Field(..., ge=0, strict=True, description="Номинал (целое > 0)")

    model_config = {"frozen": True}

    @field_validator("value")
    @classmethod
    def validate_non_zero(cls, v: int) -> int:
        """Нулевой номинал не является монетой"""
        if v == 0:
            raise domain_error(ValidationErrorKind.ZERO_COIN)
        return v

    @classmethod
    def of(cls, value: int) -> "Coin":
        """Позиционный конструктор: Coin.of(5) == Coin(value=5)"""
        return cls(value=value)

    # -------------------------------------------------------------------------
    # Арифметика с int слева
    # -------------------------------------------------------------------------

    def __radd__(self, other: Any) -> int:
        if isinstance(other, int):
            return other + self.value
        return NotImplemented

    def __rfloordiv__(self, other: Any) -> int:
        if isinstance(other, int):
            return other // self.value
        return NotImplemented

    def __rmod__(self, other: Any) -> int:
        if isinstance(other, int):
            return other % self.value
        return NotImplemented

    def __rdivmod__(self, other: Any) -> Tuple[int, int]:
        if isinstance(other, int):
            return divmod(other, self.value)
        return NotImplemented

    def __int__(self) -> int:
        return self.value

    # -------------------------------------------------------------------------
    # Порядок
    # -------------------------------------------------------------------------

    def __lt__(self, other: Any) -> bool:
        if isinstance(other, Coin):
            return self.value < other.value
        return NotImplemented

    def __le__(self, other: Any) -> bool:
        if isinstance(other, Coin):
            return self.value <= other.value
        return NotImplemented

    def __gt__(self, other: Any) -> bool:
        if isinstance(other, Coin):
            return self.value > other.value
        return NotImplemented

    def __ge__(self, other: Any) -> bool:
        if isinstance(other, Coin):
            return self.value >= other.value
        return NotImplemented


# =============================================================================
# HELPERS
# =============================================================================


def make_coins(*values: int) -> List[Coin]:
    """
    Список монет из целых номиналов.

    Args:
        *values: Номиналы в нужном порядке

    Returns:
        [Coin(value=v) for v in values]

    Raises:
        pydantic.ValidationError: Если какой-либо номинал нулевой или не int
    """
    return [Coin.of(v) for v in values]
