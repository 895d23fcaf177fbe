"""
Виды ошибок валидации доменных объектов.

Ошибки поднимаются внутри pydantic-валидаторов как PydanticCustomError,
поэтому наружу выходит обычный pydantic.ValidationError, а вид ошибки
доступен через exc.errors()[i]["type"].
"""

from enum import Enum
from typing import List

from pydantic import ValidationError
from pydantic_core import PydanticCustomError


class ValidationErrorKind(str, Enum):
    """Вид нарушения инварианта при конструировании"""

    ZERO_COIN = "zero_coin"
    MISSING_UNIT_DENOMINATION = "missing_unit_denomination"
    DUPLICATE_DENOMINATION = "duplicate_denomination"


_MESSAGES = {
    ValidationErrorKind.ZERO_COIN: "zero value is not a valid coin",
    ValidationErrorKind.MISSING_UNIT_DENOMINATION: (
        "must provide at least one denomination of value 1"
    ),
    ValidationErrorKind.DUPLICATE_DENOMINATION: "denominations must not repeat",
}


def domain_error(kind: ValidationErrorKind) -> PydanticCustomError:
    """
    Ошибка для подъёма из field_validator.

    Args:
        kind: Вид нарушения

    Returns:
        PydanticCustomError с типом kind.value и стандартным сообщением
    """
    return PydanticCustomError(kind.value, _MESSAGES[kind])


def error_kinds(exc: ValidationError) -> List[ValidationErrorKind]:
    """
    Доменные виды ошибок, присутствующие в pydantic.ValidationError.

    Стандартные ошибки pydantic (int_type, greater_than_equal и т.п.)
    пропускаются.
    """
    known = {kind.value: kind for kind in ValidationErrorKind}
    return [known[err["type"]] for err in exc.errors() if err["type"] in known]
