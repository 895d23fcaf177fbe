"""
JSON Schema Contract Validators

Валидация dict-представлений запроса и результата разложения.

Схемы (Draft 2020-12, поставляются вместе с пакетом):
- change_request.json (amount + denominations)
- change_result.json (ChangeBreakdown.to_payload())

Тип "integer" сужен до настоящих int: JSON Schema по умолчанию принимает
3.0 как integer, а Coin и validate_amount принимают только int.

Контракт результата дополнительно проверяет то, что схема выразить не
может: убывание номиналов, сумму монет, coin_count и согласованность counts.
Доменные инварианты запроса (единичный номинал, отсутствие повторов)
остаются за DenominationSet.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, List

from jsonschema import Draft202012Validator, SchemaError, ValidationError
from jsonschema.exceptions import best_match
from jsonschema.protocols import Validator
from jsonschema.validators import extend

logger = logging.getLogger(__name__)


# =============================================================================
# STRICT INTEGER VALIDATOR
# =============================================================================


def _is_strict_integer(checker: Any, instance: Any) -> bool:
    return isinstance(instance, int) and not isinstance(instance, bool)


StrictIntegerValidator = extend(
    Draft202012Validator,
    type_checker=Draft202012Validator.TYPE_CHECKER.redefine("integer", _is_strict_integer),
)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик схем и кэш скомпилированных валидаторов.

    Каждая схема читается и проходит meta-validation один раз; validator_for
    возвращает один и тот же объект валидатора для одного имени.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}
        self._validators: Dict[str, Validator] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'change_request')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            StrictIntegerValidator.check_schema(schema)
        except SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        logger.debug("Loaded schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema

    def validator_for(self, schema_name: str) -> Validator:
        """Скомпилированный валидатор схемы (один на имя)"""
        if schema_name not in self._validators:
            self._validators[schema_name] = StrictIntegerValidator(self.load_schema(schema_name))
        return self._validators[schema_name]


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Контракт = схема + инварианты, не выражаемые схемой.

    Инварианты проверяются только для данных, уже прошедших схему, поэтому
    check_invariants может полагаться на типы полей.
    """

    schema_name: str = ""

    def __init__(self, loader: SchemaLoader | None = None):
        self.validator = (loader or _SCHEMA_LOADER).validator_for(self.schema_name)

    def check_invariants(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return iter(())

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Ошибки схемы; если их нет, нарушения инвариантов"""
        schema_errors = list(self.validator.iter_errors(data))
        if schema_errors:
            yield from schema_errors
        else:
            yield from self.check_invariants(data)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против контракта.

        Raises:
            ValidationError: Наиболее релевантная ошибка схемы либо первое
                нарушение инварианта
        """
        error = best_match(self.validator.iter_errors(data))
        if error is not None:
            raise error

        for error in self.check_invariants(data):
            raise error

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return next(self.iter_errors(data), None) is None


class ChangeRequestValidator(ContractValidator):
    """Контракт change_request: только схема."""

    schema_name = "change_request"


class ChangeResultValidator(ContractValidator):
    """Контракт change_result: схема + согласованность разложения."""

    schema_name = "change_result"

    def check_invariants(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        coins: List[int] = data["coins"]

        if any(a < b for a, b in zip(coins, coins[1:])):
            yield ValidationError(f"coins must be in descending order: {coins}")

        if sum(coins) != data["amount"]:
            yield ValidationError(f"coins sum to {sum(coins)}, expected amount {data['amount']}")

        if data["coin_count"] != len(coins):
            yield ValidationError(f"coin_count {data['coin_count']} != number of coins {len(coins)}")

        expanded = [entry["value"] for entry in data["counts"] for _ in range(entry["count"])]
        if expanded != coins:
            yield ValidationError("counts do not match coins")


_REQUEST_VALIDATOR = ChangeRequestValidator()
_RESULT_VALIDATOR = ChangeResultValidator()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_change_request(data: Dict[str, Any]) -> None:
    """
    Валидация change_request данных.

    Raises:
        ValidationError: Если данные не соответствуют контракту
    """
    _REQUEST_VALIDATOR.validate(data)


def validate_change_result(data: Dict[str, Any]) -> None:
    """
    Валидация change_result данных.

    Raises:
        ValidationError: Если данные не соответствуют контракту
    """
    _RESULT_VALIDATOR.validate(data)
