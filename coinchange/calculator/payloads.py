"""
Разложение по dict-запросу

Связывает контракты с доменом: форма запроса проверяется JSON Schema,
инварианты номиналов проверяет DenominationSet, результат проверяется
схемой change_result.
"""

from typing import Any, Dict

from coinchange.calculator.greedy import ChangeCalculator
from coinchange.core.contracts import validate_change_request, validate_change_result
from coinchange.core.domain.denominations import DenominationSet


def change_from_payload(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Разложение суммы по запросу {"amount": ..., "denominations": [...]}.

    Args:
        data: Запрос по контракту change_request

    Returns:
        Результат по контракту change_result

    Raises:
        jsonschema.ValidationError: Если запрос не соответствует схеме
        pydantic.ValidationError: Если номиналы нарушают инварианты набора
    """
    validate_change_request(data)

    denominations = DenominationSet.from_values(data["denominations"])
    payload = ChangeCalculator(denominations).calculate(data["amount"]).to_payload()

    validate_change_result(payload)
    return payload
