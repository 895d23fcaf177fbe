"""
Tests for JSON Schema Contract Validators

Тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей, типов и constraints
- change_from_payload: контракт + доменные инварианты
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError as ContractError
from pydantic import ValidationError

from coinchange.calculator import change_from_payload
from coinchange.core.contracts import (
    ChangeRequestValidator,
    ChangeResultValidator,
    SchemaLoader,
    validate_change_request,
    validate_change_result,
)
from coinchange.core.errors import ValidationErrorKind, error_kinds


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_request():
    """Валидный change_request."""
    return {"amount": 13, "denominations": [5, 1, 2]}


@pytest.fixture
def valid_result():
    """Валидный change_result."""
    return {
        "amount": 13,
        "coins": [5, 5, 2, 1],
        "counts": [
            {"value": 5, "count": 2},
            {"value": 2, "count": 1},
            {"value": 1, "count": 1},
        ],
        "coin_count": 4,
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    @pytest.mark.parametrize("schema_name", ["change_request", "change_result"])
    def test_packaged_schemas_load(self, schema_name: str) -> None:
        schema = SchemaLoader().load_schema(schema_name)
        assert schema["title"] == schema_name

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("change_request") is loader.load_schema("change_request")

    def test_validator_compiled_once(self) -> None:
        loader = SchemaLoader()
        assert loader.validator_for("change_result") is loader.validator_for("change_result")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_schema_dir(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "missing")

    def test_invalid_schema_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 5}), encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# CHANGE REQUEST
# =============================================================================


class TestChangeRequestContract:
    """Тесты контракта change_request"""

    def test_valid_request(self, valid_request) -> None:
        validate_change_request(valid_request)
        assert ChangeRequestValidator().is_valid(valid_request)

    def test_missing_amount(self, valid_request) -> None:
        del valid_request["amount"]
        with pytest.raises(ContractError, match="'amount' is a required property"):
            validate_change_request(valid_request)

    @pytest.mark.parametrize("amount", [-1, 2.5, 3.0, True, "3", None])
    def test_invalid_amount(self, valid_request, amount) -> None:
        valid_request["amount"] = amount
        assert not ChangeRequestValidator().is_valid(valid_request)

    @pytest.mark.parametrize("denominations", [[], [0, 1], [1, -2], [1, 2.5], [1.0, 2], [True, 2], "1,2"])
    def test_invalid_denominations(self, valid_request, denominations) -> None:
        valid_request["denominations"] = denominations
        with pytest.raises(ContractError):
            validate_change_request(valid_request)

    def test_additional_properties_rejected(self, valid_request) -> None:
        valid_request["currency"] = "EUR"
        assert not ChangeRequestValidator().is_valid(valid_request)

    def test_iter_errors_reports_all(self) -> None:
        errors = list(ChangeRequestValidator().iter_errors({"amount": -1}))
        assert len(errors) == 2

    def test_domain_invariants_not_in_contract(self) -> None:
        """Повторы и отсутствие 1 проверяет DenominationSet, а не схема"""
        validate_change_request({"amount": 3, "denominations": [2, 2]})


# =============================================================================
# CHANGE RESULT
# =============================================================================


class TestChangeResultContract:
    """Тесты контракта change_result"""

    def test_valid_result(self, valid_result) -> None:
        validate_change_result(valid_result)

    def test_zero_count_rejected(self, valid_result) -> None:
        valid_result["counts"][0]["count"] = 0
        assert not ChangeResultValidator().is_valid(valid_result)

    def test_missing_counts(self, valid_result) -> None:
        del valid_result["counts"]
        with pytest.raises(ContractError):
            validate_change_result(valid_result)

    def test_coins_not_descending(self, valid_result) -> None:
        valid_result["coins"] = [1, 2, 5, 5]
        with pytest.raises(ContractError, match="descending order"):
            validate_change_result(valid_result)

    def test_coins_do_not_sum_to_amount(self, valid_result) -> None:
        valid_result["amount"] = 14
        with pytest.raises(ContractError, match="expected amount 14"):
            validate_change_result(valid_result)

    def test_coin_count_mismatch(self, valid_result) -> None:
        valid_result["coin_count"] = 3
        with pytest.raises(ContractError, match="coin_count 3"):
            validate_change_result(valid_result)

    def test_counts_mismatch(self, valid_result) -> None:
        valid_result["counts"][0]["count"] = 1
        with pytest.raises(ContractError, match="counts do not match coins"):
            validate_change_result(valid_result)

    def test_invariants_skipped_on_schema_errors(self, valid_result) -> None:
        """При ошибке схемы инварианты не проверяются"""
        valid_result["coins"] = [1, "2"]
        errors = list(ChangeResultValidator().iter_errors(valid_result))

        assert len(errors) == 1
        assert errors[0].validator == "type"

    def test_result_payload_of_calculator_is_valid(self) -> None:
        payload = change_from_payload({"amount": 388, "denominations": [1, 2, 5, 10, 20, 50, 100, 200]})
        assert ChangeResultValidator().is_valid(payload)


# =============================================================================
# CHANGE FROM PAYLOAD
# =============================================================================


class TestChangeFromPayload:
    """Тесты change_from_payload"""

    def test_happy_path(self, valid_request, valid_result) -> None:
        assert change_from_payload(valid_request) == valid_result

    def test_zero_amount(self) -> None:
        payload = change_from_payload({"amount": 0, "denominations": [1]})
        assert payload == {"amount": 0, "coins": [], "counts": [], "coin_count": 0}

    def test_contract_violation(self) -> None:
        with pytest.raises(ContractError):
            change_from_payload({"amount": -3, "denominations": [1]})

    @pytest.mark.parametrize(
        "request_data",
        [
            {"amount": 3.0, "denominations": [1, 2]},
            {"amount": 3, "denominations": [1.0, 2]},
        ],
    )
    def test_integral_floats_rejected_by_contract(self, request_data) -> None:
        """3.0 и 1.0 отклоняются контрактом, до доменных моделей"""
        with pytest.raises(ContractError, match="is not of type 'integer'"):
            change_from_payload(request_data)

    def test_missing_unit_denomination(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            change_from_payload({"amount": 4, "denominations": [2, 5]})

        assert error_kinds(exc_info.value) == [ValidationErrorKind.MISSING_UNIT_DENOMINATION]

    def test_duplicate_denomination(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            change_from_payload({"amount": 4, "denominations": [1, 2, 2]})

        assert error_kinds(exc_info.value) == [ValidationErrorKind.DUPLICATE_DENOMINATION]
