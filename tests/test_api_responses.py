"""
HTTP response framing tests.

Covers the error-class to status mapping and the request handler helper that
an HTTP layer delegates to.
"""

from decimal import Decimal

import pytest

from unitconv.api import ErrorResponse, error_payload, handle_conversion, status_for, success_payload
from unitconv.api import responses
from unitconv.exceptions import (
    ApplicationError,
    ConversionError,
    UnitError,
    ValidationError,
)


class TestStatusMapping:

    @pytest.mark.parametrize("exc, status", [
        (ValidationError("x"), 400),
        (UnitError("x"), 400),
        (ConversionError("x"), 500),
        (ApplicationError("x"), 500),
        (RuntimeError("x"), 500),
    ])
    def test_status_for(self, exc, status):
        assert status_for(exc) == status


class TestPayloads:

    def test_error_payload(self):
        payload = error_payload(UnitError("Unsupported length unit: 'xx'"))

        assert payload == {"error": "Unsupported length unit: 'xx'", "code": "UNIT_ERROR"}

    def test_error_payload_keeps_custom_code(self):
        payload = error_payload(ValidationError("Bad", code="VALUE_NEGATIVE"))

        assert payload["code"] == "VALUE_NEGATIVE"

    def test_error_payload_hides_unexpected_details(self):
        payload = error_payload(KeyError("secret"))

        assert payload == {"error": "Internal server error", "code": "APPLICATION_ERROR"}

    def test_error_payload_validates_against_model(self):
        ErrorResponse(**error_payload(ConversionError("Overflow")))

    def test_success_payload(self):
        assert success_payload(100.0, 1.0, "m", "cm") == {
            "result": 100.0,
            "input": {"value": 1.0, "from": "m", "to": "cm"},
        }


class TestHandleConversion:

    def test_success(self):
        status, payload = handle_conversion("length", {"value": 1, "from": "m", "to": "cm"})

        assert status == 200
        assert payload["result"] == pytest.approx(100.0)
        assert payload["input"] == {"value": 1.0, "from": "m", "to": "cm"}

    def test_numeric_string_is_normalized(self):
        status, payload = handle_conversion("weight", {"value": "150", "from": "lb", "to": "kg"})

        assert status == 200
        assert payload["input"]["value"] == 150.0
        assert payload["result"] == pytest.approx(68.0389, abs=0.001)

    def test_validation_error(self):
        status, payload = handle_conversion("temperature", {"value": -300, "from": "c", "to": "f"})

        assert status == 400
        assert payload["code"] == "VALIDATION_ERROR"
        assert "absolute zero" in payload["error"]

    @pytest.mark.parametrize("value", [10 ** 400, Decimal("sNaN")])
    def test_unrepresentable_value_is_client_error(self, value):
        status, payload = handle_conversion("length", {"value": value, "from": "m", "to": "cm"})

        assert status == 400
        assert payload == {"error": "Value must be a valid number", "code": "VALIDATION_ERROR"}

    def test_unit_error(self):
        status, payload = handle_conversion("length", {"value": 5, "from": "c", "to": "m"})

        assert status == 400
        assert payload["code"] == "UNIT_ERROR"

    def test_missing_fields(self):
        status, payload = handle_conversion("length", {"value": 5, "from": "m"})

        assert status == 400
        assert payload == {"error": "Missing required fields: to", "code": "VALIDATION_ERROR"}

    def test_unknown_category(self):
        status, payload = handle_conversion("volume", {"value": 1, "from": "l", "to": "ml"})

        assert status == 400
        assert payload["code"] == "UNIT_ERROR"

    def test_unexpected_error_is_wrapped(self, monkeypatch, caplog):
        """Non-taxonomy exceptions become ApplicationError with status 500."""
        def broken(request):
            raise ZeroDivisionError("division by zero")

        monkeypatch.setattr(responses, "convert_request", broken)

        status, payload = handle_conversion("length", {"value": 1, "from": "m", "to": "cm"})

        assert status == 500
        assert payload == {"error": "Unexpected error during conversion", "code": "APPLICATION_ERROR"}
        assert "Unexpected error converting" in caplog.text
