import json
from decimal import Decimal

from pydantic import BaseModel

from janitor.shared.utils import (
    api_response,
    get_logger,
    to_decimal,
    to_weight_input,
)


class TestToDecimal:
    def test_decimal_is_returned_as_is(self):
        value = Decimal("1.5")
        assert to_decimal(value) is value

    def test_float_is_converted_through_str(self):
        assert to_decimal(1.01) == Decimal("1.01")

    def test_str_is_converted(self):
        assert to_decimal("3.0") == Decimal("3.0")


class TestToWeightInput:
    def test_numbers_are_converted_to_str(self):
        assert to_weight_input(1.5) == "1.5"
        assert to_weight_input(2) == "2"
        assert to_weight_input(Decimal("1.01")) == "1.01"

    def test_other_values_are_returned_as_is(self):
        assert to_weight_input("1,5") == "1,5"
        assert to_weight_input(True) is True
        assert to_weight_input(None) is None


class TestApiResponse:
    def test_builds_json_response(self):
        response = api_response(200, {"total_weight": Decimal("3.0")})

        assert response["statusCode"] == 200
        assert response["headers"] == {"Content-Type": "application/json"}
        assert json.loads(response["body"]) == {"total_weight": "3.0"}

    def test_serializes_model_without_none_fields(self):
        class Body(BaseModel):
            error_code: str
            details: list | None = None

        response = api_response(400, Body(error_code="INVALID_FORMAT"))

        assert response["statusCode"] == 400
        assert response["headers"] == {"Content-Type": "application/json"}
        assert json.loads(response["body"]) == {"error_code": "INVALID_FORMAT"}


class TestGetLogger:
    def test_uses_given_service_name(self):
        logger = get_logger("trip-service")
        assert logger.service == "trip-service"

    def test_falls_back_to_environment(self, monkeypatch):
        monkeypatch.setenv("POWERTOOLS_SERVICE_NAME", "janitor")
        assert get_logger().service == "janitor"
