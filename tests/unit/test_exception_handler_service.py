"""
Testes para ExceptionHandlerService
Garante cobertura completa do tratamento de exceções
"""
import json
import pytest
from aws_lambda_powertools.event_handler.exceptions import NotFoundError
from infrastructure.adapters.input.exception_handler_service import ExceptionHandlerService
from domain.exceptions import (
    MissingParameterException,
    InvalidCoordinatesException,
    InvalidYearRangeException,
    InvalidDateRangeException,
    InvalidScenarioException,
    InvalidPeriodException,
    UpstreamServiceException,
    UpstreamPayloadException
)


class TestExceptionHandlerService:
    """Testes para o serviço de tratamento de exceções"""

    def test_handle_missing_parameter(self):
        """REGRA: parâmetro ausente → 400 listando os nomes"""
        ex = MissingParameterException(
            "Missing required parameters: lat, lon, years",
            details={"missing": ["years"]}
        )
        response = ExceptionHandlerService.handle_missing_parameter(ex)

        assert response.status_code == 400
        body = json.loads(response.body)
        assert body["type"] == "MissingParameterException"
        assert body["error"] == "Missing parameter"
        assert body["message"] == "Missing required parameters: lat, lon, years"
        assert body["details"] == {"missing": ["years"]}

    @pytest.mark.parametrize("handler,exception_class,error", [
        (ExceptionHandlerService.handle_invalid_coordinates, InvalidCoordinatesException, "Invalid coordinates"),
        (ExceptionHandlerService.handle_invalid_year_range, InvalidYearRangeException, "Invalid year range"),
        (ExceptionHandlerService.handle_invalid_date_range, InvalidDateRangeException, "Invalid date range"),
        (ExceptionHandlerService.handle_invalid_scenario, InvalidScenarioException, "Invalid scenario"),
        (ExceptionHandlerService.handle_invalid_period, InvalidPeriodException, "Invalid period"),
    ])
    def test_client_errors_return_400(self, handler, exception_class, error):
        ex = exception_class("bad input", details={"value": "x"})

        response = handler(ex)

        assert response.status_code == 400
        body = json.loads(response.body)
        assert body["type"] == exception_class.__name__
        assert body["error"] == error
        assert body["message"] == "bad input"

    def test_handle_upstream_error(self):
        """REGRA: falha do Open-Meteo → 502"""
        ex = UpstreamServiceException(
            "Historical weather request failed with status 500",
            details={"status": 500}
        )
        response = ExceptionHandlerService.handle_upstream_error(ex)

        assert response.status_code == 502
        body = json.loads(response.body)
        assert body["error"] == "Upstream provider error"
        assert body["details"]["status"] == 500

    def test_payload_error_is_upstream_error(self):
        ex = UpstreamPayloadException("Invalid response format from Open-Meteo: missing daily data")

        response = ExceptionHandlerService.handle_upstream_error(ex)

        assert response.status_code == 502
        assert json.loads(response.body)["type"] == "UpstreamPayloadException"

    def test_handle_value_error(self):
        response = ExceptionHandlerService.handle_value_error(ValueError("bad number"))

        assert response.status_code == 400
        body = json.loads(response.body)
        assert body["type"] == "ValidationError"
        assert body["message"] == "bad number"

    def test_handle_unexpected_error_hides_details(self):
        """REGRA: 500 nunca expõe a mensagem interna"""
        response = ExceptionHandlerService.handle_unexpected_error(RuntimeError("db password leaked"))

        assert response.status_code == 500
        body = json.loads(response.body)
        assert body == {"error": "Internal server error", "message": "An unexpected error occurred"}

    def test_handle_not_found(self):
        response = ExceptionHandlerService.handle_not_found(NotFoundError())

        assert response.status_code == 404
        body = json.loads(response.body)
        assert body == {"error": "Not found", "message": "Route not found"}
