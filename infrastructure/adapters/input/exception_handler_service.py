"""
Exception Handler Service
Centraliza tratamento de exceções com logging estruturado
"""
import json
from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.event_handler.exceptions import NotFoundError

from domain.exceptions import (
    DomainException,
    MissingParameterException,
    InvalidCoordinatesException,
    InvalidYearRangeException,
    InvalidDateRangeException,
    InvalidScenarioException,
    InvalidPeriodException,
    UpstreamServiceException,
)
from shared.config.logger_config import logger as app_logger


def _json_response(status_code: int, body: dict) -> Response:
    return Response(
        status_code=status_code,
        content_type="application/json",
        body=json.dumps(body)
    )


class ExceptionHandlerService:
    """
    Service para centralizar tratamento de exceções da aplicação
    Responsável por converter exceções em respostas HTTP apropriadas
    """
    logger = app_logger

    def __init__(self, logger=app_logger):
        # Permite injeção de logger compartilhado para manter contexto de correlação
        if logger:
            ExceptionHandlerService.logger = logger

    @staticmethod
    def _client_error(ex: DomainException, error: str) -> Response:
        ExceptionHandlerService.logger.warning(error, error=str(ex), details=ex.details)
        return _json_response(400, {
            "type": type(ex).__name__,
            "error": error,
            "message": str(ex),
            "details": ex.details
        })

    @staticmethod
    def handle_missing_parameter(ex: MissingParameterException) -> Response:
        """Handle 400 - Missing query parameter"""
        return ExceptionHandlerService._client_error(ex, "Missing parameter")

    @staticmethod
    def handle_invalid_coordinates(ex: InvalidCoordinatesException) -> Response:
        """Handle 400 - Invalid coordinates"""
        return ExceptionHandlerService._client_error(ex, "Invalid coordinates")

    @staticmethod
    def handle_invalid_year_range(ex: InvalidYearRangeException) -> Response:
        """Handle 400 - Invalid years/decades"""
        return ExceptionHandlerService._client_error(ex, "Invalid year range")

    @staticmethod
    def handle_invalid_date_range(ex: InvalidDateRangeException) -> Response:
        """Handle 400 - Invalid date range"""
        return ExceptionHandlerService._client_error(ex, "Invalid date range")

    @staticmethod
    def handle_invalid_scenario(ex: InvalidScenarioException) -> Response:
        """Handle 400 - Unknown scenario"""
        return ExceptionHandlerService._client_error(ex, "Invalid scenario")

    @staticmethod
    def handle_invalid_period(ex: InvalidPeriodException) -> Response:
        """Handle 400 - Unknown projection period"""
        return ExceptionHandlerService._client_error(ex, "Invalid period")

    @staticmethod
    def handle_upstream_error(ex: UpstreamServiceException) -> Response:
        """Handle 502 - Upstream Open-Meteo error"""
        ExceptionHandlerService.logger.error("Open-Meteo provider error", error=str(ex), details=ex.details, exc_info=True)
        return _json_response(502, {
            "type": type(ex).__name__,
            "error": "Upstream provider error",
            "message": str(ex),
            "details": ex.details
        })

    @staticmethod
    def handle_not_found(ex: NotFoundError) -> Response:
        """Handle 404 - Rota inexistente"""
        ExceptionHandlerService.logger.warning("Route not found", error=str(ex))
        return _json_response(404, {
            "error": "Not found",
            "message": "Route not found"
        })

    @staticmethod
    def handle_value_error(ex: ValueError) -> Response:
        """Handle 400 - Validation errors (ValueError)"""
        ExceptionHandlerService.logger.warning("Validation error", error=str(ex))
        return _json_response(400, {
            "type": "ValidationError",
            "error": "Validation error",
            "message": str(ex)
        })

    @staticmethod
    def handle_unexpected_error(ex: Exception) -> Response:
        """Handle 500 - Unexpected errors"""
        ExceptionHandlerService.logger.error("Unexpected error", error=str(ex), exc_info=True)
        return _json_response(500, {
            "error": "Internal server error",
            "message": "An unexpected error occurred"
        })
