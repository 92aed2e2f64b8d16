"""Application DTOs - Data Transfer Objects para contratos de API"""

from application.dtos.requests import (
    GetHistoricalWeatherRequest,
    GetYearlyClimateRequest,
    GetDecadalClimateRequest,
    GetClimateTrendsRequest,
    GetFutureProjectionsRequest,
    GetProjectionPeriodsRequest
)
from application.dtos.responses import (
    YearlyClimateResponse,
    DecadalClimateResponse,
    ClimateTrendsResponse,
    ProjectionPeriodsResponse,
    FutureClimateSummaryResponse
)

__all__ = [
    'GetHistoricalWeatherRequest',
    'GetYearlyClimateRequest',
    'GetDecadalClimateRequest',
    'GetClimateTrendsRequest',
    'GetFutureProjectionsRequest',
    'GetProjectionPeriodsRequest',
    'YearlyClimateResponse',
    'DecadalClimateResponse',
    'ClimateTrendsResponse',
    'ProjectionPeriodsResponse',
    'FutureClimateSummaryResponse'
]
