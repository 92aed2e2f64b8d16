"""Application Use Cases - um por contrato de entrada"""
from application.use_cases.get_historical_weather_use_case import GetHistoricalWeatherUseCase
from application.use_cases.get_yearly_climate_use_case import GetYearlyClimateUseCase
from application.use_cases.get_decadal_climate_use_case import GetDecadalClimateUseCase
from application.use_cases.get_climate_trends_use_case import GetClimateTrendsUseCase
from application.use_cases.get_future_projections_use_case import GetFutureProjectionsUseCase
from application.use_cases.compare_scenarios_use_case import CompareScenariosUseCase
from application.use_cases.get_projection_periods_use_case import GetProjectionPeriodsUseCase
from application.use_cases.get_future_climate_summary_use_case import GetFutureClimateSummaryUseCase

__all__ = [
    'GetHistoricalWeatherUseCase',
    'GetYearlyClimateUseCase',
    'GetDecadalClimateUseCase',
    'GetClimateTrendsUseCase',
    'GetFutureProjectionsUseCase',
    'CompareScenariosUseCase',
    'GetProjectionPeriodsUseCase',
    'GetFutureClimateSummaryUseCase'
]
