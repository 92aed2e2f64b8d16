"""
Input Ports - Interfaces dos casos de uso expostos ao adapter HTTP
"""
from .get_historical_weather_port import IGetHistoricalWeatherUseCase
from .get_yearly_climate_port import IGetYearlyClimateUseCase
from .get_decadal_climate_port import IGetDecadalClimateUseCase
from .get_climate_trends_port import IGetClimateTrendsUseCase
from .get_future_projections_port import IGetFutureProjectionsUseCase
