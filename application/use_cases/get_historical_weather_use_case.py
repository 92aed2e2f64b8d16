"""
Use Case: Get Historical Weather
Série diária bruta do archive, memoizada por intervalo de datas
"""
from ddtrace import tracer

from application.dtos.requests import GetHistoricalWeatherRequest
from application.ports.input.get_historical_weather_port import IGetHistoricalWeatherUseCase
from application.ports.output.climate_archive_port import IClimateArchiveProvider
from application.services.cache_service import CacheKeys, CacheService
from domain.constants import Cache
from domain.entities.historical_weather import HistoricalWeatherSeries
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class GetHistoricalWeatherUseCase(IGetHistoricalWeatherUseCase):
    """Passthrough do archive; erros do upstream propagam para o adapter HTTP"""

    def __init__(self, archive_provider: IClimateArchiveProvider, cache_service: CacheService):
        self.archive_provider = archive_provider
        self.cache_service = cache_service

    @tracer.wrap(resource="use_case.historical_weather")
    async def execute(self, request: GetHistoricalWeatherRequest) -> HistoricalWeatherSeries:
        cache_key = CacheKeys.historical_daily(request.coordinates, request.start_date, request.end_date)

        cached = await self.cache_service.get(cache_key)
        if cached is not None:
            return cached

        series = await self.archive_provider.get_historical_weather(
            request.coordinates,
            start_date=request.start_date,
            end_date=request.end_date
        )

        logger.info(
            "Série histórica obtida",
            location=str(request.coordinates),
            start_date=request.start_date,
            end_date=request.end_date,
            days=len(series.daily_records)
        )

        await self.cache_service.persist(cache_key, series, Cache.TTL_HISTORICAL_DAILY)
        return series
