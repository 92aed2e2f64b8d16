"""
Use Case: Get Climate Trends
Regressão linear sobre resumos anuais de um intervalo contínuo
"""
from ddtrace import tracer

from application.dtos.requests import GetClimateTrendsRequest
from application.dtos.responses import ClimateTrendsResponse
from application.ports.input.get_climate_trends_port import IGetClimateTrendsUseCase
from application.services.cache_service import CacheKeys, CacheService
from application.services.yearly_climate_fetcher import YearlyClimateFetcher
from domain.constants import Cache
from domain.services.trend_analyzer import TrendAnalyzer
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class GetClimateTrendsUseCase(IGetClimateTrendsUseCase):
    """
    Tendências de temperatura média e precipitação anual

    Se a busca parcial deixar menos de 10 anos, trends volta vazio
    (não é erro).
    """

    def __init__(self, fetcher: YearlyClimateFetcher, cache_service: CacheService):
        self.fetcher = fetcher
        self.cache_service = cache_service

    @tracer.wrap(resource="use_case.climate_trends")
    async def execute(self, request: GetClimateTrendsRequest) -> ClimateTrendsResponse:
        cache_key = CacheKeys.trends(request.coordinates, request.start_year, request.end_year)

        cached = await self.cache_service.get(cache_key)
        if cached is not None:
            return cached

        result = await self.fetcher.fetch_years(request.coordinates, request.years)
        yearly_data = sorted(result.items, key=lambda y: y.year)
        trends = TrendAnalyzer.calculate_climate_trends(yearly_data)

        logger.info(
            "Tendências calculadas",
            start_year=request.start_year,
            end_year=request.end_year,
            data_years=len(yearly_data),
            trends=[f"{t.metric}:{t.trend_direction.value}" for t in trends]
        )

        response = ClimateTrendsResponse(
            location=request.coordinates,
            start_year=request.start_year,
            end_year=request.end_year,
            trends=trends,
            yearly_data=yearly_data,
            skipped=list(result.skipped)
        )

        if response.complete:
            await self.cache_service.persist(cache_key, response, Cache.TTL_CLIMATE_TRENDS)

        return response
