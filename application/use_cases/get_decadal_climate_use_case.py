"""
Use Case: Get Decadal Climate
Resumos anuais agrupados por década
"""
from ddtrace import tracer

from application.dtos.requests import GetDecadalClimateRequest
from application.dtos.responses import DecadalClimateResponse
from application.ports.input.get_decadal_climate_port import IGetDecadalClimateUseCase
from application.services.cache_service import CacheKeys, CacheService
from application.services.yearly_climate_fetcher import YearlyClimateFetcher
from domain.constants import Cache
from domain.services.decadal_aggregator import DecadalAggregator
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class GetDecadalClimateUseCase(IGetDecadalClimateUseCase):
    """Busca anual (até 50 anos) + agregação decadal"""

    def __init__(self, fetcher: YearlyClimateFetcher, cache_service: CacheService):
        self.fetcher = fetcher
        self.cache_service = cache_service

    @tracer.wrap(resource="use_case.decadal_climate")
    async def execute(self, request: GetDecadalClimateRequest) -> DecadalClimateResponse:
        cache_key = CacheKeys.decadal(request.coordinates, request.start_decade, request.end_decade)

        cached = await self.cache_service.get(cache_key)
        if cached is not None:
            return cached

        result = await self.fetcher.fetch_years(request.coordinates, request.years)
        decadal_data = DecadalAggregator.summarize(result.items)

        logger.info(
            "Resumo decadal calculado",
            start_decade=request.start_decade,
            end_decade=request.end_decade,
            decades=len(decadal_data),
            years=len(result.items)
        )

        response = DecadalClimateResponse(
            location=request.coordinates,
            start_decade=request.start_decade,
            end_decade=request.end_decade,
            decadal_data=decadal_data,
            skipped=list(result.skipped)
        )

        if response.complete:
            await self.cache_service.persist(cache_key, response, Cache.TTL_HISTORICAL_YEARLY)

        return response
