"""
Use Case: Get Yearly Climate
Resumos anuais para uma lista de anos (até 10 por chamada)
"""
from ddtrace import tracer

from application.dtos.requests import GetYearlyClimateRequest
from application.dtos.responses import YearlyClimateResponse
from application.ports.input.get_yearly_climate_port import IGetYearlyClimateUseCase
from application.services.cache_service import CacheKeys, CacheService
from application.services.yearly_climate_fetcher import YearlyClimateFetcher
from domain.constants import Cache
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class GetYearlyClimateUseCase(IGetYearlyClimateUseCase):
    """
    Resumos anuais com resultado parcial explícito

    Apenas respostas completas vão para o cache; um conjunto parcial é
    devolvido ao cliente mas buscado de novo na próxima chamada.
    """

    def __init__(self, fetcher: YearlyClimateFetcher, cache_service: CacheService):
        self.fetcher = fetcher
        self.cache_service = cache_service

    @tracer.wrap(resource="use_case.yearly_climate")
    async def execute(self, request: GetYearlyClimateRequest) -> YearlyClimateResponse:
        cache_key = CacheKeys.historical(request.coordinates, request.years)

        cached = await self.cache_service.get(cache_key)
        if cached is not None:
            return cached

        result = await self.fetcher.fetch_years(request.coordinates, request.years)
        response = YearlyClimateResponse.from_result(request.coordinates, request.years, result)

        if response.complete:
            await self.cache_service.persist(cache_key, response, Cache.TTL_HISTORICAL_YEARLY)
        else:
            logger.info(
                "Resultado parcial não será cacheado",
                cache_key=cache_key,
                skipped_years=result.skipped_identifiers
            )

        return response
