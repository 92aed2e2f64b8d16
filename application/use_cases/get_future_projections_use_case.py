"""
Use Case: Get Future Projections
Projeção de um cenário com cache apenas para dados reais
"""
from ddtrace import tracer

from application.dtos.requests import GetFutureProjectionsRequest
from application.ports.input.get_future_projections_port import IGetFutureProjectionsUseCase
from application.services.cache_service import CacheKeys, CacheService
from application.services.scenario_projection_engine import ScenarioProjectionEngine
from domain.constants import Cache
from domain.entities.projection import ScenarioProjection


class GetFutureProjectionsUseCase(IGetFutureProjectionsUseCase):

    def __init__(self, engine: ScenarioProjectionEngine, cache_service: CacheService):
        self.engine = engine
        self.cache_service = cache_service

    @tracer.wrap(resource="use_case.future_projections")
    async def execute(self, request: GetFutureProjectionsRequest) -> ScenarioProjection:
        cache_key = CacheKeys.future_projections(request.coordinates, request.scenario)

        cached = await self.cache_service.get(cache_key)
        if cached is not None:
            return cached

        projection = await self.engine.project(request.coordinates, request.scenario)

        # Sintético não é cacheado: próxima chamada tenta o climate API de novo
        if not projection.is_synthetic:
            await self.cache_service.persist(cache_key, projection, Cache.TTL_FUTURE_PROJECTIONS)

        return projection
