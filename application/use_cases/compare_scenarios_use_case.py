"""
Use Case: Compare Scenarios
Os três cenários lado a lado
"""
from ddtrace import tracer

from application.services.cache_service import CacheKeys, CacheService
from application.services.scenario_projection_engine import ScenarioProjectionEngine
from domain.constants import Cache
from domain.entities.projection import ScenarioSet
from domain.value_objects.coordinates import Coordinates
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class CompareScenariosUseCase:
    """Comparação optimistic/moderate/pessimistic, cacheada só se os três forem reais"""

    def __init__(self, engine: ScenarioProjectionEngine, cache_service: CacheService):
        self.engine = engine
        self.cache_service = cache_service

    @tracer.wrap(resource="use_case.compare_scenarios")
    async def execute(self, coordinates: Coordinates) -> ScenarioSet:
        cache_key = CacheKeys.all_scenarios(coordinates)

        cached = await self.cache_service.get(cache_key)
        if cached is not None:
            return cached

        scenario_set = await self.engine.project_all(coordinates)

        logger.info(
            "Comparação de cenários concluída",
            location=str(coordinates),
            sources={s.value: p.source.value for s, p in scenario_set.projections.items()}
        )

        if scenario_set.is_fully_real:
            await self.cache_service.persist(cache_key, scenario_set, Cache.TTL_FUTURE_PROJECTIONS)

        return scenario_set
