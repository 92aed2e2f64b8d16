"""
Serviço de cache genérico para a camada de aplicação.
Centraliza chaves, TTLs e leitura/gravação sem expor detalhes de adapters.
"""
from typing import Any, Iterable, List, Optional

from application.ports.output.async_cache_repository_port import IAsyncCacheRepository
from domain.constants import Cache
from domain.value_objects.climate_scenario import ClimateScenario
from domain.value_objects.coordinates import Coordinates
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


def _location(coordinates: Coordinates) -> str:
    return coordinates.cache_key(Cache.COORDINATE_PRECISION)


def _years_suffix(years: Iterable[int]) -> str:
    """
    "2015-2020" para sequência crescente contígua, "2020,2001,2005" caso contrário

    A ordem da requisição faz parte da chave: a resposta cacheada
    preserva requestedYears e a ordem de yearlyData.
    """
    requested: List[int] = list(years)
    if not requested:
        return ""
    if requested == list(range(requested[0], requested[0] + len(requested))):
        return f"{requested[0]}-{requested[-1]}"
    return ",".join(str(year) for year in requested)


class CacheKeys:
    """Chaves determinísticas: prefixo, coordenadas com 2 casas e sufixo da consulta"""

    @staticmethod
    def historical_daily(coordinates: Coordinates, start_date: str, end_date: str) -> str:
        return f"{Cache.PREFIX_HISTORICAL_DAILY}:{_location(coordinates)}:{start_date}:{end_date}"

    @staticmethod
    def historical(coordinates: Coordinates, years: Iterable[int]) -> str:
        return f"{Cache.PREFIX_HISTORICAL}:{_location(coordinates)}:{_years_suffix(years)}"

    @staticmethod
    def decadal(coordinates: Coordinates, start_decade: int, end_decade: int) -> str:
        return f"{Cache.PREFIX_DECADAL}:{_location(coordinates)}:{start_decade}-{end_decade}"

    @staticmethod
    def trends(coordinates: Coordinates, start_year: int, end_year: int) -> str:
        return f"{Cache.PREFIX_TRENDS}:{_location(coordinates)}:{start_year}-{end_year}"

    @staticmethod
    def future_projections(coordinates: Coordinates, scenario: ClimateScenario) -> str:
        return f"{Cache.PREFIX_FUTURE_PROJECTIONS}:{_location(coordinates)}:{scenario.value}"

    @staticmethod
    def all_scenarios(coordinates: Coordinates) -> str:
        return f"{Cache.PREFIX_ALL_SCENARIOS}:{_location(coordinates)}"


class CacheService:
    """Coordena operações de cache assíncronas via porta de saída."""

    def __init__(self, cache_repository: Optional[IAsyncCacheRepository]):
        self.cache_repository = cache_repository

    def _cache_available(self) -> bool:
        return bool(self.cache_repository and self.cache_repository.is_enabled())

    async def get(self, key: str) -> Optional[Any]:
        """
        Busca valor; None em miss ou com cache desabilitado.
        """
        if not self._cache_available():
            return None

        value = await self.cache_repository.get(key)
        if value is not None:
            logger.info("Cache HIT", cache_key=key)
        else:
            logger.debug("Cache MISS", cache_key=key)
        return value

    async def persist(self, key: str, value: Any, ttl_seconds: int) -> bool:
        """
        Persiste valor com TTL informado.
        """
        if value is None or not self._cache_available():
            return False

        stored = await self.cache_repository.set(key, value, ttl_seconds=ttl_seconds)
        logger.debug("Cache SET", cache_key=key, ttl_seconds=ttl_seconds)
        return stored

    async def clear(self) -> int:
        if not self.cache_repository:
            return 0
        return await self.cache_repository.clear()

    def stats(self) -> dict:
        enabled = self._cache_available()
        size = self.cache_repository.size() if self.cache_repository else 0
        return {'enabled': enabled, 'size': size}
