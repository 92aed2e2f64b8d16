"""Application Services - orquestração reutilizada pelos use cases"""
from application.services.cache_service import CacheKeys, CacheService
from application.services.yearly_climate_fetcher import YearlyClimateFetcher
from application.services.scenario_projection_engine import ScenarioProjectionEngine

__all__ = ['CacheKeys', 'CacheService', 'YearlyClimateFetcher', 'ScenarioProjectionEngine']
