"""Open-Meteo Mappers"""
from infrastructure.adapters.output.providers.openmeteo.mappers.openmeteo_daily_mapper import OpenMeteoDailyMapper

__all__ = ['OpenMeteoDailyMapper']
