"""Domain Value Objects"""
from domain.value_objects.coordinates import Coordinates
from domain.value_objects.climate_scenario import ClimateScenario, DataSource
from domain.value_objects.partial_result import PartialResult, SkippedItem

__all__ = ['Coordinates', 'ClimateScenario', 'DataSource', 'PartialResult', 'SkippedItem']
