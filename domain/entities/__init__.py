"""Domain Entities"""
from domain.entities.daily_record import DailyRecord
from domain.entities.historical_weather import HistoricalWeatherSeries
from domain.entities.yearly_summary import YearlySummary
from domain.entities.decadal_summary import DecadalSummary
from domain.entities.climate_trend import TrendResult, TrendDirection
from domain.entities.projection import (
    Baseline,
    ChangeFromBaseline,
    ProjectionMetadata,
    ProjectionPeriod,
    ScenarioProjection,
    ScenarioSet,
    UncertaintyRange
)

__all__ = [
    'DailyRecord',
    'HistoricalWeatherSeries',
    'YearlySummary',
    'DecadalSummary',
    'TrendResult',
    'TrendDirection',
    'Baseline',
    'ChangeFromBaseline',
    'ProjectionMetadata',
    'ProjectionPeriod',
    'ScenarioProjection',
    'ScenarioSet',
    'UncertaintyRange'
]
