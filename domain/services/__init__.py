"""
Domain Services - Serviços de lógica de negócio pura (sem conhecimento de APIs externas)

IMPORTANTE: Mappers de APIs externas → domain entities pertencem à infrastructure!
- infrastructure/adapters/output/providers/openmeteo/mappers/openmeteo_daily_mapper.py
"""
from domain.services.yearly_aggregator import DailyReduction, YearlyAggregator
from domain.services.decadal_aggregator import DecadalAggregator
from domain.services.trend_analyzer import TrendAnalyzer
from domain.services.projection_calculator import ProjectionCalculator

__all__ = [
    'DailyReduction',
    'YearlyAggregator',
    'DecadalAggregator',
    'TrendAnalyzer',
    'ProjectionCalculator'
]
