"""Decadal Aggregator - Agrupa resumos anuais por década"""
from collections import defaultdict
from typing import Dict, Iterable, List

from domain.entities.decadal_summary import DecadalSummary
from domain.entities.yearly_summary import YearlySummary
from domain.helpers.statistics import calculate_average


class DecadalAggregator:
    """Função pura: resumos anuais → resumos decadais ordenados"""

    @staticmethod
    def decade_of(year: int) -> int:
        # 1985 -> 1980
        return (year // 10) * 10

    @staticmethod
    def summarize(yearly: Iterable[YearlySummary]) -> List[DecadalSummary]:
        """
        Média não ponderada dos valores anuais de cada década

        Décadas sem anos não aparecem. Métricas não são recalculadas a partir
        dos dados diários, só dos resumos anuais presentes.

        Args:
            yearly: Resumos anuais (qualquer ordem)

        Returns:
            Lista ordenada por decade_start crescente
        """
        groups: Dict[int, List[YearlySummary]] = defaultdict(list)
        for summary in yearly:
            groups[DecadalAggregator.decade_of(summary.year)].append(summary)

        decades = []
        for decade_start in sorted(groups):
            years = groups[decade_start]
            decades.append(DecadalSummary(
                decade_start=decade_start,
                decade_end=decade_start + 9,
                temperature_max_avg=calculate_average(y.temperature_max_avg for y in years),
                temperature_min_avg=calculate_average(y.temperature_min_avg for y in years),
                temperature_mean_avg=calculate_average(y.temperature_mean_avg for y in years),
                precipitation_total_avg=calculate_average(y.precipitation_total for y in years),
                precipitation_annual_avg=calculate_average(y.precipitation_avg for y in years),
                humidity_avg=calculate_average(y.humidity_avg for y in years),
                wind_speed_avg=calculate_average(y.wind_speed_avg for y in years),
                pressure_avg=calculate_average(y.pressure_avg for y in years),
                years_count=len(years)
            ))

        return decades
