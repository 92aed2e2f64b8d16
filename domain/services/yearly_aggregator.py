"""Yearly Aggregator - Reduz registros diários em um resumo anual"""
from dataclasses import dataclass
from typing import List, Optional, Sequence

from domain.entities.daily_record import DailyRecord
from domain.entities.yearly_summary import YearlySummary
from domain.helpers.statistics import calculate_average


@dataclass(frozen=True)
class DailyReduction:
    """Médias e total de precipitação sobre os dias válidos de uma janela"""
    temperature_max_avg: float
    temperature_min_avg: float
    temperature_mean_avg: float
    precipitation_total: float
    precipitation_avg: float
    humidity_avg: float
    wind_speed_avg: float
    pressure_avg: float
    valid_days: int


class YearlyAggregator:
    """
    Agregação de registros diários

    Um dia só conta se max, min e média estiverem presentes. Cada métrica
    opcional filtra seus próprios nulos.
    """

    @staticmethod
    def valid_days(records: Sequence[DailyRecord]) -> List[DailyRecord]:
        return [record for record in records if record.is_valid]

    @staticmethod
    def reduce(records: Sequence[DailyRecord]) -> DailyReduction:
        """
        Reduz uma janela qualquer (ano ou década) de registros diários

        Args:
            records: Registros diários, válidos ou não

        Returns:
            DailyReduction (valid_days == 0 se nenhum dia válido)
        """
        valid = YearlyAggregator.valid_days(records)

        return DailyReduction(
            temperature_max_avg=calculate_average(d.temperature_max for d in valid),
            temperature_min_avg=calculate_average(d.temperature_min for d in valid),
            temperature_mean_avg=calculate_average(d.temperature_mean for d in valid),
            precipitation_total=sum(d.precipitation or 0.0 for d in valid),
            precipitation_avg=calculate_average(d.precipitation for d in valid),
            humidity_avg=calculate_average(d.humidity for d in valid),
            wind_speed_avg=calculate_average(d.wind_speed for d in valid),
            pressure_avg=calculate_average(d.pressure for d in valid),
            valid_days=len(valid)
        )

    @staticmethod
    def aggregate_year(year: int, records: Sequence[DailyRecord]) -> Optional[YearlySummary]:
        """
        Resumo anual de um ano de registros

        Args:
            year: Ano civil dos registros
            records: Registros diários do ano

        Returns:
            YearlySummary, ou None se o ano não tiver dia válido
        """
        reduction = YearlyAggregator.reduce(records)
        if reduction.valid_days == 0:
            return None

        return YearlySummary(
            year=year,
            temperature_max_avg=reduction.temperature_max_avg,
            temperature_min_avg=reduction.temperature_min_avg,
            temperature_mean_avg=reduction.temperature_mean_avg,
            precipitation_total=reduction.precipitation_total,
            precipitation_avg=reduction.precipitation_avg,
            humidity_avg=reduction.humidity_avg,
            wind_speed_avg=reduction.wind_speed_avg,
            pressure_avg=reduction.pressure_avg,
            data_points_count=reduction.valid_days
        )
