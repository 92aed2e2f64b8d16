"""
Yearly Summary Entity - agregação de um ano de registros diários
"""
from dataclasses import dataclass
from typing import Dict, Any


@dataclass(frozen=True)
class YearlySummary:
    """
    Resumo anual

    Só existe para anos com ao menos um dia válido (data_points_count > 0).
    """
    year: int
    temperature_max_avg: float
    temperature_min_avg: float
    temperature_mean_avg: float
    precipitation_total: float
    precipitation_avg: float
    humidity_avg: float
    wind_speed_avg: float
    pressure_avg: float
    data_points_count: int

    def to_api_response(self) -> Dict[str, Any]:
        return {
            'year': self.year,
            'temperatureMaxAvg': self.temperature_max_avg,
            'temperatureMinAvg': self.temperature_min_avg,
            'temperatureMeanAvg': self.temperature_mean_avg,
            'precipitationTotal': self.precipitation_total,
            'precipitationAvg': self.precipitation_avg,
            'humidityAvg': self.humidity_avg,
            'windSpeedAvg': self.wind_speed_avg,
            'pressureAvg': self.pressure_avg,
            'dataPointsCount': self.data_points_count
        }
