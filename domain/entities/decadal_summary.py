"""
Decadal Summary Entity - média não ponderada dos resumos anuais de uma década
"""
from dataclasses import dataclass
from typing import Dict, Any


@dataclass(frozen=True)
class DecadalSummary:
    decade_start: int
    decade_end: int
    temperature_max_avg: float
    temperature_min_avg: float
    temperature_mean_avg: float
    precipitation_total_avg: float  # média dos totais anuais
    precipitation_annual_avg: float  # média das médias diárias anuais
    humidity_avg: float
    wind_speed_avg: float
    pressure_avg: float
    years_count: int

    def to_api_response(self) -> Dict[str, Any]:
        return {
            'decadeStart': self.decade_start,
            'decadeEnd': self.decade_end,
            'temperatureMaxAvg': self.temperature_max_avg,
            'temperatureMinAvg': self.temperature_min_avg,
            'temperatureMeanAvg': self.temperature_mean_avg,
            'precipitationTotalAvg': self.precipitation_total_avg,
            'precipitationAnnualAvg': self.precipitation_annual_avg,
            'humidityAvg': self.humidity_avg,
            'windSpeedAvg': self.wind_speed_avg,
            'pressureAvg': self.pressure_avg,
            'yearsCount': self.years_count
        }
