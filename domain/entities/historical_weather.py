"""
Historical Weather Series - resposta bruta do archive para um intervalo de datas
"""
from dataclasses import dataclass, field
from typing import List, Dict, Any

from domain.entities.daily_record import DailyRecord
from domain.value_objects.coordinates import Coordinates


@dataclass(frozen=True)
class HistoricalWeatherSeries:
    """Série diária retornada pelo archive com metadados da grade"""
    location: Coordinates
    daily_records: List[DailyRecord] = field(default_factory=list)
    timezone: str = 'UTC'
    timezone_abbreviation: str = 'UTC'
    elevation: float = 0.0
    generation_time_ms: float = 0.0

    def to_api_response(self) -> Dict[str, Any]:
        return {
            'location': self.location.to_api_response(),
            'timezone': self.timezone,
            'timezoneAbbreviation': self.timezone_abbreviation,
            'elevation': self.elevation,
            'dailyData': [record.to_api_response() for record in self.daily_records],
            'generationTimeMs': self.generation_time_ms
        }
