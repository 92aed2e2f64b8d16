"""
Daily Record Entity - observação diária (archive) ou simulação diária (climate API)
"""
from dataclasses import dataclass
from typing import Optional, Dict, Any


@dataclass(frozen=True)
class DailyRecord:
    """
    Registro diário de tempo

    Qualquer temperatura pode ser None (dado ausente no upstream); nesse caso
    o dia é excluído da agregação. Precipitação ausente vira 0.0.
    """
    date: str  # YYYY-MM-DD
    temperature_max: Optional[float]
    temperature_min: Optional[float]
    temperature_mean: Optional[float]
    precipitation: float = 0.0
    humidity: Optional[float] = None
    wind_speed: Optional[float] = None
    pressure: Optional[float] = None

    @property
    def is_valid(self) -> bool:
        """Dia válido: max, min e média presentes"""
        return (
            self.temperature_mean is not None and
            self.temperature_max is not None and
            self.temperature_min is not None
        )

    @property
    def year(self) -> int:
        return int(self.date[:4])

    def to_api_response(self) -> Dict[str, Any]:
        return {
            'date': self.date,
            'temperatureMax': self.temperature_max,
            'temperatureMin': self.temperature_min,
            'temperatureMean': self.temperature_mean,
            'precipitation': self.precipitation,
            'humidity': self.humidity,
            'windSpeed': self.wind_speed,
            'pressure': self.pressure
        }
