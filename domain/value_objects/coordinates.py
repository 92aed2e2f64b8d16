"""
Value Object para coordenadas geográficas
Garante imutabilidade e validação no domínio
"""
from dataclasses import dataclass
from typing import Dict

from domain.exceptions import InvalidCoordinatesException


@dataclass(frozen=True)
class Coordinates:
    """
    Value Object para coordenadas geográficas

    Características:
    - Imutável (frozen=True)
    - Auto-validação no __post_init__
    - Chave arredondada para cache (cache_key)
    """
    latitude: float
    longitude: float

    def __post_init__(self):
        """Valida coordenadas no momento da criação"""
        if not (-90 <= self.latitude <= 90) or not (-180 <= self.longitude <= 180):
            raise InvalidCoordinatesException(
                "Invalid coordinates. Latitude must be between -90 and 90, "
                "longitude between -180 and 180.",
                details={"latitude": self.latitude, "longitude": self.longitude}
            )

    def cache_key(self, precision: int = 2) -> str:
        """
        Chave arredondada usada pelo cache

        Args:
            precision: Casas decimais (2 = ~1.1 km)

        Returns:
            String "lat,lon" com precisão fixa

        Example:
            >>> Coordinates(40.7128, -74.0060).cache_key()
            '40.71,-74.01'
        """
        return f"{self.latitude:.{precision}f},{self.longitude:.{precision}f}"

    def to_api_response(self) -> Dict[str, float]:
        return {'latitude': self.latitude, 'longitude': self.longitude}

    def __str__(self) -> str:
        """String representation amigável"""
        lat_dir = "N" if self.latitude >= 0 else "S"
        lon_dir = "E" if self.longitude >= 0 else "W"
        return f"{abs(self.latitude):.4f}°{lat_dir}, {abs(self.longitude):.4f}°{lon_dir}"
