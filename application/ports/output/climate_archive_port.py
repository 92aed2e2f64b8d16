"""Climate Archive Port - Interface para o arquivo de observações diárias"""
from abc import ABC, abstractmethod

from domain.entities.historical_weather import HistoricalWeatherSeries
from domain.value_objects.coordinates import Coordinates


class IClimateArchiveProvider(ABC):
    """
    Interface para provedores de séries diárias históricas (reanálise).
    Hoje implementada pelo Open-Meteo archive.
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        pass

    @abstractmethod
    async def get_historical_weather(
        self,
        coordinates: Coordinates,
        start_date: str,
        end_date: str
    ) -> HistoricalWeatherSeries:
        """
        Busca a série diária de um intervalo fechado de datas

        Args:
            coordinates: Localização
            start_date: YYYY-MM-DD (inclusive)
            end_date: YYYY-MM-DD (inclusive)

        Returns:
            HistoricalWeatherSeries com um DailyRecord por dia

        Raises:
            UpstreamServiceException: Falha HTTP/rede
            UpstreamPayloadException: Payload sem daily/time
        """
        pass
