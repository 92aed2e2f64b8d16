"""
Input Port: Interface para buscar a série diária bruta do archive
"""
from abc import ABC, abstractmethod

from application.dtos.requests import GetHistoricalWeatherRequest
from domain.entities.historical_weather import HistoricalWeatherSeries


class IGetHistoricalWeatherUseCase(ABC):
    """Interface para caso de uso de série diária histórica"""

    @abstractmethod
    async def execute(self, request: GetHistoricalWeatherRequest) -> HistoricalWeatherSeries:
        """
        Raises:
            UpstreamServiceException: Se o archive falhar
        """
        pass
