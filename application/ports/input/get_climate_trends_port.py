"""
Input Port: Interface para tendências climáticas lineares
"""
from abc import ABC, abstractmethod

from application.dtos.requests import GetClimateTrendsRequest
from application.dtos.responses import ClimateTrendsResponse


class IGetClimateTrendsUseCase(ABC):
    """Interface para caso de uso de tendências"""

    @abstractmethod
    async def execute(self, request: GetClimateTrendsRequest) -> ClimateTrendsResponse:
        pass
