"""
Input Port: Interface para resumos climáticos por década
"""
from abc import ABC, abstractmethod

from application.dtos.requests import GetDecadalClimateRequest
from application.dtos.responses import DecadalClimateResponse


class IGetDecadalClimateUseCase(ABC):
    """Interface para caso de uso de resumos decadais"""

    @abstractmethod
    async def execute(self, request: GetDecadalClimateRequest) -> DecadalClimateResponse:
        pass
