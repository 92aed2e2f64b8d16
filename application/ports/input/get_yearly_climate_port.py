"""
Input Port: Interface para resumos climáticos anuais
"""
from abc import ABC, abstractmethod

from application.dtos.requests import GetYearlyClimateRequest
from application.dtos.responses import YearlyClimateResponse


class IGetYearlyClimateUseCase(ABC):
    """Interface para caso de uso de resumos anuais"""

    @abstractmethod
    async def execute(self, request: GetYearlyClimateRequest) -> YearlyClimateResponse:
        pass
