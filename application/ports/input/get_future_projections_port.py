"""
Input Port: Interface para projeções climáticas por cenário
"""
from abc import ABC, abstractmethod

from application.dtos.requests import GetFutureProjectionsRequest
from domain.entities.projection import ScenarioProjection


class IGetFutureProjectionsUseCase(ABC):
    """Interface para caso de uso de projeção de um cenário"""

    @abstractmethod
    async def execute(self, request: GetFutureProjectionsRequest) -> ScenarioProjection:
        """
        Nunca falha por causa do upstream: em falha retorna o conjunto sintético
        """
        pass
