"""
Value Objects: cenário climático e origem dos dados de projeção
"""
from enum import Enum

from domain.exceptions import InvalidScenarioException


class ClimateScenario(str, Enum):
    """Cenários de emissão suportados (baseados nas trajetórias do IPCC)"""
    OPTIMISTIC = 'optimistic'
    MODERATE = 'moderate'
    PESSIMISTIC = 'pessimistic'

    @classmethod
    def from_string(cls, value: str) -> 'ClimateScenario':
        """
        Converte string da query para o enum

        Raises:
            InvalidScenarioException: Se o cenário não existir
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidScenarioException(
                "Invalid scenario. Must be: optimistic, moderate, or pessimistic",
                details={"scenario": value, "allowed": [s.value for s in cls]}
            )


class DataSource(str, Enum):
    """Origem de uma projeção: modelo real ou conjunto sintético de fallback"""
    REAL = 'real'
    SYNTHETIC = 'synthetic'
