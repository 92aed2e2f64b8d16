"""Climate Model Port - Interface para simulações diárias de modelos climáticos"""
from abc import ABC, abstractmethod
from typing import List

from domain.entities.daily_record import DailyRecord
from domain.value_objects.coordinates import Coordinates


class IClimateModelProvider(ABC):
    """Interface para provedores de projeções CMIP6 por modelo"""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        pass

    @abstractmethod
    async def get_daily_projection(
        self,
        coordinates: Coordinates,
        start_date: str,
        end_date: str,
        model: str
    ) -> List[DailyRecord]:
        """
        Busca a série diária simulada por um modelo

        Args:
            coordinates: Localização
            start_date: YYYY-MM-DD
            end_date: YYYY-MM-DD
            model: Identificador do modelo (ex: MPI_ESM1_2_HR)

        Returns:
            Lista de DailyRecord (pode conter dias inválidos)

        Raises:
            UpstreamServiceException: Falha após retries
        """
        pass
