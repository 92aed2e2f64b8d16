"""Request DTOs - Contratos de entrada para use cases"""

from dataclasses import dataclass, field
from typing import List

from domain.constants import Projection
from domain.value_objects.climate_scenario import ClimateScenario
from domain.value_objects.coordinates import Coordinates


@dataclass(frozen=True)
class GetHistoricalWeatherRequest:
    """Request para a série diária bruta de um intervalo de datas"""
    coordinates: Coordinates
    start_date: str
    end_date: str


@dataclass(frozen=True)
class GetYearlyClimateRequest:
    """Request para resumos anuais de anos específicos (ordem preservada)"""
    coordinates: Coordinates
    years: List[int]


@dataclass(frozen=True)
class GetDecadalClimateRequest:
    """Request para resumos decadais; years já expandido e limitado ao último ano completo"""
    coordinates: Coordinates
    start_decade: int
    end_decade: int
    years: List[int]


@dataclass(frozen=True)
class GetClimateTrendsRequest:
    """Request para tendências lineares de um intervalo contínuo de anos"""
    coordinates: Coordinates
    start_year: int
    end_year: int

    @property
    def years(self) -> List[int]:
        return list(range(self.start_year, self.end_year + 1))


@dataclass(frozen=True)
class GetFutureProjectionsRequest:
    """Request para projeção de um cenário"""
    coordinates: Coordinates
    scenario: ClimateScenario = ClimateScenario.MODERATE


@dataclass(frozen=True)
class GetProjectionPeriodsRequest:
    """Request para projeção filtrada por períodos"""
    coordinates: Coordinates
    scenario: ClimateScenario = ClimateScenario.MODERATE
    periods: List[str] = field(default_factory=lambda: list(Projection.DEFAULT_FILTER_PERIODS))
