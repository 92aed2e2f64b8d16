"""
Projection Entities - períodos projetados, baseline e resposta completa por cenário
"""
from dataclasses import dataclass, field, replace
from typing import Dict, Any, List

from domain.value_objects.climate_scenario import ClimateScenario, DataSource
from domain.value_objects.coordinates import Coordinates


@dataclass(frozen=True)
class ChangeFromBaseline:
    temperature: float  # °C absoluto
    precipitation: float  # % relativo ao baseline

    def to_api_response(self) -> Dict[str, float]:
        return {'temperature': self.temperature, 'precipitation': self.precipitation}


@dataclass(frozen=True)
class UncertaintyRange:
    """Banda simétrica de spread entre modelos (não é intervalo de confiança)"""
    temperature_low: float
    temperature_high: float
    precipitation_low: float
    precipitation_high: float

    @property
    def temperature_width(self) -> float:
        return self.temperature_high - self.temperature_low

    @property
    def precipitation_width(self) -> float:
        return self.precipitation_high - self.precipitation_low

    def to_api_response(self) -> Dict[str, float]:
        return {
            'temperatureLow': self.temperature_low,
            'temperatureHigh': self.temperature_high,
            'precipitationLow': self.precipitation_low,
            'precipitationHigh': self.precipitation_high
        }


@dataclass(frozen=True)
class ProjectionPeriod:
    period: str  # 2020s..2050s
    start_year: int
    end_year: int
    temperature_max_avg: float
    temperature_min_avg: float
    temperature_mean_avg: float
    precipitation_total: float
    precipitation_avg: float
    change_from_baseline: ChangeFromBaseline
    uncertainty_range: UncertaintyRange

    def to_api_response(self) -> Dict[str, Any]:
        return {
            'period': self.period,
            'startYear': self.start_year,
            'endYear': self.end_year,
            'temperatureMaxAvg': self.temperature_max_avg,
            'temperatureMinAvg': self.temperature_min_avg,
            'temperatureMeanAvg': self.temperature_mean_avg,
            'precipitationTotal': self.precipitation_total,
            'precipitationAvg': self.precipitation_avg,
            'changeFromBaseline': self.change_from_baseline.to_api_response(),
            'uncertaintyRange': self.uncertainty_range.to_api_response()
        }


@dataclass(frozen=True)
class Baseline:
    """Clima de referência (1990-2020) contra o qual os deltas são medidos"""
    period: str
    temperature_mean: float
    precipitation: float

    def to_api_response(self) -> Dict[str, Any]:
        return {
            'period': self.period,
            'temperatureMean': self.temperature_mean,
            'precipitation': self.precipitation
        }


@dataclass(frozen=True)
class ProjectionMetadata:
    data_source: str
    last_updated: str  # ISO 8601
    confidence_level: str

    def to_api_response(self) -> Dict[str, str]:
        return {
            'dataSource': self.data_source,
            'lastUpdated': self.last_updated,
            'confidenceLevel': self.confidence_level
        }


@dataclass(frozen=True)
class ScenarioProjection:
    """
    Resposta completa de projeção para um cenário

    source indica se os períodos vieram do climate API (REAL) ou do
    conjunto sintético de fallback (SYNTHETIC); nunca há mistura.
    """
    location: Coordinates
    scenario: ClimateScenario
    model: str
    projection_periods: List[ProjectionPeriod]
    baseline: Baseline
    metadata: ProjectionMetadata
    source: DataSource

    @property
    def is_synthetic(self) -> bool:
        return self.source is DataSource.SYNTHETIC

    def get_period(self, label: str) -> ProjectionPeriod:
        for period in self.projection_periods:
            if period.period == label:
                return period
        raise KeyError(label)

    def filter_periods(self, labels: List[str]) -> 'ScenarioProjection':
        """Cópia contendo apenas os períodos pedidos (ordem original)"""
        return replace(
            self,
            projection_periods=[p for p in self.projection_periods if p.period in labels]
        )

    def to_api_response(self) -> Dict[str, Any]:
        return {
            'location': self.location.to_api_response(),
            'scenario': self.scenario.value,
            'model': self.model,
            'projectionPeriods': [p.to_api_response() for p in self.projection_periods],
            'baseline': self.baseline.to_api_response(),
            'metadata': self.metadata.to_api_response(),
            'source': self.source.value
        }


@dataclass(frozen=True)
class ScenarioSet:
    """Os três cenários lado a lado para comparação"""
    optimistic: ScenarioProjection
    moderate: ScenarioProjection
    pessimistic: ScenarioProjection

    @property
    def projections(self) -> Dict[ClimateScenario, ScenarioProjection]:
        return {
            ClimateScenario.OPTIMISTIC: self.optimistic,
            ClimateScenario.MODERATE: self.moderate,
            ClimateScenario.PESSIMISTIC: self.pessimistic
        }

    @property
    def is_fully_real(self) -> bool:
        return all(not p.is_synthetic for p in self.projections.values())

    def to_api_response(self) -> Dict[str, Any]:
        return {
            'optimistic': self.optimistic.to_api_response(),
            'moderate': self.moderate.to_api_response(),
            'pessimistic': self.pessimistic.to_api_response()
        }
