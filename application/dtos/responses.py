"""Response DTOs - Contratos de saída dos use cases"""

from dataclasses import dataclass, field
from typing import List, Dict, Any

from domain.entities.climate_trend import TrendResult
from domain.entities.decadal_summary import DecadalSummary
from domain.entities.projection import ScenarioProjection
from domain.entities.yearly_summary import YearlySummary
from domain.value_objects.coordinates import Coordinates
from domain.value_objects.partial_result import PartialResult, SkippedItem


@dataclass
class YearlyClimateResponse:
    """Resumos anuais com distinção explícita entre anos obtidos e pulados"""
    location: Coordinates
    requested_years: List[int]
    yearly_data: List[YearlySummary]
    skipped: List[SkippedItem] = field(default_factory=list)

    @staticmethod
    def from_result(
        location: Coordinates,
        requested_years: List[int],
        result: PartialResult[YearlySummary]
    ) -> 'YearlyClimateResponse':
        return YearlyClimateResponse(
            location=location,
            requested_years=list(requested_years),
            yearly_data=list(result.items),
            skipped=list(result.skipped)
        )

    @property
    def retrieved_years(self) -> List[int]:
        return [summary.year for summary in self.yearly_data]

    @property
    def complete(self) -> bool:
        return not self.skipped

    def to_dict(self) -> Dict[str, Any]:
        return {
            'location': self.location.to_api_response(),
            'requestedYears': self.requested_years,
            'retrievedYears': self.retrieved_years,
            'yearlyData': [y.to_api_response() for y in self.yearly_data],
            'skippedYears': [s.to_api_response() for s in self.skipped],
            'complete': self.complete
        }


@dataclass
class DecadalClimateResponse:
    """Resumos decadais de um intervalo de décadas"""
    location: Coordinates
    start_decade: int
    end_decade: int
    decadal_data: List[DecadalSummary]
    skipped: List[SkippedItem] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.skipped

    def to_dict(self) -> Dict[str, Any]:
        return {
            'location': self.location.to_api_response(),
            'requestedDecades': {'start': self.start_decade, 'end': self.end_decade},
            'decadalData': [d.to_api_response() for d in self.decadal_data],
            'skippedYears': [s.to_api_response() for s in self.skipped],
            'complete': self.complete
        }


@dataclass
class ClimateTrendsResponse:
    """Tendências lineares mais os dados anuais usados no ajuste"""
    location: Coordinates
    start_year: int
    end_year: int
    trends: List[TrendResult]
    yearly_data: List[YearlySummary]
    skipped: List[SkippedItem] = field(default_factory=list)

    @property
    def data_years(self) -> List[int]:
        return [summary.year for summary in self.yearly_data]

    @property
    def complete(self) -> bool:
        return not self.skipped

    def to_dict(self) -> Dict[str, Any]:
        return {
            'location': self.location.to_api_response(),
            'period': {'startYear': self.start_year, 'endYear': self.end_year},
            'dataYears': self.data_years,
            'trends': [t.to_api_response() for t in self.trends],
            'yearlyData': [y.to_api_response() for y in self.yearly_data],
            'skippedYears': [s.to_api_response() for s in self.skipped],
            'complete': self.complete
        }


@dataclass
class ProjectionPeriodsResponse:
    """Projeção filtrada por períodos"""
    projection: ScenarioProjection
    requested_periods: List[str]
    available_periods: List[str]

    def to_dict(self) -> Dict[str, Any]:
        response = self.projection.to_api_response()
        response['requestedPeriods'] = self.requested_periods
        response['availablePeriods'] = self.available_periods
        return response


@dataclass
class FutureClimateSummaryResponse:
    """
    Resumo do cenário moderado

    keyChanges traz os deltas de 2030s e 2050s; a incerteza de cada
    período é expressa como deslocamento em relação à média do período.
    """
    projection: ScenarioProjection

    def _change(self, label: str, metric: str) -> float:
        for period in self.projection.projection_periods:
            if period.period == label:
                return getattr(period.change_from_baseline, metric)
        return 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'location': self.projection.location.to_api_response(),
            'keyChanges': {
                'temperature2030s': self._change('2030s', 'temperature'),
                'temperature2050s': self._change('2050s', 'temperature'),
                'precipitation2030s': self._change('2030s', 'precipitation'),
                'precipitation2050s': self._change('2050s', 'precipitation')
            },
            'projectionPeriods': [
                {
                    'period': period.period,
                    'temperatureChange': period.change_from_baseline.temperature,
                    'precipitationChange': period.change_from_baseline.precipitation,
                    'uncertaintyRange': {
                        'temperature': {
                            'low': period.uncertainty_range.temperature_low - period.temperature_mean_avg,
                            'high': period.uncertainty_range.temperature_high - period.temperature_mean_avg
                        }
                    }
                }
                for period in self.projection.projection_periods
            ],
            'baseline': self.projection.baseline.to_api_response(),
            'metadata': self.projection.metadata.to_api_response(),
            'source': self.projection.source.value
        }
