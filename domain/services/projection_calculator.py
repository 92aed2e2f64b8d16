"""
Projection Calculator - aritmética pura das projeções por cenário

Três formas de produzir um período:
- real: redução de séries diárias de um modelo CMIP6
- extrapolado: além da cobertura dos modelos, tendência linear a partir de 2020
- sintético: conjunto de fallback quando o climate API falha
"""
from datetime import datetime, timezone
from typing import Optional

from domain.constants import Projection, SyntheticProjection
from domain.entities.projection import (
    Baseline,
    ChangeFromBaseline,
    ProjectionMetadata,
    ProjectionPeriod,
    ScenarioProjection,
    UncertaintyRange
)
from domain.services.yearly_aggregator import DailyReduction
from domain.value_objects.climate_scenario import ClimateScenario, DataSource
from domain.value_objects.coordinates import Coordinates


class ProjectionCalculator:
    """Cálculos determinísticos sobre tabelas de cenário"""

    @staticmethod
    def model_for(scenario: ClimateScenario) -> str:
        return Projection.SCENARIO_MODELS[scenario.value]

    @staticmethod
    def real_baseline() -> Baseline:
        return Baseline(
            period=Projection.BASELINE_PERIOD,
            temperature_mean=Projection.BASELINE_TEMPERATURE_MEAN,
            precipitation=Projection.BASELINE_PRECIPITATION
        )

    @staticmethod
    def synthetic_baseline() -> Baseline:
        return Baseline(
            period=Projection.BASELINE_PERIOD,
            temperature_mean=SyntheticProjection.BASELINE_TEMPERATURE_MEAN,
            precipitation=SyntheticProjection.BASELINE_PRECIPITATION
        )

    @staticmethod
    def uncertainty_range(
        scenario: ClimateScenario,
        temperature: float,
        precipitation: float
    ) -> UncertaintyRange:
        """
        Banda de spread entre modelos

        Temperatura: valor ± fator (°C). Precipitação: valor × (1 ∓ fator/100).
        Os fatores crescem de optimistic para pessimistic.
        """
        factors = Projection.UNCERTAINTY_FACTORS[scenario.value]
        temp_factor = factors['temperature']
        precip_factor = factors['precipitation'] / 100

        return UncertaintyRange(
            temperature_low=temperature - temp_factor,
            temperature_high=temperature + temp_factor,
            precipitation_low=precipitation * (1 - precip_factor),
            precipitation_high=precipitation * (1 + precip_factor)
        )

    @staticmethod
    def from_reduction(
        scenario: ClimateScenario,
        period: str,
        reduction: DailyReduction,
        baseline: Optional[Baseline] = None
    ) -> ProjectionPeriod:
        """
        Período real a partir da redução das séries diárias da década

        Args:
            scenario: Cenário
            period: Rótulo (2020s..2050s)
            reduction: Redução dos dias válidos da década
            baseline: Baseline de comparação (padrão 1990-2020 real)

        Returns:
            ProjectionPeriod com deltas contra o baseline
        """
        baseline = baseline or ProjectionCalculator.real_baseline()
        start_year, end_year = Projection.PERIOD_RANGES[period]
        temperature = reduction.temperature_mean_avg
        precipitation = reduction.precipitation_total

        return ProjectionPeriod(
            period=period,
            start_year=start_year,
            end_year=end_year,
            temperature_max_avg=reduction.temperature_max_avg,
            temperature_min_avg=reduction.temperature_min_avg,
            temperature_mean_avg=temperature,
            precipitation_total=precipitation,
            precipitation_avg=reduction.precipitation_avg,
            change_from_baseline=ChangeFromBaseline(
                temperature=temperature - baseline.temperature_mean,
                precipitation=(precipitation - baseline.precipitation) / baseline.precipitation * 100
            ),
            uncertainty_range=ProjectionCalculator.uncertainty_range(scenario, temperature, precipitation)
        )

    @staticmethod
    def extrapolate(scenario: ClimateScenario, period: str) -> ProjectionPeriod:
        """
        Extrapolação linear para décadas sem cobertura de modelo

        tempIncrease = (anos desde 2020 / 10) × 0.8°C × multiplicador
        precipChange = (anos desde 2020 / 10) × 5% × multiplicador
        """
        start_year, end_year = Projection.PERIOD_RANGES[period]
        multiplier = Projection.SCENARIO_MULTIPLIERS[scenario.value]
        decades = (start_year - Projection.EXTRAPOLATION_REFERENCE_YEAR) / 10

        temp_increase = decades * Projection.WARMING_PER_DECADE * multiplier
        precip_change = decades * Projection.PRECIPITATION_CHANGE_PER_DECADE * multiplier

        temperature = Projection.BASELINE_TEMPERATURE_MEAN + temp_increase
        precipitation = Projection.BASELINE_PRECIPITATION * (1 + precip_change / 100)
        spread = Projection.EXTRAPOLATED_TEMPERATURE_SPREAD

        return ProjectionPeriod(
            period=period,
            start_year=start_year,
            end_year=end_year,
            temperature_max_avg=temperature + spread,
            temperature_min_avg=temperature - spread,
            temperature_mean_avg=temperature,
            precipitation_total=precipitation,
            precipitation_avg=precipitation / Projection.DAYS_PER_YEAR,
            change_from_baseline=ChangeFromBaseline(
                temperature=temp_increase,
                precipitation=precip_change
            ),
            uncertainty_range=ProjectionCalculator.uncertainty_range(scenario, temperature, precipitation)
        )

    @staticmethod
    def synthetic_period(scenario: ClimateScenario, period: str) -> ProjectionPeriod:
        start_year, end_year = Projection.PERIOD_RANGES[period]
        base = SyntheticProjection.SCENARIO_BASES[scenario.value]
        years_from_now = start_year - SyntheticProjection.REFERENCE_YEAR

        temp_increase = years_from_now * SyntheticProjection.WARMING_PER_YEAR
        precip_change = years_from_now * SyntheticProjection.PRECIPITATION_PER_YEAR
        temperature = base['temperature'] + temp_increase
        precipitation = base['precipitation'] + precip_change

        return ProjectionPeriod(
            period=period,
            start_year=start_year,
            end_year=end_year,
            temperature_max_avg=temperature + SyntheticProjection.MAX_OFFSET,
            temperature_min_avg=temperature + SyntheticProjection.MIN_OFFSET,
            temperature_mean_avg=temperature,
            precipitation_total=precipitation,
            precipitation_avg=precipitation / Projection.DAYS_PER_YEAR,
            change_from_baseline=ChangeFromBaseline(
                temperature=temp_increase,
                precipitation=precip_change / base['precipitation'] * 100
            ),
            uncertainty_range=ProjectionCalculator.uncertainty_range(scenario, temperature, precipitation)
        )

    @staticmethod
    def synthetic_projection(
        location: Coordinates,
        scenario: ClimateScenario,
        last_updated: Optional[str] = None
    ) -> ScenarioProjection:
        """Conjunto completo sintético (4 períodos), nunca misturado com dados reais"""
        return ScenarioProjection(
            location=location,
            scenario=scenario,
            model=ProjectionCalculator.model_for(scenario),
            projection_periods=[
                ProjectionCalculator.synthetic_period(scenario, period)
                for period in Projection.PERIOD_RANGES
            ],
            baseline=ProjectionCalculator.synthetic_baseline(),
            metadata=ProjectionMetadata(
                data_source=SyntheticProjection.DATA_SOURCE,
                last_updated=last_updated or utc_now_iso(),
                confidence_level=SyntheticProjection.CONFIDENCE
            ),
            source=DataSource.SYNTHETIC
        )


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()
