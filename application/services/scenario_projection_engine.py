"""
Scenario Projection Engine
Monta as projeções 2020s-2050s de um cenário (real, extrapolada ou sintética)
"""
import asyncio
from typing import List
from ddtrace import tracer

from application.ports.output.climate_model_port import IClimateModelProvider
from domain.constants import Projection
from domain.entities.projection import (
    ProjectionMetadata,
    ProjectionPeriod,
    ScenarioProjection,
    ScenarioSet
)
from domain.exceptions import UpstreamServiceException
from domain.services.projection_calculator import ProjectionCalculator, utc_now_iso
from domain.services.yearly_aggregator import YearlyAggregator
from domain.value_objects.climate_scenario import ClimateScenario, DataSource
from domain.value_objects.coordinates import Coordinates
from shared.config.logger_config import get_logger
from shared.config.settings import CLIMATE_MODEL_COVERAGE_END_YEAR

logger = get_logger(child=True)


class ScenarioProjectionEngine:
    """
    Motor de projeção por cenário

    Os 4 períodos são buscados em paralelo. Qualquer falha de período
    descarta o conjunto inteiro em favor do conjunto sintético, para que
    uma resposta nunca misture dados reais e sintéticos.
    """

    def __init__(
        self,
        climate_model_provider: IClimateModelProvider,
        coverage_end_year: int = CLIMATE_MODEL_COVERAGE_END_YEAR
    ):
        self.climate_model_provider = climate_model_provider
        self.coverage_end_year = coverage_end_year

    @tracer.wrap(resource="service.scenario_projection")
    async def project(
        self,
        coordinates: Coordinates,
        scenario: ClimateScenario
    ) -> ScenarioProjection:
        """
        Projeção completa de um cenário

        Args:
            coordinates: Localização
            scenario: Cenário de emissão

        Returns:
            ScenarioProjection com source REAL ou SYNTHETIC
        """
        model = ProjectionCalculator.model_for(scenario)
        logger.info(
            "Iniciando projeção",
            location=str(coordinates),
            scenario=scenario.value,
            model=model
        )

        results = await asyncio.gather(
            *[
                self._project_period(coordinates, scenario, model, period)
                for period in Projection.PERIOD_RANGES
            ],
            return_exceptions=True
        )

        failures = [
            (period, result)
            for period, result in zip(Projection.PERIOD_RANGES, results)
            if isinstance(result, BaseException)
        ]
        if failures:
            logger.warning(
                "Falha no climate API, usando projeção sintética",
                scenario=scenario.value,
                failed_periods=[period for period, _ in failures],
                errors=[str(error) for _, error in failures]
            )
            return ProjectionCalculator.synthetic_projection(coordinates, scenario)

        periods: List[ProjectionPeriod] = list(results)
        logger.info("Projeção concluída", scenario=scenario.value, periods=len(periods))

        return ScenarioProjection(
            location=coordinates,
            scenario=scenario,
            model=model,
            projection_periods=periods,
            baseline=ProjectionCalculator.real_baseline(),
            metadata=ProjectionMetadata(
                data_source=Projection.DATA_SOURCE_REAL,
                last_updated=utc_now_iso(),
                confidence_level=Projection.CONFIDENCE_REAL
            ),
            source=DataSource.REAL
        )

    @tracer.wrap(resource="service.scenario_comparison")
    async def project_all(self, coordinates: Coordinates) -> ScenarioSet:
        """Os três cenários em paralelo; cada um decide real/sintético sozinho"""
        optimistic, moderate, pessimistic = await asyncio.gather(
            self.project(coordinates, ClimateScenario.OPTIMISTIC),
            self.project(coordinates, ClimateScenario.MODERATE),
            self.project(coordinates, ClimateScenario.PESSIMISTIC)
        )
        return ScenarioSet(optimistic=optimistic, moderate=moderate, pessimistic=pessimistic)

    async def _project_period(
        self,
        coordinates: Coordinates,
        scenario: ClimateScenario,
        model: str,
        period: str
    ) -> ProjectionPeriod:
        """
        Um período: extrapolado além da cobertura, senão reduzido do modelo

        Raises:
            UpstreamServiceException: Falha HTTP ou década sem dia válido
        """
        start_year, end_year = Projection.PERIOD_RANGES[period]

        if start_year > self.coverage_end_year:
            return ProjectionCalculator.extrapolate(scenario, period)

        records = await self.climate_model_provider.get_daily_projection(
            coordinates,
            start_date=f"{start_year}-01-01",
            end_date=f"{end_year}-12-31",
            model=model
        )

        reduction = YearlyAggregator.reduce(records)
        if reduction.valid_days == 0:
            raise UpstreamServiceException(
                "Climate model returned no valid days",
                details={"period": period, "model": model, "records": len(records)}
            )

        return ProjectionCalculator.from_reduction(scenario, period, reduction)

