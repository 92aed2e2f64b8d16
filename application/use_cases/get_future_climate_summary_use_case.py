"""
Use Case: Get Future Climate Summary
Resumo do cenário moderado (deltas principais e incerteza relativa)
"""
from ddtrace import tracer

from application.dtos.requests import GetFutureProjectionsRequest
from application.dtos.responses import FutureClimateSummaryResponse
from application.use_cases.get_future_projections_use_case import GetFutureProjectionsUseCase
from domain.value_objects.climate_scenario import ClimateScenario
from domain.value_objects.coordinates import Coordinates


class GetFutureClimateSummaryUseCase:

    def __init__(self, projections_use_case: GetFutureProjectionsUseCase):
        self.projections_use_case = projections_use_case

    @tracer.wrap(resource="use_case.future_climate_summary")
    async def execute(self, coordinates: Coordinates) -> FutureClimateSummaryResponse:
        projection = await self.projections_use_case.execute(
            GetFutureProjectionsRequest(coordinates=coordinates, scenario=ClimateScenario.MODERATE)
        )
        return FutureClimateSummaryResponse(projection=projection)
