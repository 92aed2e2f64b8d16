"""
Use Case: Get Projection Periods
Projeção de um cenário filtrada pelos períodos pedidos
"""
from ddtrace import tracer

from application.dtos.requests import GetFutureProjectionsRequest, GetProjectionPeriodsRequest
from application.dtos.responses import ProjectionPeriodsResponse
from application.use_cases.get_future_projections_use_case import GetFutureProjectionsUseCase


class GetProjectionPeriodsUseCase:

    def __init__(self, projections_use_case: GetFutureProjectionsUseCase):
        self.projections_use_case = projections_use_case

    @tracer.wrap(resource="use_case.projection_periods")
    async def execute(self, request: GetProjectionPeriodsRequest) -> ProjectionPeriodsResponse:
        projection = await self.projections_use_case.execute(
            GetFutureProjectionsRequest(coordinates=request.coordinates, scenario=request.scenario)
        )

        return ProjectionPeriodsResponse(
            projection=projection.filter_periods(request.periods),
            requested_periods=list(request.periods),
            available_periods=[p.period for p in projection.projection_periods]
        )
