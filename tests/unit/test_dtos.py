"""
Testes dos DTOs de Request e Response
"""
import pytest

from application.dtos.requests import (
    GetClimateTrendsRequest,
    GetFutureProjectionsRequest,
    GetProjectionPeriodsRequest
)
from application.dtos.responses import (
    ClimateTrendsResponse,
    DecadalClimateResponse,
    FutureClimateSummaryResponse,
    ProjectionPeriodsResponse,
    YearlyClimateResponse
)
from domain.services.decadal_aggregator import DecadalAggregator
from domain.services.projection_calculator import ProjectionCalculator
from domain.value_objects.climate_scenario import ClimateScenario
from domain.value_objects.partial_result import PartialResult


class TestRequestDTOs:
    """Testes para Request DTOs"""

    def test_trends_request_years(self, nyc):
        request = GetClimateTrendsRequest(coordinates=nyc, start_year=2000, end_year=2010)

        assert request.years == list(range(2000, 2011))

    def test_defaults(self, nyc):
        assert GetFutureProjectionsRequest(coordinates=nyc).scenario is ClimateScenario.MODERATE
        assert GetProjectionPeriodsRequest(coordinates=nyc).periods == ['2030s', '2040s', '2050s']


class TestYearlyClimateResponse:

    def test_to_dict_with_skipped_years(self, nyc, make_yearly_summary):
        result = PartialResult()
        result.add(make_yearly_summary(year=2020))
        result.skip(2019, "fetch failed: timeout")

        response = YearlyClimateResponse.from_result(nyc, [2020, 2019], result)
        data = response.to_dict()

        assert data['requestedYears'] == [2020, 2019]
        assert data['retrievedYears'] == [2020]
        assert data['skippedYears'] == [{'identifier': 2019, 'reason': 'fetch failed: timeout'}]
        assert data['complete'] is False
        assert data['yearlyData'][0]['temperatureMeanAvg'] == 15.0
        assert data['yearlyData'][0]['dataPointsCount'] == 365

    def test_complete(self, nyc, make_yearly_summary):
        result = PartialResult()
        result.add(make_yearly_summary())

        assert YearlyClimateResponse.from_result(nyc, [2020], result).to_dict()['complete'] is True


class TestDecadalAndTrendResponses:

    def test_decadal_to_dict(self, nyc, make_yearly_summary):
        decades = DecadalAggregator.summarize([make_yearly_summary(year=y) for y in (1990, 1991, 2000)])

        data = DecadalClimateResponse(nyc, 1990, 2000, decades).to_dict()

        assert data['requestedDecades'] == {'start': 1990, 'end': 2000}
        assert [d['decadeStart'] for d in data['decadalData']] == [1990, 2000]
        assert data['decadalData'][0]['yearsCount'] == 2
        assert data['complete'] is True

    def test_trends_to_dict(self, nyc, make_yearly_summary):
        yearly = [make_yearly_summary(year=2000), make_yearly_summary(year=2001)]

        data = ClimateTrendsResponse(nyc, 2000, 2010, [], yearly).to_dict()

        assert data['period'] == {'startYear': 2000, 'endYear': 2010}
        assert data['dataYears'] == [2000, 2001]
        assert data['trends'] == []


class TestProjectionResponses:

    @pytest.fixture
    def projection(self, nyc):
        return ProjectionCalculator.synthetic_projection(nyc, ClimateScenario.MODERATE, last_updated='2026-01-01T00:00:00+00:00')

    def test_periods_response(self, projection):
        filtered = projection.filter_periods(['2050s', '2030s'])

        data = ProjectionPeriodsResponse(filtered, ['2050s', '2030s'], ['2020s', '2030s', '2040s', '2050s']).to_dict()

        assert [p['period'] for p in data['projectionPeriods']] == ['2030s', '2050s']
        assert data['requestedPeriods'] == ['2050s', '2030s']
        assert data['availablePeriods'] == ['2020s', '2030s', '2040s', '2050s']
        assert data['source'] == 'synthetic'

    def test_summary_response(self, projection):
        data = FutureClimateSummaryResponse(projection).to_dict()

        expected_2030s = projection.get_period('2030s').change_from_baseline
        assert data['keyChanges']['temperature2030s'] == pytest.approx(expected_2030s.temperature)
        assert data['keyChanges']['precipitation2030s'] == pytest.approx(expected_2030s.precipitation)
        assert len(data['projectionPeriods']) == 4

        band = data['projectionPeriods'][0]['uncertaintyRange']['temperature']
        assert band['low'] == pytest.approx(-0.8)
        assert band['high'] == pytest.approx(0.8)
        assert data['metadata']['lastUpdated'] == '2026-01-01T00:00:00+00:00'
