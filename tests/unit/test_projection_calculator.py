"""
Testes para ProjectionCalculator (real, extrapolado e sintético)
"""
import pytest

from domain.constants import Projection
from domain.services.projection_calculator import ProjectionCalculator
from domain.services.yearly_aggregator import YearlyAggregator
from domain.value_objects.climate_scenario import ClimateScenario, DataSource


class TestUncertaintyRange:

    @pytest.mark.parametrize("scenario", list(ClimateScenario))
    def test_low_below_high(self, scenario):
        band = ProjectionCalculator.uncertainty_range(scenario, 15.0, 800.0)

        assert band.temperature_low < 15.0 < band.temperature_high
        assert band.precipitation_low < 800.0 < band.precipitation_high

    def test_pessimistic_band_at_15_degrees(self):
        band = ProjectionCalculator.uncertainty_range(ClimateScenario.PESSIMISTIC, 15.0, 800.0)

        assert band.temperature_low == pytest.approx(13.8)
        assert band.temperature_high == pytest.approx(16.2)
        assert band.precipitation_low == pytest.approx(640.0)
        assert band.precipitation_high == pytest.approx(960.0)

    def test_width_grows_with_scenario(self):
        """REGRA: optimistic < moderate < pessimistic na largura da banda"""
        bands = [
            ProjectionCalculator.uncertainty_range(s, 15.0, 800.0)
            for s in (ClimateScenario.OPTIMISTIC, ClimateScenario.MODERATE, ClimateScenario.PESSIMISTIC)
        ]

        assert bands[0].temperature_width < bands[1].temperature_width < bands[2].temperature_width
        assert bands[0].precipitation_width < bands[1].precipitation_width < bands[2].precipitation_width


class TestFromReduction:

    def test_deltas_against_real_baseline(self, make_year_records):
        reduction = YearlyAggregator.reduce(make_year_records(2031, temperature_mean=17.0, precipitation=2.0))

        period = ProjectionCalculator.from_reduction(ClimateScenario.MODERATE, '2030s', reduction)

        assert period.start_year == 2030
        assert period.end_year == 2039
        assert period.temperature_mean_avg == pytest.approx(17.0)
        assert period.precipitation_total == pytest.approx(730.0)
        assert period.change_from_baseline.temperature == pytest.approx(2.0)
        assert period.change_from_baseline.precipitation == pytest.approx(-8.75)


class TestExtrapolate:

    def test_later_decades_are_warmer(self):
        p2030 = ProjectionCalculator.extrapolate(ClimateScenario.MODERATE, '2030s')
        p2050 = ProjectionCalculator.extrapolate(ClimateScenario.MODERATE, '2050s')

        assert p2050.temperature_mean_avg > p2030.temperature_mean_avg
        assert p2050.change_from_baseline.temperature == pytest.approx(2.4)
        assert p2050.change_from_baseline.precipitation == pytest.approx(15.0)

    def test_multiplier_scales_warming(self):
        optimistic = ProjectionCalculator.extrapolate(ClimateScenario.OPTIMISTIC, '2050s')
        pessimistic = ProjectionCalculator.extrapolate(ClimateScenario.PESSIMISTIC, '2050s')

        assert optimistic.change_from_baseline.temperature == pytest.approx(3 * 0.8 * 0.6)
        assert pessimistic.change_from_baseline.temperature == pytest.approx(3 * 0.8 * 1.4)

    def test_spread_and_daily_precipitation(self):
        period = ProjectionCalculator.extrapolate(ClimateScenario.MODERATE, '2040s')

        assert period.temperature_max_avg - period.temperature_mean_avg == pytest.approx(5.0)
        assert period.temperature_mean_avg - period.temperature_min_avg == pytest.approx(5.0)
        assert period.precipitation_avg == pytest.approx(period.precipitation_total / 365)


class TestSynthetic:

    def test_moderate_2030s_values(self):
        period = ProjectionCalculator.synthetic_period(ClimateScenario.MODERATE, '2030s')

        assert period.temperature_mean_avg == pytest.approx(17.5)
        assert period.temperature_max_avg == pytest.approx(23.5)
        assert period.temperature_min_avg == pytest.approx(13.5)
        assert period.precipitation_total == pytest.approx(822.5)
        assert period.change_from_baseline.temperature == pytest.approx(0.3)
        assert period.change_from_baseline.precipitation == pytest.approx(2.5 / 820 * 100)

    def test_2020s_is_before_reference_year(self):
        period = ProjectionCalculator.synthetic_period(ClimateScenario.OPTIMISTIC, '2020s')

        assert period.change_from_baseline.temperature == pytest.approx(-0.3)

    def test_full_synthetic_projection(self, nyc):
        projection = ProjectionCalculator.synthetic_projection(
            nyc, ClimateScenario.PESSIMISTIC, last_updated='2026-01-01T00:00:00+00:00'
        )

        assert projection.source is DataSource.SYNTHETIC
        assert projection.is_synthetic
        assert projection.model == Projection.SCENARIO_MODELS['pessimistic']
        assert [p.period for p in projection.projection_periods] == ['2020s', '2030s', '2040s', '2050s']
        assert projection.baseline.temperature_mean == 15.2
        assert projection.baseline.precipitation == 845.0
        assert projection.metadata.last_updated == '2026-01-01T00:00:00+00:00'
        assert projection.to_api_response()['source'] == 'synthetic'
