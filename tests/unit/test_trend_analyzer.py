"""
Testes para TrendAnalyzer
"""
import pytest

from domain.entities.climate_trend import TrendDirection
from domain.services.trend_analyzer import TrendAnalyzer


class TestTrendAnalyzer:

    def test_perfect_linear_series(self):
        """REGRA: y = ano + 10 → slope 1, confiança 100%, increasing"""
        series = [(year, year + 10.0) for year in range(2000, 2021)]

        result = TrendAnalyzer.analyze('temperature_mean', series)

        assert result.trend_slope == pytest.approx(1.0)
        assert result.confidence_level == pytest.approx(100.0)
        assert result.trend_direction == TrendDirection.INCREASING
        assert result.baseline_value == 2010.0
        assert result.current_value == 2030.0
        assert result.period_start == '2000'
        assert result.period_end == '2020'

    def test_minimum_points_threshold(self):
        """REGRA: 9 pontos → nada; 10 pontos → resultado"""
        nine = [(2000 + i, float(i)) for i in range(9)]
        ten = [(2000 + i, float(i)) for i in range(10)]

        assert TrendAnalyzer.analyze('temperature_mean', nine) is None
        assert TrendAnalyzer.analyze('temperature_mean', ten) is not None

    @pytest.mark.parametrize("slope,expected", [
        (0.0099, TrendDirection.STABLE),
        (-0.0099, TrendDirection.STABLE),
        (0.01, TrendDirection.INCREASING),
        (-0.01, TrendDirection.DECREASING),
    ])
    def test_direction_threshold(self, slope, expected):
        assert TrendAnalyzer.direction_for(slope) == expected

    def test_baseline_and_current_are_chronological_endpoints(self):
        """REGRA: baseline/current são o primeiro/último valor, não a reta ajustada"""
        series = [(2000 + i, 10.0 + (1.0 if i % 2 else -1.0)) for i in range(12)]

        result = TrendAnalyzer.analyze('temperature_mean', list(reversed(series)))

        assert result.baseline_value == 9.0
        assert result.current_value == 11.0
        assert result.percent_change == pytest.approx((11.0 - 9.0) / 9.0 * 100)

    def test_zero_baseline_percent_change(self):
        series = [(2000 + i, float(i)) for i in range(10)]

        result = TrendAnalyzer.analyze('precipitation_annual', series)

        assert result.percent_change == 0.0

    def test_calculate_climate_trends(self, make_yearly_summary):
        yearly = [
            make_yearly_summary(year=y, temperature_mean_avg=10 + 0.05 * (y - 2000), precipitation_total=800.0)
            for y in range(2000, 2015)
        ]

        trends = TrendAnalyzer.calculate_climate_trends(yearly)

        assert [t.metric for t in trends] == ['temperature_mean', 'precipitation_annual']
        temperature, precipitation = trends
        assert temperature.trend_direction == TrendDirection.INCREASING
        assert temperature.trend_slope == pytest.approx(0.05)
        assert precipitation.trend_direction == TrendDirection.STABLE
        assert precipitation.confidence_level == pytest.approx(100.0)

    def test_calculate_climate_trends_insufficient_years(self, make_yearly_summary):
        yearly = [make_yearly_summary(year=y) for y in range(2000, 2009)]

        assert TrendAnalyzer.calculate_climate_trends(yearly) == []
