"""Trend Analyzer - Tendência linear de métricas climáticas anuais"""
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from domain.constants import Climate
from domain.entities.climate_trend import TrendDirection, TrendResult
from domain.entities.yearly_summary import YearlySummary
from domain.helpers.statistics import linear_regression
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class TrendAnalyzer:
    """
    Regressão linear (OLS) ano × valor

    Séries com menos de MIN_TREND_POINTS pontos não geram resultado; é um
    piso fixo de significância, não um parâmetro.
    """

    # Métrica -> extrator do valor anual
    METRICS: Tuple[Tuple[str, Callable[[YearlySummary], float]], ...] = (
        (Climate.METRIC_TEMPERATURE_MEAN, lambda y: y.temperature_mean_avg),
        (Climate.METRIC_PRECIPITATION_ANNUAL, lambda y: y.precipitation_total),
    )

    @staticmethod
    def direction_for(slope: float) -> TrendDirection:
        if abs(slope) < Climate.TREND_STABLE_THRESHOLD:
            return TrendDirection.STABLE
        return TrendDirection.INCREASING if slope > 0 else TrendDirection.DECREASING

    @staticmethod
    def percent_change(baseline: float, current: float) -> float:
        if baseline == 0:
            return 0.0
        return (current - baseline) / baseline * 100

    @staticmethod
    def analyze(metric: str, series: Sequence[Tuple[int, float]]) -> Optional[TrendResult]:
        """
        Analisa uma série (ano, valor) de uma métrica

        Args:
            metric: Nome da métrica (temperature_mean, precipitation_annual)
            series: Pares (ano, valor); reordenados por ano

        Returns:
            TrendResult, ou None se houver menos de 10 pontos
        """
        if len(series) < Climate.MIN_TREND_POINTS:
            return None

        ordered = sorted(series, key=lambda point: point[0])
        years = [float(year) for year, _ in ordered]
        values = [value for _, value in ordered]

        fit = linear_regression(years, values)
        baseline_value = values[0]
        current_value = values[-1]

        return TrendResult(
            metric=metric,
            period_start=str(ordered[0][0]),
            period_end=str(ordered[-1][0]),
            trend_slope=fit.slope,
            trend_direction=TrendAnalyzer.direction_for(fit.slope),
            confidence_level=fit.r_squared * 100,
            baseline_value=baseline_value,
            current_value=current_value,
            percent_change=TrendAnalyzer.percent_change(baseline_value, current_value)
        )

    @staticmethod
    def calculate_climate_trends(yearly: Iterable[YearlySummary]) -> List[TrendResult]:
        """
        Tendências de temperatura média e precipitação anual

        Returns:
            Lista vazia se houver menos de 10 anos
        """
        ordered = sorted(yearly, key=lambda y: y.year)
        if len(ordered) < Climate.MIN_TREND_POINTS:
            logger.warning(
                "Insufficient data for trend analysis",
                years=len(ordered),
                minimum=Climate.MIN_TREND_POINTS
            )
            return []

        trends = []
        for metric, extract in TrendAnalyzer.METRICS:
            result = TrendAnalyzer.analyze(metric, [(y.year, extract(y)) for y in ordered])
            if result is not None:
                trends.append(result)
        return trends
