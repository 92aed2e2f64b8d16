"""
Climate Trend Entity - resultado da regressão linear de uma métrica
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any


class TrendDirection(str, Enum):
    INCREASING = 'increasing'
    DECREASING = 'decreasing'
    STABLE = 'stable'


@dataclass(frozen=True)
class TrendResult:
    """
    Tendência de uma métrica ao longo dos anos

    baseline_value/current_value são o primeiro e o último valor cronológico,
    não os extremos da reta ajustada.
    """
    metric: str
    period_start: str
    period_end: str
    trend_slope: float
    trend_direction: TrendDirection
    confidence_level: float  # R² x 100
    baseline_value: float
    current_value: float
    percent_change: float

    def to_api_response(self) -> Dict[str, Any]:
        return {
            'metric': self.metric,
            'periodStart': self.period_start,
            'periodEnd': self.period_end,
            'trendSlope': self.trend_slope,
            'trendDirection': self.trend_direction.value,
            'confidenceLevel': self.confidence_level,
            'baselineValue': self.baseline_value,
            'currentValue': self.current_value,
            'percentChange': self.percent_change
        }
