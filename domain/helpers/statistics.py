"""
Statistics Helpers - média e regressão linear por mínimos quadrados
Helper utilitário usado pelos agregadores e pelo analisador de tendência
"""
import math
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence


@dataclass(frozen=True)
class LinearFit:
    """Resultado do ajuste OLS: y = slope * x + intercept"""
    slope: float
    intercept: float
    r_squared: float


def _is_number(value: Optional[float]) -> bool:
    return value is not None and not math.isnan(value)


def calculate_average(values: Iterable[Optional[float]]) -> float:
    """
    Média aritmética ignorando None e NaN

    Args:
        values: Valores (podem conter None)

    Returns:
        Média dos valores presentes, ou 0.0 se nenhum valor presente
    """
    present = [v for v in values if _is_number(v)]
    if not present:
        return 0.0
    return sum(present) / len(present)


def linear_regression(x_values: Sequence[float], y_values: Sequence[float]) -> LinearFit:
    """
    Ajuste por mínimos quadrados ordinários

    slope = (nΣxy − ΣxΣy) / (nΣx² − (Σx)²)
    intercept = (Σy − slope·Σx) / n
    R² = 1 − SS_res / SS_tot

    Casos degenerados:
    - Σx sem variância: slope 0.0
    - y constante: R² = 1.0 se o ajuste é exato, senão 0.0

    Args:
        x_values: Abscissas (anos)
        y_values: Ordenadas (valores da métrica)

    Returns:
        LinearFit com slope, intercept e r_squared

    Raises:
        ValueError: Se as séries forem vazias ou de tamanhos diferentes
    """
    n = len(x_values)
    if n == 0 or n != len(y_values):
        raise ValueError("x_values and y_values must be non-empty and of equal length")

    sum_x = sum(x_values)
    sum_y = sum(y_values)
    sum_xy = sum(x * y for x, y in zip(x_values, y_values))
    sum_xx = sum(x * x for x in x_values)

    denominator = n * sum_xx - sum_x * sum_x
    slope = (n * sum_xy - sum_x * sum_y) / denominator if denominator != 0 else 0.0
    intercept = (sum_y - slope * sum_x) / n

    y_mean = sum_y / n
    ss_tot = sum((y - y_mean) ** 2 for y in y_values)
    ss_res = sum((y - (slope * x + intercept)) ** 2 for x, y in zip(x_values, y_values))

    if ss_tot == 0:
        r_squared = 1.0 if math.isclose(ss_res, 0.0, abs_tol=1e-12) else 0.0
    else:
        r_squared = 1 - ss_res / ss_tot

    return LinearFit(slope=slope, intercept=intercept, r_squared=r_squared)
