"""
Domain Helpers - Funções utilitárias para cálculos de domínio
"""
from domain.helpers.statistics import LinearFit, calculate_average, linear_regression

__all__ = ['LinearFit', 'calculate_average', 'linear_regression']
