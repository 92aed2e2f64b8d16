"""Shared configuration"""
from .settings import YEAR_FETCH_INTERVAL_SECONDS, CACHE_ENABLED, CACHE_SWEEP_INTERVAL_SECONDS
from .logger_config import get_logger, logger

__all__ = [
    'YEAR_FETCH_INTERVAL_SECONDS',
    'CACHE_ENABLED',
    'CACHE_SWEEP_INTERVAL_SECONDS',
    'get_logger',
    'logger'
]
