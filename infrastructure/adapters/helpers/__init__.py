"""
Helper utilities for upstream access
"""

from infrastructure.adapters.helpers.interval_rate_limiter import IntervalRateLimiter

__all__ = [
    'IntervalRateLimiter'
]
