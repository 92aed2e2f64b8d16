"""
Output Ports - Interfaces para comunicação com infraestrutura externa
Define contratos que devem ser implementados pelos adapters de saída
"""

from .async_cache_repository_port import IAsyncCacheRepository
from .climate_archive_port import IClimateArchiveProvider
from .climate_model_port import IClimateModelProvider
from .rate_limiter_port import IRateLimiter
