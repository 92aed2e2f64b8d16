"""Infrastructure Providers - Implementações de provedores climáticos"""

from infrastructure.adapters.output.providers.openmeteo import (
    OpenMeteoArchiveProvider,
    OpenMeteoClimateProvider
)

__all__ = ['OpenMeteoArchiveProvider', 'OpenMeteoClimateProvider']
