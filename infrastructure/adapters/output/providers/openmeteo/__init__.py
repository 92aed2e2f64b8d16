"""Open-Meteo Provider Package"""

from infrastructure.adapters.output.providers.openmeteo.openmeteo_archive_provider import (
    OpenMeteoArchiveProvider
)
from infrastructure.adapters.output.providers.openmeteo.openmeteo_climate_provider import (
    OpenMeteoClimateProvider
)

__all__ = ['OpenMeteoArchiveProvider', 'OpenMeteoClimateProvider']
