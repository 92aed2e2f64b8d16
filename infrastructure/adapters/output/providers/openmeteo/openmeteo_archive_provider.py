"""Open-Meteo Archive Provider - séries diárias históricas (reanálise ERA5)"""

import asyncio
from typing import Optional
from ddtrace import tracer
import aiohttp

from application.ports.output.climate_archive_port import IClimateArchiveProvider
from domain.constants import API
from domain.entities.historical_weather import HistoricalWeatherSeries
from domain.exceptions import UpstreamServiceException
from domain.value_objects.coordinates import Coordinates
from infrastructure.adapters.output.providers.openmeteo.mappers import OpenMeteoDailyMapper
from shared.config.aiohttp_session_manager import AiohttpSessionManager
from shared.config.logger_config import get_logger
from shared.config.settings import HTTP_ARCHIVE_TIMEOUT, OPENMETEO_ARCHIVE_URL

logger = get_logger(child=True)


class OpenMeteoArchiveProvider(IClimateArchiveProvider):
    """
    Provider para Open-Meteo Historical Weather API

    Características:
    - API gratuita, cota de ~10.000 chamadas/dia (pacing fica no fetcher)
    - Dados desde 1940, atraso de ~2 dias
    - Sem retry: falha de um ano vira ano pulado
    - 100% async com aiohttp
    """

    def __init__(
        self,
        session_manager: AiohttpSessionManager,
        base_url: str = OPENMETEO_ARCHIVE_URL,
        timeout_seconds: float = HTTP_ARCHIVE_TIMEOUT
    ):
        self.session_manager = session_manager
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    @property
    def provider_name(self) -> str:
        return "OpenMeteoArchive"

    @tracer.wrap(resource="openmeteo.archive.get_historical_weather")
    async def get_historical_weather(
        self,
        coordinates: Coordinates,
        start_date: str,
        end_date: str
    ) -> HistoricalWeatherSeries:
        params = {
            'latitude': coordinates.latitude,
            'longitude': coordinates.longitude,
            'start_date': start_date,
            'end_date': end_date,
            'daily': ','.join(API.ARCHIVE_DAILY_VARIABLES),
            'timezone': API.ARCHIVE_TIMEZONE
        }

        session = await self.session_manager.get_session()

        try:
            async with session.get(self.base_url, params=params, timeout=self.timeout) as response:
                response.raise_for_status()
                data = await response.json()
        except aiohttp.ClientResponseError as e:
            raise UpstreamServiceException(
                f"Historical weather request failed with status {e.status}",
                details={"status": e.status, "start_date": start_date, "end_date": end_date}
            ) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise UpstreamServiceException(
                f"Historical weather request failed: {type(e).__name__}",
                details={"error": str(e), "start_date": start_date, "end_date": end_date}
            ) from e

        series = OpenMeteoDailyMapper.map_historical_series(data, coordinates)

        logger.debug(
            "Archive OK",
            location=str(coordinates),
            start_date=start_date,
            end_date=end_date,
            days=len(series.daily_records)
        )
        return series
