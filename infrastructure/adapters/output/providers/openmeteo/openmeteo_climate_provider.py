"""Open-Meteo Climate Provider - séries diárias de modelos CMIP6"""

import asyncio
import logging
from typing import List, Optional
from ddtrace import tracer
import aiohttp
from tenacity import (
    AsyncRetrying,
    RetryError,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
    before_sleep_log
)
from tenacity.wait import wait_base

from application.ports.output.climate_model_port import IClimateModelProvider
from domain.constants import API
from domain.entities.daily_record import DailyRecord
from domain.exceptions import UpstreamServiceException
from domain.value_objects.coordinates import Coordinates
from infrastructure.adapters.output.providers.openmeteo.mappers import OpenMeteoDailyMapper
from shared.config.aiohttp_session_manager import AiohttpSessionManager
from shared.config.logger_config import get_logger
from shared.config.settings import (
    CLIMATE_MODEL_RETRY_ATTEMPTS,
    HTTP_CLIMATE_TIMEOUT,
    OPENMETEO_CLIMATE_URL
)

logger = get_logger(child=True)


def _is_transient(error: BaseException) -> bool:
    """Apenas rate limit (429), service unavailable (503) e timeout justificam retry"""
    if isinstance(error, asyncio.TimeoutError):
        return True
    return isinstance(error, aiohttp.ClientResponseError) and error.status in API.RETRYABLE_STATUS


class OpenMeteoClimateProvider(IClimateModelProvider):
    """
    Provider para Open-Meteo Climate API (CMIP6, até 2050)

    - Um modelo por chamada (parâmetro models)
    - Retry com exponential backoff em 429/503/timeout
    - Falhas finais viram UpstreamServiceException (o motor decide o fallback)
    """

    def __init__(
        self,
        session_manager: AiohttpSessionManager,
        base_url: str = OPENMETEO_CLIMATE_URL,
        timeout_seconds: float = HTTP_CLIMATE_TIMEOUT,
        max_attempts: int = CLIMATE_MODEL_RETRY_ATTEMPTS,
        retry_wait: Optional[wait_base] = None
    ):
        self.session_manager = session_manager
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self.max_attempts = max(1, max_attempts)
        self.retry_wait = retry_wait or wait_exponential(multiplier=1, min=1, max=4)

    @property
    def provider_name(self) -> str:
        return "OpenMeteoClimate"

    async def _fetch_once(self, session: aiohttp.ClientSession, params: dict) -> dict:
        async with session.get(self.base_url, params=params, timeout=self.timeout) as response:
            if response.status in API.RETRYABLE_STATUS:
                raise aiohttp.ClientResponseError(
                    request_info=response.request_info,
                    history=response.history,
                    status=response.status
                )
            response.raise_for_status()
            return await response.json()

    @tracer.wrap(resource="openmeteo.climate.get_daily_projection")
    async def get_daily_projection(
        self,
        coordinates: Coordinates,
        start_date: str,
        end_date: str,
        model: str
    ) -> List[DailyRecord]:
        params = {
            'latitude': coordinates.latitude,
            'longitude': coordinates.longitude,
            'start_date': start_date,
            'end_date': end_date,
            'daily': ','.join(API.CLIMATE_DAILY_VARIABLES),
            'models': model
        }

        session = await self.session_manager.get_session()
        details = {"model": model, "start_date": start_date, "end_date": end_date}

        try:
            async for attempt in AsyncRetrying(
                retry=retry_if_exception(_is_transient),
                stop=stop_after_attempt(self.max_attempts),
                wait=self.retry_wait,
                before_sleep=before_sleep_log(logger, logging.WARNING),
                reraise=True
            ):
                with attempt:
                    data = await self._fetch_once(session, params)
        except aiohttp.ClientResponseError as e:
            raise UpstreamServiceException(
                f"Climate model request failed with status {e.status}",
                details={**details, "status": e.status}
            ) from e
        except (aiohttp.ClientError, asyncio.TimeoutError, RetryError) as e:
            raise UpstreamServiceException(
                f"Climate model request failed: {type(e).__name__}",
                details={**details, "error": str(e)}
            ) from e

        records = OpenMeteoDailyMapper.map_daily_records(data)

        logger.debug("Climate API OK", location=str(coordinates), days=len(records), **details)
        return records
