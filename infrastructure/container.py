"""
Service Container - dono do ciclo de vida das dependências
Uma instância por processo Lambda; reutilizada entre invocações (warm starts)
"""
import atexit
import asyncio
from typing import Optional

from application.services.cache_service import CacheService
from application.services.scenario_projection_engine import ScenarioProjectionEngine
from application.services.yearly_climate_fetcher import YearlyClimateFetcher
from application.use_cases.compare_scenarios_use_case import CompareScenariosUseCase
from application.use_cases.get_climate_trends_use_case import GetClimateTrendsUseCase
from application.use_cases.get_decadal_climate_use_case import GetDecadalClimateUseCase
from application.use_cases.get_future_climate_summary_use_case import GetFutureClimateSummaryUseCase
from application.use_cases.get_future_projections_use_case import GetFutureProjectionsUseCase
from application.use_cases.get_historical_weather_use_case import GetHistoricalWeatherUseCase
from application.use_cases.get_projection_periods_use_case import GetProjectionPeriodsUseCase
from application.use_cases.get_yearly_climate_use_case import GetYearlyClimateUseCase
from infrastructure.adapters.cache.memory_result_cache import InMemoryResultCache
from infrastructure.adapters.helpers.interval_rate_limiter import IntervalRateLimiter
from infrastructure.adapters.output.providers.openmeteo import (
    OpenMeteoArchiveProvider,
    OpenMeteoClimateProvider
)
from shared.config.aiohttp_session_manager import AiohttpSessionManager
from shared.config.logger_config import get_logger
from shared.config.settings import (
    HTTP_CLIMATE_TIMEOUT,
    HTTP_CONNECT_TIMEOUT,
    YEAR_FETCH_INTERVAL_SECONDS
)
from shared.utils.clock import Clock, SystemClock

logger = get_logger(child=True)


class ClimateServiceContainer:
    """
    Monta o grafo de dependências

    - Uma sessão aiohttp para archive e climate API
    - Um cache em memória com varredura periódica (start/shutdown explícitos)
    - Um rate limiter compartilhado por todas as buscas anuais
    """

    def __init__(
        self,
        cache: Optional[InMemoryResultCache] = None,
        clock: Optional[Clock] = None,
        session_manager: Optional[AiohttpSessionManager] = None,
        archive_provider=None,
        climate_provider=None,
        rate_limiter=None
    ):
        self.clock = clock or SystemClock()
        self.session_manager = session_manager or AiohttpSessionManager(
            total_timeout=HTTP_CLIMATE_TIMEOUT,
            connect_timeout=HTTP_CONNECT_TIMEOUT
        )
        self.cache = cache or InMemoryResultCache(clock=self.clock)
        self.rate_limiter = rate_limiter or IntervalRateLimiter(
            min_interval_seconds=YEAR_FETCH_INTERVAL_SECONDS,
            clock=self.clock
        )
        self.archive_provider = archive_provider or OpenMeteoArchiveProvider(self.session_manager)
        self.climate_provider = climate_provider or OpenMeteoClimateProvider(self.session_manager)

        self.cache_service = CacheService(self.cache)
        self.fetcher = YearlyClimateFetcher(self.archive_provider, self.rate_limiter)
        self.engine = ScenarioProjectionEngine(self.climate_provider)
        self._started = False
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    # Use case factories

    def historical_weather_use_case(self) -> GetHistoricalWeatherUseCase:
        return GetHistoricalWeatherUseCase(self.archive_provider, self.cache_service)

    def yearly_climate_use_case(self) -> GetYearlyClimateUseCase:
        return GetYearlyClimateUseCase(self.fetcher, self.cache_service)

    def decadal_climate_use_case(self) -> GetDecadalClimateUseCase:
        return GetDecadalClimateUseCase(self.fetcher, self.cache_service)

    def climate_trends_use_case(self) -> GetClimateTrendsUseCase:
        return GetClimateTrendsUseCase(self.fetcher, self.cache_service)

    def future_projections_use_case(self) -> GetFutureProjectionsUseCase:
        return GetFutureProjectionsUseCase(self.engine, self.cache_service)

    def compare_scenarios_use_case(self) -> CompareScenariosUseCase:
        return CompareScenariosUseCase(self.engine, self.cache_service)

    def projection_periods_use_case(self) -> GetProjectionPeriodsUseCase:
        return GetProjectionPeriodsUseCase(self.future_projections_use_case())

    def future_climate_summary_use_case(self) -> GetFutureClimateSummaryUseCase:
        return GetFutureClimateSummaryUseCase(self.future_projections_use_case())

    # Lifecycle

    @property
    def started(self) -> bool:
        return self._started and self.cache.sweeper_running

    async def ensure_started(self) -> None:
        """
        Inicia a varredura do cache no loop atual (idempotente)

        Chamado no início de cada rota; o loop persistente do handler
        mantém a task viva entre invocações.
        """
        if self.started and self._loop is asyncio.get_running_loop():
            return
        self.cache.start_sweeper()
        self._loop = asyncio.get_running_loop()
        self._started = True
        logger.info("Container iniciado", cache_enabled=self.cache.is_enabled())

    async def shutdown(self) -> None:
        """Para a varredura e fecha a sessão HTTP"""
        await self.cache.stop_sweeper()
        await self.session_manager.cleanup()
        self._started = False
        logger.info("Container encerrado")


_container: Optional[ClimateServiceContainer] = None


def get_container() -> ClimateServiceContainer:
    """
    Factory para obter singleton do container
    Reutiliza entre invocações Lambda (warm starts)
    """
    global _container

    if _container is None:
        _container = ClimateServiceContainer()

    return _container


def set_container(container: Optional[ClimateServiceContainer]) -> None:
    """Substitui o container do processo (testes de integração)"""
    global _container
    _container = container


def _shutdown_at_exit() -> None:
    container = _container
    if container is None or not container.started:
        return

    # Encerra no mesmo loop em que a varredura foi criada
    loop = container._loop
    if loop is None or loop.is_closed() or loop.is_running():
        return
    try:
        loop.run_until_complete(container.shutdown())
    except RuntimeError as e:
        logger.warning("Falha ao encerrar container", error=str(e))


atexit.register(_shutdown_at_exit)
