"""
Interval Rate Limiter - agenda permits com intervalo mínimo fixo
Protege a cota diária do archive (~10.000 chamadas/dia)
"""
import asyncio
from typing import Optional

from shared.config.logger_config import get_logger
from shared.config.settings import YEAR_FETCH_INTERVAL_SECONDS
from shared.utils.clock import Clock, SystemClock

logger = get_logger(child=True)


class IntervalRateLimiter:
    """
    Garante min_interval segundos entre permits consecutivos

    O primeiro permit é imediato. Chamadas concorrentes são serializadas
    pelo lock, então o intervalo vale também entre requisições paralelas
    que compartilham a mesma instância.
    """

    def __init__(
        self,
        min_interval_seconds: float = YEAR_FETCH_INTERVAL_SECONDS,
        clock: Optional[Clock] = None
    ):
        if min_interval_seconds < 0:
            raise ValueError("min_interval_seconds must be >= 0")

        self.min_interval = min_interval_seconds
        self.clock = clock or SystemClock()
        self._last_permit: Optional[float] = None
        self._lock: Optional[asyncio.Lock] = None
        self._lock_loop_id: Optional[int] = None

    def _get_lock(self) -> asyncio.Lock:
        # Lock recriado quando o event loop muda (mesma regra da sessão aiohttp)
        current_loop_id = id(asyncio.get_running_loop())
        if self._lock is None or self._lock_loop_id != current_loop_id:
            self._lock = asyncio.Lock()
            self._lock_loop_id = current_loop_id
        return self._lock

    async def acquire(self) -> None:
        async with self._get_lock():
            if self._last_permit is not None:
                wait = self._last_permit + self.min_interval - self.clock.now()
                if wait > 0:
                    logger.debug("Aguardando permit", wait_seconds=round(wait, 3))
                    await self.clock.sleep(wait)
            self._last_permit = self.clock.now()
