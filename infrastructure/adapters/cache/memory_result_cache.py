"""
In-Memory Result Cache Adapter - cache TTL em processo
Memoiza as computações caras (anos, décadas, tendências, projeções)
"""
import asyncio
from dataclasses import dataclass
from typing import Any, Dict, Optional
from ddtrace import tracer

from shared.config.logger_config import get_logger
from shared.config.settings import (
    CACHE_DEFAULT_TTL_SECONDS,
    CACHE_ENABLED,
    CACHE_SWEEP_INTERVAL_SECONDS
)
from shared.utils.clock import Clock, SystemClock

logger = get_logger(child=True)


@dataclass
class CacheEntry:
    value: Any
    expires_at: float  # tempo do clock (monotônico)


class InMemoryResultCache:
    """
    Cache TTL em memória

    - get() só retorna valor se now < expires_at; entrada vencida é removida no acesso
    - Varredura periódica (task asyncio) remove vencidas mesmo sem acesso
    - Tempo vem de um Clock injetado (virtual nos testes)

    Estrutura da entrada:
    {
        "value": <objeto de domínio/DTO>,
        "expires_at": 12345.6
    }
    """

    def __init__(
        self,
        default_ttl_seconds: int = CACHE_DEFAULT_TTL_SECONDS,
        sweep_interval_seconds: float = CACHE_SWEEP_INTERVAL_SECONDS,
        enabled: Optional[bool] = None,
        clock: Optional[Clock] = None
    ):
        self.default_ttl = default_ttl_seconds
        self.sweep_interval = sweep_interval_seconds
        self.enabled = CACHE_ENABLED if enabled is None else enabled
        self.clock = clock or SystemClock()

        self._entries: Dict[str, CacheEntry] = {}
        self._sweeper_task: Optional[asyncio.Task] = None

    def is_enabled(self) -> bool:
        """Verifica se cache está habilitado"""
        return self.enabled

    @tracer.wrap(resource="memory_cache.get")
    async def get(self, key: str) -> Optional[Any]:
        """
        Busca valor vigente

        Args:
            key: Chave do cache

        Returns:
            Valor armazenado ou None se ausente/expirado
        """
        if not self.is_enabled():
            return None

        entry = self._entries.get(key)
        if entry is None:
            return None

        if self.clock.now() >= entry.expires_at:
            # Vencida: remove no acesso
            del self._entries[key]
            return None

        return entry.value

    @tracer.wrap(resource="memory_cache.set")
    async def set(self, key: str, value: Any, ttl_seconds: Optional[int] = None) -> bool:
        """
        Armazena valor com expiração now + ttl

        Args:
            key: Chave
            value: Valor (qualquer objeto; não é serializado)
            ttl_seconds: TTL customizado (usa default se None)

        Returns:
            True se armazenou
        """
        if not self.is_enabled():
            return False

        ttl = self.default_ttl if ttl_seconds is None else ttl_seconds
        self._entries[key] = CacheEntry(value=value, expires_at=self.clock.now() + ttl)
        return True

    async def delete(self, key: str) -> bool:
        return self._entries.pop(key, None) is not None

    async def clear(self) -> int:
        removed = len(self._entries)
        self._entries.clear()
        logger.info("Cache limpo", removed=removed)
        return removed

    def size(self) -> int:
        return len(self._entries)

    def cleanup(self) -> int:
        """
        Remove todas as entradas vencidas

        Returns:
            Quantidade removida
        """
        now = self.clock.now()
        expired = [key for key, entry in self._entries.items() if now >= entry.expires_at]
        for key in expired:
            del self._entries[key]

        if expired:
            logger.info("Varredura do cache", removed=len(expired), remaining=len(self._entries))
        return len(expired)

    async def _sweep_forever(self) -> None:
        while True:
            await self.clock.sleep(self.sweep_interval)
            self.cleanup()

    def start_sweeper(self) -> None:
        """Inicia a varredura periódica no event loop atual (idempotente)"""
        loop = asyncio.get_running_loop()
        if self.sweeper_running and self._sweeper_task.get_loop() is loop:
            return

        self._sweeper_task = loop.create_task(self._sweep_forever())
        logger.info("Varredura do cache iniciada", interval_seconds=self.sweep_interval)

    @property
    def sweeper_running(self) -> bool:
        return self._sweeper_task is not None and not self._sweeper_task.done()

    async def stop_sweeper(self) -> None:
        """Cancela a varredura e aguarda o término da task"""
        task = self._sweeper_task
        self._sweeper_task = None
        if task is None or task.done():
            return

        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.info("Varredura do cache encerrada")
