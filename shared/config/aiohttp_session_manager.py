"""
Aiohttp Session Manager - sessão HTTP compartilhada pelos providers Open-Meteo
Criada pelo container da aplicação e fechada no shutdown
"""
import asyncio
from typing import Optional
import aiohttp

from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class AiohttpSessionManager:
    """
    Gerenciador de sessão aiohttp

    - Reutiliza a sessão enquanto o event loop for o mesmo
    - Recria a sessão quando o loop muda (asyncio.run cria novos loops)
    - Um único pool de conexões para archive e climate API

    Uso:
        manager = AiohttpSessionManager()
        session = await manager.get_session()
        async with session.get(url, params=params) as response:
            data = await response.json()
    """

    def __init__(
        self,
        total_timeout: float = 15,
        connect_timeout: float = 5,
        limit: int = 20,
        limit_per_host: int = 10,
        ttl_dns_cache: int = 300
    ):
        self.total_timeout = total_timeout
        self.connect_timeout = connect_timeout
        self.limit = limit
        self.limit_per_host = limit_per_host
        self.ttl_dns_cache = ttl_dns_cache

        self._session: Optional[aiohttp.ClientSession] = None
        self._session_loop_id: Optional[int] = None

    async def get_session(self) -> aiohttp.ClientSession:
        """
        Retorna sessão aiohttp (cria ou reutiliza)

        Returns:
            Sessão aiohttp vinculada ao event loop atual
        """
        current_loop_id = id(asyncio.get_running_loop())

        if (self._session is not None and
                not self._session.closed and
                self._session_loop_id == current_loop_id):
            return self._session

        if self._session is not None and not self._session.closed:
            logger.info(
                "Event loop changed - recreating session",
                old_loop_id=self._session_loop_id,
                new_loop_id=current_loop_id
            )
            await self._close_session()

        timeout = aiohttp.ClientTimeout(
            total=self.total_timeout,
            connect=self.connect_timeout
        )
        connector = aiohttp.TCPConnector(
            limit=self.limit,
            limit_per_host=self.limit_per_host,
            ttl_dns_cache=self.ttl_dns_cache
        )
        self._session = aiohttp.ClientSession(timeout=timeout, connector=connector)
        self._session_loop_id = current_loop_id

        logger.info(
            "Aiohttp session created",
            loop_id=current_loop_id,
            limit=self.limit,
            limit_per_host=self.limit_per_host
        )
        return self._session

    async def _close_session(self) -> None:
        if self._session is not None and not self._session.closed:
            try:
                await self._session.close()
                logger.info("Aiohttp session closed", loop_id=self._session_loop_id)
            except Exception as e:
                logger.warning(
                    "Error closing aiohttp session",
                    error=str(e),
                    loop_id=self._session_loop_id
                )
            finally:
                self._session = None
                self._session_loop_id = None

    async def cleanup(self) -> None:
        """Fecha a sessão e libera o pool de conexões"""
        await self._close_session()
