"""
Output Port: Interface para repositórios de cache assíncronos
Usado para desacoplar use cases de detalhes do cache (memória, Redis, etc.)
"""
from typing import Protocol, Optional, Any


class IAsyncCacheRepository(Protocol):
    """Interface assíncrona para repositório de cache com TTL"""

    def is_enabled(self) -> bool:
        """
        Verifica se o cache está habilitado
        """
        ...

    async def get(self, key: str) -> Optional[Any]:
        """
        Busca item no cache por chave (None se ausente ou expirado)
        """
        ...

    async def set(self, key: str, value: Any, ttl_seconds: Optional[int] = None) -> bool:
        """
        Armazena item no cache com TTL
        """
        ...

    async def delete(self, key: str) -> bool:
        """
        Remove item do cache
        """
        ...

    async def clear(self) -> int:
        """
        Remove todos os itens; retorna quantos foram removidos
        """
        ...

    def size(self) -> int:
        """
        Número de entradas armazenadas (inclui expiradas ainda não varridas)
        """
        ...
