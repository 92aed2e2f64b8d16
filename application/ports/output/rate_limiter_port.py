"""
Output Port: Interface para limitadores de taxa
Cada permit libera exatamente uma chamada ao upstream
"""
from typing import Protocol


class IRateLimiter(Protocol):
    """Interface assíncrona de pacing"""

    async def acquire(self) -> None:
        """
        Aguarda até que um novo permit possa ser concedido
        """
        ...
