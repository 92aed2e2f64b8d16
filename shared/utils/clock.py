"""
Clock - fonte de tempo injetável
Rate limiter e cache dependem desta interface para permitir relógio virtual em testes
"""
import asyncio
import time
from typing import Protocol


class Clock(Protocol):
    """Interface mínima de relógio (monotônico em segundos)"""

    def now(self) -> float:
        ...

    async def sleep(self, seconds: float) -> None:
        ...


class SystemClock:
    """Relógio real: time.monotonic + asyncio.sleep"""

    def now(self) -> float:
        return time.monotonic()

    async def sleep(self, seconds: float) -> None:
        await asyncio.sleep(seconds)
