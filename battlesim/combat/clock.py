"""
Clocks used by the battle controller for its presentation delays.
"""

import asyncio
from abc import ABC, abstractmethod


class Clock(ABC):
    """An abstract source of delays."""

    @abstractmethod
    async def sleep(self, seconds: float) -> None:
        """Suspends the caller for the given number of seconds."""


class RealClock(Clock):
    """Waits for real time to pass."""

    async def sleep(self, seconds: float) -> None:
        await asyncio.sleep(seconds)


class ImmediateClock(Clock):
    """
    Returns as soon as the event loop has had a chance to run other tasks.
    Records the requested delays.
    """

    def __init__(self) -> None:
        self.requested: list[float] = []

    async def sleep(self, seconds: float) -> None:
        self.requested.append(seconds)
        await asyncio.sleep(0)
