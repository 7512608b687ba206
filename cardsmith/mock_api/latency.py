"""Simulated network latency for the mock API."""

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

Sleep = Callable[[float], Awaitable[None]]


@dataclass
class Latency:
    """
    Delay applied before every mock API call.

    Attributes:
        scale: Multiplier on each operation's nominal delay (0 disables waiting
            but still yields to the event loop)
        sleep: Awaitable sleep taking seconds
    """

    scale: float = 1.0
    sleep: Sleep = asyncio.sleep

    async def wait(self, milliseconds: int) -> None:
        await self.sleep(milliseconds * self.scale / 1000)


NO_LATENCY = Latency(scale=0.0)
