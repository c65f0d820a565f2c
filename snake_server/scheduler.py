"""Frame-driven fixed-timestep loop."""

from __future__ import annotations

import asyncio
import time
from typing import Awaitable, Callable, Optional


class Scheduler:
    """Decide on every frame whether enough time has passed to run a tick.

    ``interval`` is queried on every frame, so a difficulty change alters the
    cadence immediately. Pausing only gates ticking and rendering; frames
    keep arriving and keep being ignored until :meth:`resume`.
    """

    def __init__(
        self,
        tick: Callable[[], object],
        render: Callable[[], None],
        interval: Callable[[], float],
    ) -> None:
        self._tick = tick
        self._render = render
        self._interval = interval
        self.paused = False
        self.last_tick: Optional[float] = None
        self.frames = 0

    def on_frame(self, timestamp: float) -> bool:
        """Handle one frame at ``timestamp`` seconds. Return ``True`` if a tick ran."""

        self.frames += 1
        if self.paused:
            return False
        if self.last_tick is None:
            self.last_tick = timestamp
        if timestamp - self.last_tick > self._interval():
            self._tick()
            self._render()
            self.last_tick = timestamp
            return True
        return False

    def pause(self) -> None:
        self.paused = True

    def resume(self) -> None:
        self.paused = False

    def toggle_pause(self) -> bool:
        self.paused = not self.paused
        return self.paused

    async def run(
        self,
        frame_rate: int,
        clock: Callable[[], float] = time.monotonic,
        after_frame: Optional[Callable[[], Awaitable[None]]] = None,
    ) -> None:
        """Feed :meth:`on_frame` from the running event loop, forever.

        ``after_frame`` is awaited once per frame, ticked or not, which lets
        the server flush queued snapshots without blocking the tick itself.
        """

        frame_interval = 1.0 / frame_rate
        while True:
            self.on_frame(clock())
            if after_frame is not None:
                await after_frame()
            await asyncio.sleep(frame_interval)
