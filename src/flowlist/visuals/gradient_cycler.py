# src/flowlist/visuals/gradient_cycler.py

from __future__ import annotations

"""
Gradient cycler.

Owns one integer: the index of the active background gradient. Every
`interval_seconds` the index steps to the next palette entry and wraps
around. The same step can be taken by hand (`advance`), e.g. from a
"change theme" button.

There is no pause/resume. A cycler runs for the lifetime of the surface
that started it; `close()` is the teardown hook that surface may call to
stop the timer instead of leaking it.
"""

import asyncio
import contextlib
import logging
from collections.abc import Callable, Sequence

from .palettes import Gradient

logger = logging.getLogger(__name__)

CycleListener = Callable[[int], None]


class GradientCycler:
    def __init__(
        self,
        palette: Sequence[Gradient],
        *,
        interval_seconds: float,
        name: str = "main",
        start_index: int = 0,
    ) -> None:
        if not palette:
            raise ValueError("palette must contain at least one gradient")
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")

        self._palette: tuple[Gradient, ...] = tuple(palette)
        self.interval_seconds = float(interval_seconds)
        self.name = name
        self._index = start_index % len(self._palette)
        self._listeners: list[CycleListener] = []
        self._task: asyncio.Task[None] | None = None

    @property
    def index(self) -> int:
        return self._index

    @property
    def palette(self) -> tuple[Gradient, ...]:
        return self._palette

    @property
    def current(self) -> Gradient:
        return self._palette[self._index]

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def subscribe(self, listener: CycleListener) -> None:
        self._listeners.append(listener)

    def advance(self) -> int:
        """Step to the next gradient (wrapping) and return the new index."""
        self._index = (self._index + 1) % len(self._palette)
        logger.debug("Cycler %s -> %d (%s)", self.name, self._index, self.current.name)
        for listener in list(self._listeners):
            try:
                listener(self._index)
            except Exception:
                logger.exception("Cycler %s listener failed", self.name)
        return self._index

    async def run(self) -> None:
        """
        Advance forever, once per interval.

        To stop it, cancel the coroutine/task (or call close()).
        """
        while True:
            await asyncio.sleep(self.interval_seconds)
            self.advance()

    def start(self) -> asyncio.Task[None]:
        """Schedule run() on the running event loop. Calling it twice is harmless."""
        if self._task is not None and not self._task.done():
            return self._task
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(self.run(), name=f"gradient-cycler:{self.name}")
        logger.info("Cycler %s started (every %.1fs, %d gradients).", self.name, self.interval_seconds, len(self._palette))
        return self._task

    async def close(self) -> None:
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        logger.info("Cycler %s stopped at index %d.", self.name, self._index)
