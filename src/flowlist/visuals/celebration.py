# src/flowlist/visuals/celebration.py

"""
Celebration generator: a one-shot burst of falling particles.

`trigger(bounds)` spawns a fixed-size batch synchronously. Each particle
falls from above the canvas to just below it while fading out, over its
own randomly drawn duration, then is removed from its batch. Batches are
independent: triggering again while one is in flight starts another one
alongside it, with no cap.

The layer is decorative only and never takes input (`blocks_input`).
"""

from __future__ import annotations

import asyncio
import contextlib
import itertools
import logging
import random
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

logger = logging.getLogger(__name__)

PARTICLE_COUNT = 50
PARTICLE_COLORS: tuple[str, ...] = ("red", "blue", "green", "yellow", "purple", "orange", "pink")
SIZE_RANGE: tuple[float, float] = (8.0, 14.0)
DURATION_RANGE: tuple[float, float] = (1.0, 2.0)
# Particles start this far above the top edge and end this far below the bottom.
EDGE_OFFSET = 50.0
FRAME_SECONDS = 1 / 30


@dataclass(slots=True, frozen=True)
class Bounds:
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"bounds must be non-negative, got {self.width}x{self.height}")


class ParticlePhase(str, Enum):
    SPAWNED = "spawned"
    FALLING = "falling"
    REMOVED = "removed"


def ease_out(progress: float) -> float:
    return 1.0 - (1.0 - progress) ** 2


@dataclass(slots=True, eq=False)
class Particle:
    token: int
    color: str
    size: float
    x: float
    start_y: float
    end_y: float
    duration: float
    spawned_at: float
    y: float = 0.0
    opacity: float = 1.0
    phase: ParticlePhase = ParticlePhase.SPAWNED

    def step(self, now: float) -> bool:
        """Move to the frame at `now`. Returns True once the particle has run its course."""
        if self.phase is ParticlePhase.REMOVED:
            return True

        progress = (now - self.spawned_at) / self.duration
        progress = max(0.0, min(1.0, progress))
        eased = ease_out(progress)

        self.y = self.start_y + (self.end_y - self.start_y) * eased
        self.opacity = 1.0 - eased

        if progress >= 1.0:
            self.y = self.end_y
            self.opacity = 0.0
            self.phase = ParticlePhase.REMOVED
            return True

        self.phase = ParticlePhase.FALLING
        return False


@dataclass(slots=True, eq=False)
class CelebrationBatch:
    token: int
    bounds: Bounds
    started_at: float
    particles: list[Particle] = field(default_factory=list)

    @property
    def finished(self) -> bool:
        return not self.particles

    def find(self, token: int) -> Particle | None:
        for p in self.particles:
            if p.token == token:
                return p
        return None

    def advance(self, now: float) -> int:
        """Step every live particle; drop the ones that finished. Returns how many retired."""
        before = len(self.particles)
        self.particles = [p for p in self.particles if not p.step(now)]
        return before - len(self.particles)


class CelebrationGenerator:
    blocks_input = False

    def __init__(
        self,
        *,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
        dismiss_after_seconds: float = 2.5,
        frame_seconds: float = FRAME_SECONDS,
    ) -> None:
        self._rng = rng or random.Random()
        self._clock = clock
        self.dismiss_after_seconds = float(dismiss_after_seconds)
        self.frame_seconds = float(frame_seconds)

        self._tokens = itertools.count(1)
        self._batches: list[CelebrationBatch] = []
        self._animations: set[asyncio.Task[None]] = set()
        self._dismiss_handles: list[asyncio.TimerHandle] = []
        self.visible = False

    # ---- state ----

    @property
    def batches(self) -> tuple[CelebrationBatch, ...]:
        return tuple(self._batches)

    def particles(self) -> list[Particle]:
        return [p for b in self._batches for p in b.particles]

    # ---- generation ----

    def _spawn(self, bounds: Bounds, now: float) -> Particle:
        rng = self._rng
        width = bounds.width
        start_y = -EDGE_OFFSET
        return Particle(
            token=next(self._tokens),
            color=rng.choice(PARTICLE_COLORS),
            size=rng.uniform(*SIZE_RANGE),
            # random() is in [0, 1), so x never reaches the right edge.
            x=rng.random() * width if width > 0 else 0.0,
            start_y=start_y,
            end_y=bounds.height + EDGE_OFFSET,
            duration=rng.uniform(*DURATION_RANGE),
            spawned_at=now,
            y=start_y,
        )

    def trigger(self, bounds: Bounds) -> CelebrationBatch:
        now = self._clock()
        batch = CelebrationBatch(token=next(self._tokens), bounds=bounds, started_at=now)
        batch.particles = [self._spawn(bounds, now) for _ in range(PARTICLE_COUNT)]
        self._batches.append(batch)
        logger.debug(
            "Celebration batch %d: %d particles over %.0fx%.0f (live batches=%d)",
            batch.token,
            len(batch.particles),
            bounds.width,
            bounds.height,
            len(self._batches),
        )
        return batch

    def advance(self, now: float | None = None) -> int:
        """Step every batch to `now`; forget batches with no particles left."""
        if now is None:
            now = self._clock()
        retired = 0
        for batch in self._batches:
            retired += batch.advance(now)
        self._batches = [b for b in self._batches if not b.finished]
        return retired

    # ---- event loop helpers ----

    async def animate(self, batch: CelebrationBatch) -> None:
        """Drive one batch frame by frame until its last particle is gone."""
        while not batch.finished and batch in self._batches:
            await asyncio.sleep(self.frame_seconds)
            batch.advance(self._clock())
        if batch in self._batches:
            self._batches.remove(batch)
        logger.debug("Celebration batch %d done.", batch.token)

    def celebrate(self, bounds: Bounds) -> CelebrationBatch:
        """
        Show the layer, spawn a batch and animate it on the running loop.

        The layer hides itself after `dismiss_after_seconds`, a fixed delay
        that does not wait for the actual last particle.
        """
        loop = asyncio.get_running_loop()
        batch = self.trigger(bounds)
        self.visible = True

        task = loop.create_task(self.animate(batch), name=f"celebration:{batch.token}")
        self._animations.add(task)
        task.add_done_callback(self._animations.discard)

        handle: asyncio.TimerHandle | None = None

        def fire() -> None:
            self._dismiss_handles = [h for h in self._dismiss_handles if h is not handle]
            self.dismiss()

        handle = loop.call_later(self.dismiss_after_seconds, fire)
        self._dismiss_handles.append(handle)
        return batch

    def dismiss(self) -> None:
        """Hide the layer. Batches still in flight finish and retire on their own."""
        self.visible = False
        logger.debug("Celebration layer dismissed (live batches=%d).", len(self._batches))

    async def close(self) -> None:
        """Teardown hook: cancel pending dismiss timers and in-flight animations."""
        for handle in self._dismiss_handles:
            handle.cancel()
        self._dismiss_handles.clear()

        tasks = list(self._animations)
        for task in tasks:
            task.cancel()
        for task in tasks:
            with contextlib.suppress(asyncio.CancelledError):
                await task

        self._batches.clear()
        self.visible = False
