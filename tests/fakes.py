# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from flowlist.visuals.celebration import Bounds, CelebrationBatch


class TickingClock:
    """
    Deterministic datetime clock for TaskStore tests.

    Every call returns a time one second later than the previous one.
    """

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 5, 1, 9, 0, tzinfo=UTC)
        self.calls = 0

    def __call__(self) -> datetime:
        self.calls += 1
        self.now = self.now + timedelta(seconds=1)
        return self.now


class StepClock:
    """Monotonic float clock that jumps `step` seconds on every read."""

    def __init__(self, start: float = 100.0, step: float = 0.5) -> None:
        self.value = start
        self.step = step

    def __call__(self) -> float:
        current = self.value
        self.value += self.step
        return current


@dataclass(slots=True)
class FakeCelebrator:
    """
    Celebrator that only records calls; no event loop required.
    """

    visible: bool = False
    calls: list[Bounds] = field(default_factory=list)
    closed: bool = False

    def celebrate(self, bounds: Bounds) -> CelebrationBatch:
        self.calls.append(bounds)
        self.visible = True
        return CelebrationBatch(token=len(self.calls), bounds=bounds, started_at=0.0)

    async def close(self) -> None:
        self.closed = True
        self.visible = False
