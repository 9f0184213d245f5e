# src/flowlist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the boundary and the console.

Callers depend on Protocols instead of concrete classes, so tests can
swap in fakes for the store or the celebration layer.
"""

from collections.abc import Callable
from typing import Protocol

from ..tasks.task_models import Task, TaskCategory, TaskPriority
from ..visuals.celebration import Bounds, CelebrationBatch


class TaskRepo(Protocol):
    # Queries
    def snapshot(self) -> tuple[Task, ...]: ...
    def get(self, task_id: str) -> Task | None: ...
    def pending_count(self) -> int: ...
    def completed_count(self) -> int: ...
    def has_completed(self) -> bool: ...

    # Commands
    def add(
            self,
            title: str,
            description: str = "",
            priority: TaskPriority = TaskPriority.MEDIUM,
            category: TaskCategory = TaskCategory.OTHER,
    ) -> None: ...
    def toggle(self, task_id: str) -> None: ...
    def delete(self, task_id: str) -> None: ...
    def delete_completed(self) -> None: ...
    def update(self, task: Task) -> None: ...

    def subscribe(self, listener: Callable[[tuple[Task, ...]], None]) -> Callable[[], None]: ...


class Celebrator(Protocol):
    """Decorative completion effect. Must never block input."""

    visible: bool

    def celebrate(self, bounds: Bounds) -> CelebrationBatch: ...
    async def close(self) -> None: ...
