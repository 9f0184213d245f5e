# src/flowlist/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import UTC, datetime

from .task_models import Task, TaskCategory, TaskPriority, new_task_id

logger = logging.getLogger(__name__)

TaskSnapshot = tuple[Task, ...]
StoreListener = Callable[[TaskSnapshot], None]


def _utcnow() -> datetime:
    return datetime.now(UTC)


class TaskStore:
    """
    In-memory ordered task store, newest first.

    The store is the only place task records change. Every mutating call
    is total: an unknown id is a silent no-op, never an error. Title
    validation belongs to the caller (see task_api.create_task).

    Threading:
    - none; all calls are expected on the event loop thread
    """

    def __init__(self, *, clock: Callable[[], datetime] = _utcnow) -> None:
        self._tasks: list[Task] = []
        self._clock = clock
        self._listeners: list[StoreListener] = []

    # ---- low-level helpers ----

    def _index_of(self, task_id: str) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    def _notify(self) -> None:
        snap = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snap)
            except Exception:
                logger.exception("TaskStore listener failed: %r", listener)

    # ---- observation ----

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        """Register a listener called with a fresh snapshot after each change.

        Returns a function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ---- queries ----

    def snapshot(self) -> TaskSnapshot:
        return tuple(self._tasks)

    def get(self, task_id: str) -> Task | None:
        idx = self._index_of(task_id)
        return None if idx is None else self._tasks[idx]

    def pending_count(self) -> int:
        return sum(1 for t in self._tasks if not t.is_completed)

    def completed_count(self) -> int:
        return sum(1 for t in self._tasks if t.is_completed)

    def has_completed(self) -> bool:
        return any(t.is_completed for t in self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- commands ----

    def add(
        self,
        title: str,
        description: str = "",
        priority: TaskPriority = TaskPriority.MEDIUM,
        category: TaskCategory = TaskCategory.OTHER,
    ) -> None:
        task = Task(
            id=new_task_id(),
            title=title,
            description=description,
            priority=priority,
            category=category,
            created_at=self._clock(),
        )
        self._tasks.insert(0, task)
        logger.debug("Task added id=%s priority=%s category=%s", task.id, priority, category)
        self._notify()

    def toggle(self, task_id: str) -> None:
        idx = self._index_of(task_id)
        if idx is None:
            return

        task = self._tasks[idx]
        done = not task.is_completed
        # Both fields change in one replace() so no observer sees them disagree.
        self._tasks[idx] = replace(
            task,
            is_completed=done,
            completed_at=self._clock() if done else None,
        )
        logger.debug("Task %s -> %s", task_id, "completed" if done else "pending")
        self._notify()

    def delete(self, task_id: str) -> None:
        idx = self._index_of(task_id)
        if idx is None:
            return
        del self._tasks[idx]
        logger.debug("Task deleted id=%s", task_id)
        self._notify()

    def delete_completed(self) -> None:
        kept = [t for t in self._tasks if not t.is_completed]
        removed = len(self._tasks) - len(kept)
        if not removed:
            return
        self._tasks = kept
        logger.info("Deleted %d completed task(s)", removed)
        self._notify()

    def update(self, task: Task) -> None:
        """Replace the stored task sharing `task.id`; created_at stays as stored."""
        idx = self._index_of(task.id)
        if idx is None:
            return
        current = self._tasks[idx]
        self._tasks[idx] = replace(task, created_at=current.created_at)
        logger.debug("Task updated id=%s", task.id)
        self._notify()
