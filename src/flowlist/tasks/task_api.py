# src/flowlist/tasks/task_api.py

"""
Boundary helpers between the presentation layer and the TaskStore.

The store accepts whatever it is given; these helpers are where user
input gets checked (blank titles never reach the store) and where a
completion transition turns into a celebration.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from ..core.state import AppState
from .task_models import TaskCategory, TaskPriority

logger = logging.getLogger(__name__)


def is_valid_title(title: str | None) -> bool:
    return bool(title and title.strip())


def create_task(
    state: AppState,
    title: str,
    description: str = "",
    *,
    priority: TaskPriority | None = None,
    category: TaskCategory | None = None,
) -> bool:
    """Add a task unless the title is blank. Returns True when a task was added."""
    if not is_valid_title(title):
        logger.debug("Rejected task with blank title.")
        return False

    state.task_store.add(
        title.strip(),
        description.strip(),
        priority or TaskPriority.MEDIUM,
        category or TaskCategory.OTHER,
    )
    return True


def complete_toggle(state: AppState, task_id: str) -> bool:
    """
    Toggle completion through the store and celebrate a pending -> completed move.

    Returns True when the task became completed. Must run on the event loop,
    since the celebration schedules its animation there.
    """
    before = state.task_store.get(task_id)
    if before is None:
        return False

    state.task_store.toggle(task_id)
    after = state.task_store.get(task_id)
    completed_now = after is not None and after.is_completed and not before.is_completed

    if completed_now:
        state.celebration.celebrate(state.canvas)
        logger.info("Task %s completed.", task_id)
    return completed_now


def edit_task(
    state: AppState,
    task_id: str,
    *,
    title: str | None = None,
    description: str | None = None,
    priority: TaskPriority | None = None,
    category: TaskCategory | None = None,
) -> bool:
    """
    Read-modify-write edit of the text/priority/category fields.

    Completion fields are always taken from the stored task, never from
    the editor, so the store-generated completion timestamp stays the
    only one. Returns False for unknown ids or a blank replacement title.
    """
    current = state.task_store.get(task_id)
    if current is None:
        return False
    if title is not None and not is_valid_title(title):
        return False

    edited = replace(
        current,
        title=current.title if title is None else title.strip(),
        description=current.description if description is None else description.strip(),
        priority=current.priority if priority is None else priority,
        category=current.category if category is None else category,
    )
    if edited == current:
        return True

    state.task_store.update(edited)
    return True
