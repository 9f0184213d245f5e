# src/flowlist/tasks/task_models.py

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class TaskPriority(StrEnum):
    """Display-only priority; carries no ordering semantics."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def accent(self) -> str:
        return PRIORITY_ACCENTS[self]

    @classmethod
    def parse(cls, raw: str | None) -> TaskPriority | None:
        if not raw:
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


class TaskCategory(StrEnum):
    WORK = "work"
    PERSONAL = "personal"
    STUDY = "study"
    HEALTH = "health"
    OTHER = "other"

    @property
    def style(self) -> CategoryStyle:
        return CATEGORY_STYLES[self]

    @classmethod
    def parse(cls, raw: str | None) -> TaskCategory | None:
        if not raw:
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


@dataclass(slots=True, frozen=True)
class CategoryStyle:
    """Icon + two-color gradient used to decorate cards of one category."""

    icon: str
    gradient: tuple[str, str]


PRIORITY_ACCENTS: dict[TaskPriority, str] = {
    TaskPriority.LOW: "green",
    TaskPriority.MEDIUM: "orange",
    TaskPriority.HIGH: "red",
}

CATEGORY_STYLES: dict[TaskCategory, CategoryStyle] = {
    TaskCategory.WORK: CategoryStyle(icon="briefcase", gradient=("blue", "cyan")),
    TaskCategory.PERSONAL: CategoryStyle(icon="person", gradient=("purple", "pink")),
    TaskCategory.STUDY: CategoryStyle(icon="book", gradient=("orange", "yellow")),
    TaskCategory.HEALTH: CategoryStyle(icon="heart", gradient=("green", "mint")),
    TaskCategory.OTHER: CategoryStyle(icon="star", gradient=("indigo", "purple")),
}


def new_task_id() -> str:
    return uuid.uuid4().hex


@dataclass(slots=True, frozen=True)
class Task:
    """
    One to-do item.

    Instances are immutable; the TaskStore swaps whole records on change.
    `completed_at` is set iff `is_completed` is true, and construction
    refuses any record where the two disagree.
    """

    id: str
    title: str
    created_at: datetime
    description: str = ""
    is_completed: bool = False
    priority: TaskPriority = TaskPriority.MEDIUM
    category: TaskCategory = TaskCategory.OTHER
    completed_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.is_completed != (self.completed_at is not None):
            raise ValueError(
                f"task {self.id}: is_completed={self.is_completed} "
                f"but completed_at={self.completed_at!r}"
            )
