# tests/test_task_api.py

from __future__ import annotations

import random

import pytest

from flowlist.core.state import AppState
from flowlist.tasks.task_api import complete_toggle, create_task, edit_task
from flowlist.tasks.task_models import TaskCategory, TaskPriority
from flowlist.visuals.celebration import Bounds, CelebrationGenerator

from .fakes import FakeCelebrator


@pytest.mark.parametrize("title", ["", "   ", "\t\n"])
def test_blank_titles_never_reach_the_store(state: AppState, title: str) -> None:
    assert create_task(state, title) is False
    assert state.task_store.snapshot() == ()


def test_create_task_strips_and_applies_options(state: AppState) -> None:
    assert create_task(
        state,
        "  Buy milk ",
        " 2 litres ",
        priority=TaskPriority.HIGH,
        category=TaskCategory.PERSONAL,
    )
    task = state.task_store.snapshot()[0]
    assert task.title == "Buy milk"
    assert task.description == "2 litres"
    assert task.priority is TaskPriority.HIGH
    assert task.category is TaskCategory.PERSONAL


def test_completion_transition_celebrates_once(state: AppState, celebrator: FakeCelebrator) -> None:
    create_task(state, "Buy milk")
    task_id = state.task_store.snapshot()[0].id
    state.canvas = Bounds(width=300, height=500)

    assert complete_toggle(state, task_id) is True
    assert celebrator.calls == [Bounds(width=300, height=500)]

    # Reopening is not a completion.
    assert complete_toggle(state, task_id) is False
    assert len(celebrator.calls) == 1


def test_toggle_unknown_id_does_nothing(state: AppState, celebrator: FakeCelebrator) -> None:
    assert complete_toggle(state, "missing") is False
    assert celebrator.calls == []


def test_edit_keeps_store_completion_timestamp(state: AppState) -> None:
    create_task(state, "Write report")
    task_id = state.task_store.snapshot()[0].id
    complete_toggle(state, task_id)
    stamped = state.task_store.get(task_id)
    assert stamped is not None

    assert edit_task(state, task_id, title="Write final report", category=TaskCategory.WORK)

    edited = state.task_store.get(task_id)
    assert edited is not None
    assert edited.title == "Write final report"
    assert edited.category is TaskCategory.WORK
    assert edited.is_completed is True
    assert edited.completed_at == stamped.completed_at


def test_edit_rejects_blank_title_and_unknown_id(state: AppState) -> None:
    create_task(state, "Keep me")
    task_id = state.task_store.snapshot()[0].id

    assert edit_task(state, task_id, title="  ") is False
    assert edit_task(state, "missing", title="x") is False
    assert state.task_store.snapshot()[0].title == "Keep me"


@pytest.mark.asyncio
async def test_completion_starts_a_real_celebration(state: AppState) -> None:
    generator = CelebrationGenerator(rng=random.Random(3), dismiss_after_seconds=5.0)
    state.celebration = generator
    create_task(state, "Stretch")

    complete_toggle(state, state.task_store.snapshot()[0].id)

    assert generator.visible is True
    assert len(generator.batches) == 1
    await generator.close()
