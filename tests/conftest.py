# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from flowlist.core.state import AppState
from flowlist.tasks.task_store import TaskStore
from flowlist.visuals.gradient_cycler import GradientCycler
from flowlist.visuals.palettes import MAIN_GRADIENTS, WELCOME_GRADIENTS

from .fakes import FakeCelebrator, TickingClock


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="FlowList",
        log_level="DEBUG",
        data_dir=tmp_path / "flowlist",
        show_welcome=True,
        welcome_cycle_seconds=4.0,
        main_cycle_seconds=2.0,
        celebration_dismiss_seconds=2.5,
    )


@pytest.fixture()
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture()
def store(clock: TickingClock) -> TaskStore:
    return TaskStore(clock=clock)


@pytest.fixture()
def celebrator() -> FakeCelebrator:
    return FakeCelebrator()


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore, celebrator: FakeCelebrator) -> AppState:
    """
    AppState wired with a real TaskStore and a recording celebration layer.
    """
    return AppState(
        settings=settings,
        task_store=store,
        celebration=celebrator,
        main_cycler=GradientCycler(MAIN_GRADIENTS, interval_seconds=settings.main_cycle_seconds),
        welcome_cycler=GradientCycler(
            WELCOME_GRADIENTS, interval_seconds=settings.welcome_cycle_seconds, name="welcome"
        ),
    )
