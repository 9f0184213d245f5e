# src/flowlist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists for logs,
- wires the task store, gradient cyclers and celebration layer into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import TaskStore
from ..visuals.celebration import CelebrationGenerator
from ..visuals.gradient_cycler import GradientCycler
from ..visuals.palettes import MAIN_GRADIENTS, WELCOME_GRADIENTS

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    settings.data_dir.mkdir(parents=True, exist_ok=True)

    welcome_cycler = None
    if settings.show_welcome:
        welcome_cycler = GradientCycler(
            WELCOME_GRADIENTS,
            interval_seconds=settings.welcome_cycle_seconds,
            name="welcome",
        )

    state = AppState(
        settings=settings,
        task_store=TaskStore(),
        celebration=CelebrationGenerator(dismiss_after_seconds=settings.celebration_dismiss_seconds),
        main_cycler=GradientCycler(
            MAIN_GRADIENTS,
            interval_seconds=settings.main_cycle_seconds,
            name="main",
        ),
        welcome_cycler=welcome_cycler,
    )
    logger.debug("AppState ready (welcome=%s).", welcome_cycler is not None)
    return state


async def shutdown(state: AppState) -> None:
    """Tear down timers owned by the surfaces (no exceptions should escape)."""
    for cycler in (state.welcome_cycler, state.main_cycler):
        if cycler is None:
            continue
        try:
            await cycler.close()
        except Exception:
            logger.exception("Failed to stop cycler %s.", cycler.name)

    try:
        await state.celebration.close()
    except Exception:
        logger.exception("Failed to close celebration layer.")
