# src/flowlist/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..visuals.celebration import Bounds
from ..visuals.gradient_cycler import GradientCycler
from .ports import Celebrator, TaskRepo


@dataclass
class AppState:
    # Settings object (config.Settings or a test double with the same fields).
    settings: object

    task_store: TaskRepo
    celebration: Celebrator
    main_cycler: GradientCycler
    welcome_cycler: GradientCycler | None = None

    # Size of the surface particles fall across; the console updates it from the terminal.
    canvas: Bounds = Bounds(width=80.0, height=24.0)
