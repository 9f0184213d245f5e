# src/flowlist/visuals/palettes.py

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Gradient:
    """A linear background gradient, top-leading to bottom-trailing."""

    name: str
    stops: tuple[str, ...]


# Soft pastel washes; each stop is an sRGB hex color.
PASTEL_GRADIENTS: tuple[Gradient, ...] = (
    Gradient("sky", ("#BFD9F2", "#E6CCF2", "#CCF2E6")),
    Gradient("blossom", ("#F2D9F2", "#D9E6FF", "#E6F2D9")),
    Gradient("dawn", ("#D9E6FF", "#F2E6D9", "#E6D9F2")),
    Gradient("meadow", ("#E6F2D9", "#D9D9FF", "#F2E6E6")),
)

WELCOME_GRADIENTS = PASTEL_GRADIENTS
MAIN_GRADIENTS = PASTEL_GRADIENTS
