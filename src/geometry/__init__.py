"""Geometry package: re-export the public value types.

Callers can import directly from ``geometry``::

    from geometry import Point, Color, Drawable
"""

import os

# pygame prints a banner on first import; keep stdout to the render line only
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from .color import Color  # noqa: E402 (after the pygame env tweak)
from .drawable import Drawable  # noqa: E402
from .point import Point, compute_sqrt  # noqa: E402
from .point_batch import distances_from, draw_all  # noqa: E402
from .renderer import render  # noqa: E402

__all__ = [
    "Color",
    "Drawable",
    "Point",
    "compute_sqrt",
    "distances_from",
    "draw_all",
    "render",
]
