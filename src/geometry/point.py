"""2D point value type.

``Point`` is an immutable coordinate pair in the Cartesian plane. Coordinates
are stored exactly as given (no rounding, clamping or validation).
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from pygame.math import Vector2

from geometry.renderer import render


def compute_sqrt(value: float) -> float:
    """Principal square root of ``value``.

    Negative input yields NaN instead of raising, so callers never see an
    error from floating point rounding below zero. NaN and inf pass through.
    """
    if value < 0.0:
        return math.nan
    return math.sqrt(value)


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    @classmethod
    def from_vector(cls, vec: Vector2) -> Point:
        return cls(vec.x, vec.y)

    def to_vector(self) -> Vector2:
        return Vector2(self.x, self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def distance(self, other: Point) -> float:
        """Euclidean distance to ``other`` (symmetric, NaN if any coord is NaN)."""
        dx = self.x - other.x
        dy = self.y - other.y
        return compute_sqrt(dx * dx + dy * dy)

    # Drawable
    def draw(self) -> None:
        render()
