"""Vectorised helpers for working with many points at once.

Mirrors ``Point.distance`` element-wise but runs as a single numpy pass,
which matters once there are thousands of points to measure.
"""

from __future__ import annotations

from typing import Iterable, Union

import numpy as np

from geometry.drawable import Drawable
from geometry.point import Point


def _as_coords(points: Union[Iterable[Point], np.ndarray]) -> np.ndarray:
    if isinstance(points, np.ndarray):
        arr = np.asarray(points, dtype=np.float64)
    else:
        arr = np.array([(p.x, p.y) for p in points], dtype=np.float64)
        if arr.size == 0:
            arr = arr.reshape(0, 2)

    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(
            f"points must be Points or an array shaped (N, 2), got {arr.shape}"
        )
    return arr


def distances_from(
    points: Union[Iterable[Point], np.ndarray], origin: Point
) -> np.ndarray:
    """Return the distance from ``origin`` to each point as a float64 array.

    NaN coordinates produce NaN entries, same as ``Point.distance``.
    """
    coords = _as_coords(points)
    dx = coords[:, 0] - origin.x
    dy = coords[:, 1] - origin.y
    return np.sqrt(dx * dx + dy * dy)


def draw_all(drawables: Iterable[Drawable]) -> int:
    """Draw each item in order and return how many were drawn."""
    count = 0
    for item in drawables:
        item.draw()
        count += 1
    return count
