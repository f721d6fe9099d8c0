"""Diagnostic renderer.

There is no real drawing surface yet; drawing a shape only announces itself
on stdout.
"""

from geometry.config import RENDER_MESSAGE


def render() -> None:
    print(RENDER_MESSAGE)
