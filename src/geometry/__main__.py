"""Entry point: build the demo points, draw them and report their distance.

Run with ``python -m geometry``.
"""

from geometry import Point, draw_all
from geometry.config import DEMO_POINTS, LOG_TAG


def main():
    a, b = (Point(x, y) for x, y in DEMO_POINTS)
    draw_all((a, b))
    print(f"{LOG_TAG} distance {a} -> {b} = {a.distance(b)}")


if __name__ == "__main__":
    main()
