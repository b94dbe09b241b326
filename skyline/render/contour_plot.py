"""
Text rendering of a skyline contour.
"""

from typing import Sequence

from ..models.geometry import BBox, Point, ORIGIN
from .grid import TextGrid


def render_contour(points: Sequence[Point]) -> str:
    """
    Trace a contour onto a text grid, starting the pen at the origin.

    Horizontal runs are '--', vertices are '[]', rises are drawn in the
    left half of a cell and drops in the right half.

    Args:
        points: Contour vertices, left to right

    Returns:
        Framed multi-line string

    Raises:
        ValueError: If the contour moves backwards in x
    """
    grid = TextGrid(BBox.from_points(points).inflate())

    x, y = ORIGIN.x, ORIGIN.y
    for p in points:
        if p.x == x and p.y == y:
            continue

        if p.x < x:
            raise ValueError(f"unsupported backwards X scan at {p}")

        while p.x > x:
            grid.put(x, y, '-', '-')
            x += 1

        grid.put(x, y, '[', ']')

        while p.y > y:
            y += 1
            grid.put_left(x, y, '|')

        while p.y < y:
            y -= 1
            grid.put_right(x, y, '|')

    return grid.render()
