"""
Text rendering of building outlines.
"""

from typing import Sequence

from ..models.building import Building
from ..models.geometry import BBox
from .grid import TextGrid


def render_buildings(buildings: Sequence[Building]) -> str:
    """
    Draw each building as an outlined box on a text grid.

    Walls are '|', the roof is '--' with '/-' and '-\\' corners. Later
    buildings overwrite earlier ones where they overlap.

    Args:
        buildings: Buildings to draw

    Returns:
        Framed multi-line string
    """
    grid = TextGrid(BBox.from_buildings(buildings).inflate())

    for b in buildings:
        x = b.x1
        for y in range(b.height):
            grid.put_left(x, y, '|')

        roof = b.height
        grid.put(x, roof, '/', '-')
        x += 1

        while x < b.x2:
            grid.put(x, roof, '-', '-')
            x += 1

        grid.put(x, roof, '-', '\\')
        for y in range(roof - 1, -1, -1):
            grid.put_right(x, y, '|')

    return grid.render()
