"""
Core geometry types for the Skyline Contour Solver.

Provides Point and BBox, used for contour vertices and for sizing
the rendered text grids.
"""

from dataclasses import dataclass
from typing import Iterable, Tuple

from ..config import RENDER_MIN_MARGIN, RENDER_MARGIN_DIVISOR


@dataclass(frozen=True, slots=True)
class Point:
    """2D integer point; x runs along the baseline, y is height above it."""
    x: int
    y: int

    def as_tuple(self) -> Tuple[int, int]:
        """Return (x, y)."""
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


ORIGIN = Point(0, 0)


@dataclass(slots=True)
class BBox:
    """
    Integer world box anchored at the origin.

    Attributes:
        width: Number of cells along x
        height: Number of cells along y
    """
    width: int = 0
    height: int = 0

    def include(self, x: int, y: int) -> None:
        """Grow the box so that (x, y) lies on its far edge or inside."""
        if x > self.width:
            self.width = x
        if y > self.height:
            self.height = y

    def inflate(self) -> 'BBox':
        """
        Return a new box grown on the far sides by a quarter of each
        dimension, with a minimum margin of two cells.
        """
        return BBox(
            self.width + max(self.width // RENDER_MARGIN_DIVISOR, RENDER_MIN_MARGIN),
            self.height + max(self.height // RENDER_MARGIN_DIVISOR, RENDER_MIN_MARGIN),
        )

    @staticmethod
    def from_points(points: Iterable[Point]) -> 'BBox':
        """Create the smallest box reaching every point."""
        box = BBox()
        for p in points:
            box.include(p.x, p.y)
        return box

    @staticmethod
    def from_buildings(buildings: Iterable) -> 'BBox':
        """Create the smallest box reaching every building's right edge and roof."""
        box = BBox()
        for b in buildings:
            box.include(b.x2, b.height)
        return box
