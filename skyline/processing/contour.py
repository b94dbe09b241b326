"""
Contour builder for the skyline sweep.

Turns a stream of pen moves (horizontal to some x, vertical to some y)
into the minimal rectilinear polyline: no-op moves are dropped, runs of
same-axis moves are coalesced into one segment before their end vertex is
committed, and a run that folds back onto its own start is erased.
"""

from enum import Enum
from typing import List, Optional

from ..models.geometry import Point, ORIGIN


class Axis(Enum):
    """Direction of a pen run."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @property
    def other(self) -> 'Axis':
        if self is Axis.HORIZONTAL:
            return Axis.VERTICAL
        return Axis.HORIZONTAL


class ContourBuilder:
    """
    Accumulates contour vertices behind a moving cursor.

    The pen starts at the origin. Committed vertices always alternate
    between horizontal and vertical runs; the open run (from the last
    committed vertex to the cursor) is only committed once the pen turns.

    Invariant: the open run's axis is None exactly when the cursor sits on
    the last committed vertex.
    """

    def __init__(self):
        self._vertices: List[Point] = [ORIGIN]
        self._cursor: Point = ORIGIN
        self._axis: Optional[Axis] = None

    def reset(self) -> None:
        """Return the pen to the origin and drop all vertices."""
        self._vertices.clear()
        self._vertices.append(ORIGIN)
        self._cursor = ORIGIN
        self._axis = None

    @property
    def cursor(self) -> Point:
        """Current pen position."""
        return self._cursor

    @property
    def x(self) -> int:
        return self._cursor.x

    @property
    def y(self) -> int:
        return self._cursor.y

    def tox(self, x: int) -> None:
        """
        Move the pen horizontally to x.

        Raises:
            ValueError: If x lies behind the pen
        """
        if x == self._cursor.x:
            return
        if x < self._cursor.x:
            raise ValueError(
                f"contour cannot move backwards from x={self._cursor.x} to x={x}"
            )
        self._move(Axis.HORIZONTAL, Point(x, self._cursor.y))

    def toy(self, y: int) -> None:
        """Move the pen vertically to y."""
        if y == self._cursor.y:
            return
        self._move(Axis.VERTICAL, Point(self._cursor.x, y))

    def step_to(self, x: int, y: int) -> None:
        """Move horizontally to x, then vertically to y."""
        self.tox(x)
        self.toy(y)

    def _move(self, axis: Axis, target: Point) -> None:
        if self._axis is not None and self._axis is not axis:
            # pen turns: the open run ends at the cursor
            self._vertices.append(self._cursor)

        self._axis = axis
        self._cursor = target

        if target == self._vertices[-1]:
            # run folded back onto its start
            if len(self._vertices) > 1:
                self._vertices.pop()
                self._axis = axis.other
            else:
                self._axis = None

    def points(self) -> List[Point]:
        """
        Return the finished contour.

        The origin is dropped when the contour leaves it along the baseline,
        a trailing run along the baseline is dropped, and a contour that
        encloses nothing comes back empty.
        """
        points = list(self._vertices)
        if self._axis is not None:
            points.append(self._cursor)

        if len(points) > 1 and points[-1].y == 0 and points[-2].y == 0:
            points.pop()

        if len(points) > 1 and points[1].y == 0:
            points.pop(0)

        if len(points) < 2:
            return []
        return points
