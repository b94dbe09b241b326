"""
Contour validation and height sampling.

Used to check solver output: a valid contour alternates horizontal and
vertical moves with no repeated points, and its height at every x must
match the tallest building covering that x.
"""

from typing import Iterable, List, Sequence

from ..models.building import Building
from ..models.geometry import Point


class ContourError(ValueError):
    """Raised when a point sequence is not a valid rectilinear contour."""
    pass


_NONE, _VERTICAL, _HORIZONTAL = 0, 1, 2


def validate_contour(points: Sequence[Point]) -> None:
    """
    Check that points form a minimal rectilinear polyline.

    Args:
        points: Contour vertices in order

    Raises:
        ContourError: On a repeated point, a diagonal move, or two
            consecutive moves along the same axis
    """
    if not points:
        return

    last_dir = _NONE
    cur = points[0]
    for i in range(1, len(points)):
        pt = points[i]
        if pt == cur:
            raise ContourError(f"contour contains duplicate point [{i}]={pt}")

        if pt.x == cur.x:
            direction = _VERTICAL
        elif pt.y == cur.y:
            direction = _HORIZONTAL
        else:
            raise ContourError(
                f"contour contains diagonal line from [{i - 1}]={cur} to [{i}]={pt}"
            )

        if direction == last_dir:
            raise ContourError(
                f"contour contains co-linear points through "
                f"[{i - 2}]={points[i - 2]} [{i - 1}]={cur} [{i}]={pt}"
            )

        last_dir = direction
        cur = pt


def contour_height_at(points: Sequence[Point], x: int) -> int:
    """
    Height of a contour at x.

    Each horizontal run from (xa, y) to (xb, y) covers the half-open
    interval [xa, xb). Outside every run the height is 0.
    """
    for a, b in zip(points, points[1:]):
        if a.y == b.y and a.x <= x < b.x:
            return a.y
    return 0


def skyline_height_at(buildings: Iterable[Building], x: int) -> int:
    """Tallest building whose span [x1, x2) covers x, or 0."""
    best = 0
    for b in buildings:
        if b.covers(x) and b.height > best:
            best = b.height
    return best


def height_profile(points: Sequence[Point], width: int) -> List[int]:
    """Sample contour heights at x = 0 .. width - 1."""
    heights = [0] * width
    for a, b in zip(points, points[1:]):
        if a.y != b.y or a.y == 0:
            continue
        for x in range(max(a.x, 0), min(b.x, width)):
            heights[x] = a.y
    return heights


def skyline_profile(buildings: Iterable[Building], width: int) -> List[int]:
    """Sample the true skyline at x = 0 .. width - 1 by brute force."""
    heights = [0] * width
    for b in buildings:
        for x in range(b.x1, min(b.x2, width)):
            if b.height > heights[x]:
                heights[x] = b.height
    return heights


def check_contour(buildings: Sequence[Building], points: Sequence[Point]) -> None:
    """
    Check a contour against the buildings it was computed from.

    Validates the contour's shape, that it starts and ends on the baseline,
    and that its height matches the tallest covering building at every x.

    Raises:
        ContourError: On the first problem found
    """
    validate_contour(points)

    if points and (points[0].y != 0 or points[-1].y != 0):
        raise ContourError(
            f"contour must start and end at height 0, got {points[0]} .. {points[-1]}"
        )

    width = max((b.x2 for b in buildings), default=0) + 1
    expected = skyline_profile(buildings, width)
    actual = height_profile(points, width)
    for x, (want, got) in enumerate(zip(expected, actual)):
        if want != got:
            raise ContourError(f"contour height at x={x} is {got}, expected {want}")
