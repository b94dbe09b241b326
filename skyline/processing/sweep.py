"""
Sweep engine for the Skyline Contour Solver.

Walks buildings in left-edge order. Before each building opens, every
open building whose right edge has been reached is closed; a close drops
the pen to the tallest building still open if that is lower than the
current height. An opening building raises the pen if it is taller than
the current height. After the last opening, the remaining buildings are
closed in right-edge order.

Critical invariant: the sweep ends at height 0 with an empty active set.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple
import logging

from ..config import SolverConfig, DEFAULT_SOLVER_CONFIG
from ..models.building import Building
from ..models.geometry import Point
from ..utils.contour_utils import check_contour
from .active_set import ActiveSet, create_active_set
from .contour import ContourBuilder
from .indexer import CoordinateIndexer

logger = logging.getLogger(__name__)


class SweepInvariantError(RuntimeError):
    """Raised when the sweep finishes above the baseline or with open buildings."""
    pass


class SweepState(Enum):
    """Phase of a solve() call."""
    IDLE = "idle"
    SCANNING = "scanning"
    DRAINING = "draining"
    FLUSHING = "flushing"
    DONE = "done"


@dataclass
class SolveStats:
    """Statistics from one solve() call."""
    buildings: int = 0
    opened: int = 0
    closed: int = 0
    rises: int = 0
    drops: int = 0
    points: int = 0
    peak_active: int = 0
    extent: Optional[Tuple[int, int]] = None


class SkylineSolver:
    """
    Reusable skyline solver.

    Keeps its index buffers, active set, and contour builder between calls
    to avoid reallocating them. Each solve() resets all of them first, so
    no state leaks from one call to the next. One instance must not be
    shared between threads without external locking.
    """

    def __init__(self, config: Optional[SolverConfig] = None):
        """
        Initialize solver.

        Args:
            config: Solver configuration (defaults to DEFAULT_SOLVER_CONFIG)
        """
        self.config = config if config is not None else DEFAULT_SOLVER_CONFIG
        self.state = SweepState.IDLE
        self.last_stats = SolveStats()

        self._indexer = CoordinateIndexer()
        self._active: ActiveSet = create_active_set(self.config.active_set)
        self._contour = ContourBuilder()
        self._stats = SolveStats()

    def solve(self, buildings: Sequence) -> List[Point]:
        """
        Compute the skyline contour of a set of buildings.

        Args:
            buildings: Building instances or (x1, x2, height) triples, in any
                order. The sequence itself is not modified.

        Returns:
            Contour vertices from left to right; empty for empty input

        Raises:
            InvalidBuildingError: If input validation is enabled and a
                building is malformed
            SweepInvariantError: If the sweep does not close out cleanly
            ContourError: If result checking is enabled and fails
        """
        buildings = list(buildings)
        if self.config.validate_input or not all(
                isinstance(b, Building) for b in buildings):
            buildings = [Building.coerce(b) for b in buildings]

        with self._session(len(buildings)):
            index = self._indexer.index(buildings)
            self._stats.extent = index.extent(buildings)

            self.state = SweepState.SCANNING
            for i in index.open_order:
                self._open(i, buildings[i])

            self.state = SweepState.FLUSHING
            self._drain(None)

            if self._contour.y != 0 or not self._active.is_empty():
                raise SweepInvariantError(
                    f"sweep ended at height {self._contour.y} "
                    f"with {len(self._active)} open buildings"
                )

            points = self._contour.points()
            self.state = SweepState.DONE

        self._stats.points = len(points)
        self.last_stats = self._stats

        if self.config.check_result:
            check_contour(buildings, points)

        logger.debug(
            f"Solved {self._stats.buildings} buildings: "
            f"{self._stats.points} points, {self._stats.rises} rises, "
            f"{self._stats.drops} drops, peak active {self._stats.peak_active}"
        )
        return points

    @contextmanager
    def _session(self, count: int) -> Iterator[None]:
        """Reset scratch state before a solve and release it afterwards."""
        self._stats = SolveStats(buildings=count)
        self._active.clear()
        self._contour.reset()
        self.state = SweepState.IDLE
        try:
            yield
        finally:
            self._active.clear()
            self._indexer.clear()
            if self.state is not SweepState.DONE:
                self.state = SweepState.IDLE

    def _open(self, index: int, building: Building) -> None:
        x = building.x1
        if self._active.any_closing_at_or_before(x):
            self.state = SweepState.DRAINING
            self._drain(x)
            self.state = SweepState.SCANNING

        if building.height > self._contour.y:
            self._contour.step_to(x, building.height)
            self._stats.rises += 1

        self._active.insert(index, building)
        self._stats.opened += 1
        if len(self._active) > self._stats.peak_active:
            self._stats.peak_active = len(self._active)

    def _drain(self, threshold: Optional[int]) -> None:
        """Close open buildings with right edge <= threshold (all if None)."""
        active = self._active
        while not active.is_empty():
            if threshold is not None and not active.any_closing_at_or_before(threshold):
                break

            entry, remaining = active.pop_nearest_close()
            self._stats.closed += 1

            if remaining < self._contour.y:
                self._contour.step_to(entry.right_edge, remaining)
                self._stats.drops += 1


def solve(buildings: Sequence, config: Optional[SolverConfig] = None) -> List[Point]:
    """
    Compute the skyline contour with a fresh solver.

    Args:
        buildings: Building instances or (x1, x2, height) triples
        config: Optional solver configuration

    Returns:
        Contour vertices from left to right
    """
    return SkylineSolver(config).solve(buildings)
