"""
Coordinate indexing for the sweep.

Produces index permutations of a building sequence ordered by left edge
(open order) and by right edge (close order). Python's sort is stable, so
ties keep input order and the sweep is reproducible.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from ..models.building import Building


@dataclass
class CoordinateIndex:
    """
    Sorted index permutations over one building sequence.

    Attributes:
        open_order: Building indices by ascending x1
        close_order: Building indices by ascending x2
    """
    open_order: List[int] = field(default_factory=list)
    close_order: List[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.open_order)

    def extent(self, buildings: Sequence[Building]) -> Optional[Tuple[int, int]]:
        """Return (leftmost x1, rightmost x2), or None for an empty index."""
        if not self.open_order:
            return None
        return (
            buildings[self.open_order[0]].x1,
            buildings[self.close_order[-1]].x2,
        )


class CoordinateIndexer:
    """
    Builds CoordinateIndex permutations, reusing its buffers across calls.

    The returned index is owned by the indexer and is overwritten by the
    next call to index().
    """

    def __init__(self):
        self._index = CoordinateIndex()

    def index(self, buildings: Sequence[Building]) -> CoordinateIndex:
        """
        Sort building indices by left and by right edge.

        Args:
            buildings: Buildings to index (not modified)

        Returns:
            The indexer's CoordinateIndex, refreshed for these buildings
        """
        n = len(buildings)
        open_order = self._index.open_order
        close_order = self._index.close_order

        open_order[:] = range(n)
        open_order.sort(key=lambda i: buildings[i].x1)

        close_order[:] = range(n)
        close_order.sort(key=lambda i: buildings[i].x2)

        return self._index

    def clear(self) -> None:
        """Drop references held by the buffers."""
        self._index.open_order.clear()
        self._index.close_order.clear()

