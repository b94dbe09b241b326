"""
Active set of open buildings for the skyline sweep.

Holds the buildings whose left edge the sweep has passed but whose right
edge it has not, and answers the question asked on every close: once the
building with the nearest right edge is removed, how tall is the tallest
building still open?
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Tuple

from ..config import ActiveSetKind
from ..models.building import Building


@dataclass(slots=True)
class ActiveEntry:
    """
    One open building.

    Attributes:
        index: Position of the building in the caller's sequence
        building: The building itself
        key: Ordering key (right edge, insertion sequence)
        subtree_max: Tallest height in the heap subtree rooted here
    """
    index: int
    building: Building
    key: Tuple[int, int]
    subtree_max: int

    @property
    def right_edge(self) -> int:
        return self.building.x2

    @property
    def height(self) -> int:
        return self.building.height


class ActiveSet(ABC):
    """Abstract base class for active set strategies."""

    def __init__(self):
        self._seq = 0

    @abstractmethod
    def insert(self, index: int, building: Building) -> None:
        """
        Add an open building, keyed by its right edge.

        Args:
            index: Position of the building in the caller's sequence
            building: Building being opened
        """
        pass

    @abstractmethod
    def pop_nearest_close(self) -> Tuple[ActiveEntry, int]:
        """
        Remove the building with the smallest right edge.

        Returns:
            (entry, remaining_height) where remaining_height is the tallest
            height among the buildings still open after the removal, or 0

        Raises:
            IndexError: If the set is empty
        """
        pass

    @abstractmethod
    def any_closing_at_or_before(self, x: int) -> bool:
        """Check if some open building has a right edge <= x."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def is_empty(self) -> bool:
        return len(self) == 0

    def clear(self) -> None:
        """Remove every entry and restart the tie-break sequence."""
        self._seq = 0

    def _make_entry(self, index: int, building: Building) -> ActiveEntry:
        entry = ActiveEntry(
            index=index,
            building=building,
            key=(building.x2, self._seq),
            subtree_max=building.height,
        )
        self._seq += 1
        return entry


class AugmentedHeapActiveSet(ActiveSet):
    """
    Binary min-heap keyed by right edge, augmented with subtree maxima.

    Every entry stores the tallest height found in its subtree. After any
    structural change the maxima are re-derived bottom-up along the touched
    root paths, so the root always knows the tallest open building and the
    remaining height after a pop is read off the new root in O(1).

    Ties on right edge are broken by insertion order.
    """

    def __init__(self):
        super().__init__()
        self._heap: List[ActiveEntry] = []

    def __len__(self) -> int:
        return len(self._heap)

    def clear(self) -> None:
        super().clear()
        self._heap.clear()

    @property
    def max_height(self) -> int:
        """Tallest open building, or 0 when empty."""
        return self._heap[0].subtree_max if self._heap else 0

    def insert(self, index: int, building: Building) -> None:
        heap = self._heap
        heap.append(self._make_entry(index, building))
        leaf = len(heap) - 1
        self._sift_up(leaf)
        # every entry that moved lies on the leaf's root path
        self._refresh_path(leaf)

    def pop_nearest_close(self) -> Tuple[ActiveEntry, int]:
        heap = self._heap
        if not heap:
            raise IndexError("pop from an empty active set")

        last = heap.pop()
        if not heap:
            return last, 0

        top = heap[0]
        heap[0] = last
        end = self._sift_down(0)
        self._refresh_path(end)

        # the vacated leaf slot changes its former ancestors' maxima
        vacated = len(heap)
        self._refresh_path((vacated - 1) >> 1)

        return top, heap[0].subtree_max

    def any_closing_at_or_before(self, x: int) -> bool:
        return bool(self._heap) and self._heap[0].right_edge <= x

    def _sift_up(self, pos: int) -> int:
        heap = self._heap
        entry = heap[pos]
        while pos > 0:
            parent = (pos - 1) >> 1
            if entry.key < heap[parent].key:
                heap[pos] = heap[parent]
                pos = parent
            else:
                break
        heap[pos] = entry
        return pos

    def _sift_down(self, pos: int) -> int:
        heap = self._heap
        n = len(heap)
        entry = heap[pos]
        while True:
            child = 2 * pos + 1
            if child >= n:
                break
            right = child + 1
            if right < n and heap[right].key < heap[child].key:
                child = right
            if heap[child].key < entry.key:
                heap[pos] = heap[child]
                pos = child
            else:
                break
        heap[pos] = entry
        return pos

    def _refresh_path(self, pos: int) -> None:
        """Recompute subtree maxima from pos up to the root."""
        heap = self._heap
        n = len(heap)
        while True:
            entry = heap[pos]
            best = entry.height
            child = 2 * pos + 1
            if child < n:
                if heap[child].subtree_max > best:
                    best = heap[child].subtree_max
                if child + 1 < n and heap[child + 1].subtree_max > best:
                    best = heap[child + 1].subtree_max
            entry.subtree_max = best
            if pos == 0:
                break
            pos = (pos - 1) >> 1


class LinearScanActiveSet(ActiveSet):
    """
    Unordered list of open buildings.

    Each pop scans for the nearest right edge and then for the tallest of
    the rest, so a close costs O(n). Used as the reference strategy when
    cross-checking the augmented heap.
    """

    def __init__(self):
        super().__init__()
        self._entries: List[ActiveEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        super().clear()
        self._entries.clear()

    def insert(self, index: int, building: Building) -> None:
        self._entries.append(self._make_entry(index, building))

    def pop_nearest_close(self) -> Tuple[ActiveEntry, int]:
        entries = self._entries
        if not entries:
            raise IndexError("pop from an empty active set")

        nearest = min(range(len(entries)), key=lambda i: entries[i].key)
        entry = entries.pop(nearest)

        remaining = 0
        for other in entries:
            if other.height > remaining:
                remaining = other.height

        return entry, remaining

    def any_closing_at_or_before(self, x: int) -> bool:
        return any(entry.right_edge <= x for entry in self._entries)


def create_active_set(kind: ActiveSetKind = ActiveSetKind.AUGMENTED_HEAP) -> ActiveSet:
    """
    Create an active set for the given strategy.

    Args:
        kind: Active set strategy

    Returns:
        Empty ActiveSet instance
    """
    if kind is ActiveSetKind.LINEAR_SCAN:
        return LinearScanActiveSet()
    return AugmentedHeapActiveSet()
