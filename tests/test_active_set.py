import random

import pytest

from skyline.config import ActiveSetKind
from skyline.models.building import Building
from skyline.processing.active_set import (
    AugmentedHeapActiveSet,
    LinearScanActiveSet,
    create_active_set,
)


@pytest.fixture(params=[AugmentedHeapActiveSet, LinearScanActiveSet])
def active(request):
    return request.param()


def test_create_active_set_kinds():
    assert isinstance(create_active_set(), AugmentedHeapActiveSet)
    assert isinstance(create_active_set(ActiveSetKind.AUGMENTED_HEAP), AugmentedHeapActiveSet)
    assert isinstance(create_active_set(ActiveSetKind.LINEAR_SCAN), LinearScanActiveSet)


def test_empty_set(active):
    assert active.is_empty()
    assert len(active) == 0
    assert not active.any_closing_at_or_before(10 ** 9)

    with pytest.raises(IndexError):
        active.pop_nearest_close()


def test_pop_reports_remaining_height(active):
    active.insert(0, Building(0, 6, 5))
    active.insert(1, Building(1, 10, 3))
    active.insert(2, Building(2, 8, 7))

    assert active.any_closing_at_or_before(6)
    assert not active.any_closing_at_or_before(5)

    entry, remaining = active.pop_nearest_close()
    assert entry.index == 0
    assert remaining == 7

    entry, remaining = active.pop_nearest_close()
    assert entry.index == 2
    assert remaining == 3

    entry, remaining = active.pop_nearest_close()
    assert entry.index == 1
    assert remaining == 0
    assert active.is_empty()


def test_ties_pop_in_insertion_order(active):
    for i in range(5):
        active.insert(i, Building(i, 9, i))

    order = [active.pop_nearest_close()[0].index for _ in range(5)]
    assert order == [0, 1, 2, 3, 4]


def test_clear_resets(active):
    active.insert(0, Building(0, 3, 4))
    active.insert(1, Building(1, 2, 8))
    active.clear()

    assert active.is_empty()
    active.insert(7, Building(3, 4, 1))
    entry, remaining = active.pop_nearest_close()
    assert entry.index == 7
    assert remaining == 0


@pytest.mark.parametrize("seed", range(8))
def test_heap_matches_brute_force(seed):
    rng = random.Random(seed)
    heap = AugmentedHeapActiveSet()
    model = []

    for step in range(400):
        if model and rng.random() < 0.45:
            entry, remaining = heap.pop_nearest_close()
            model.sort(key=lambda item: (item[1].x2, item[0]))
            index, building = model.pop(0)

            assert entry.index == index
            assert remaining == max((b.height for _, b in model), default=0)
        else:
            x1 = rng.randrange(50)
            building = Building(x1, x1 + rng.randrange(30), rng.randrange(20))
            heap.insert(step, building)
            model.append((step, building))

        assert len(heap) == len(model)
        assert heap.max_height == max((b.height for _, b in model), default=0)
        _assert_subtree_maxima(heap)


def _assert_subtree_maxima(heap):
    entries = heap._heap
    n = len(entries)
    for pos in range(n - 1, -1, -1):
        best = entries[pos].height
        for child in (2 * pos + 1, 2 * pos + 2):
            if child < n:
                assert entries[child].key >= entries[pos].key
                best = max(best, entries[child].subtree_max)
        assert entries[pos].subtree_max == best
