from skyline.models.building import Building
from skyline.processing.indexer import CoordinateIndexer


def test_orders_are_stable():
    buildings = [
        Building(4, 9, 1),
        Building(2, 9, 1),
        Building(4, 5, 1),
        Building(2, 3, 1),
    ]
    index = CoordinateIndexer().index(buildings)

    assert index.open_order == [1, 3, 0, 2]
    assert index.close_order == [3, 2, 0, 1]
    assert index.extent(buildings) == (2, 9)
    assert len(index) == 4


def test_empty_input():
    index = CoordinateIndexer().index([])

    assert index.open_order == []
    assert index.close_order == []
    assert index.extent([]) is None


def test_buffers_are_reused():
    indexer = CoordinateIndexer()
    first = indexer.index([Building(3, 4, 1), Building(1, 2, 1)])
    open_buffer = first.open_order

    second = indexer.index([Building(0, 1, 1)])

    assert second is first
    assert second.open_order is open_buffer
    assert second.open_order == [0]

    indexer.clear()
    assert len(second) == 0
