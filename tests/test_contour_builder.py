import pytest

from skyline.models.geometry import Point
from skyline.processing.contour import Axis, ContourBuilder


def test_fresh_builder_is_empty():
    builder = ContourBuilder()

    assert builder.cursor == Point(0, 0)
    assert builder.points() == []


def test_noop_moves_emit_nothing():
    builder = ContourBuilder()
    builder.tox(0)
    builder.toy(0)

    assert builder.points() == []


def test_same_axis_moves_coalesce():
    builder = ContourBuilder()
    builder.tox(1)
    builder.tox(3)
    builder.toy(2)
    builder.toy(4)
    builder.tox(5)
    builder.tox(6)
    builder.toy(0)

    assert _tuples(builder) == [(3, 0), (3, 4), (6, 4), (6, 0)]


def test_folded_run_is_erased():
    builder = ContourBuilder()
    builder.step_to(2, 3)
    builder.step_to(4, 0)
    builder.toy(3)  # back up to the roof line just left
    builder.step_to(6, 0)

    assert _tuples(builder) == [(2, 0), (2, 3), (6, 3), (6, 0)]


def test_leading_origin_kept_when_rising_at_zero():
    builder = ContourBuilder()
    builder.step_to(0, 2)
    builder.step_to(3, 0)

    assert _tuples(builder) == [(0, 0), (0, 2), (3, 2), (3, 0)]


def test_backwards_move_rejected():
    builder = ContourBuilder()
    builder.tox(5)

    with pytest.raises(ValueError):
        builder.tox(4)


def test_reset_returns_to_origin():
    builder = ContourBuilder()
    builder.step_to(3, 3)
    builder.reset()

    assert builder.cursor == Point(0, 0)
    assert builder.points() == []


def test_axis_other():
    assert Axis.HORIZONTAL.other is Axis.VERTICAL
    assert Axis.VERTICAL.other is Axis.HORIZONTAL


def _tuples(builder):
    return [p.as_tuple() for p in builder.points()]
