import pytest

from skyline.models.building import Building
from skyline.models.geometry import BBox, Point
from skyline.render import render_buildings, render_contour


def test_bbox_inflate_margins():
    assert BBox(3, 2).inflate() == BBox(5, 4)
    assert BBox(40, 12).inflate() == BBox(50, 15)


def test_render_single_building():
    text = render_buildings([Building(1, 3, 2)])

    assert text == (
        "/==========\\\n"
        "|          |\n"
        "|  /----\\  |\n"
        "|  |    |  |\n"
        "|  |    |  |\n"
        "\\==========/\n"
    )


def test_render_single_contour():
    points = [Point(1, 0), Point(1, 2), Point(3, 2), Point(3, 0)]
    text = render_contour(points)

    assert text == (
        "/==========\\\n"
        "|          |\n"
        "|  ----[]  |\n"
        "|  |    |  |\n"
        "|--[]   |  |\n"
        "\\==========/\n"
    )


def test_render_empty_inputs():
    empty = "/====\\\n|    |\n|    |\n\\====/\n"

    assert render_buildings([]) == empty
    assert render_contour([]) == empty


def test_render_contour_rejects_backwards_scan():
    with pytest.raises(ValueError, match="backwards"):
        render_contour([Point(4, 0), Point(4, 2), Point(2, 2)])
