import pytest

from skyline.models.building import Building
from skyline.models.geometry import Point
from skyline.utils.contour_utils import (
    ContourError,
    check_contour,
    contour_height_at,
    height_profile,
    skyline_height_at,
    skyline_profile,
    validate_contour,
)


JOINED = [Building(2, 6, 5), Building(8, 12, 5), Building(4, 10, 3)]
JOINED_POINTS = [
    Point(2, 0), Point(2, 5), Point(6, 5), Point(6, 3),
    Point(8, 3), Point(8, 5), Point(12, 5), Point(12, 0),
]


def test_valid_contour_passes():
    validate_contour(JOINED_POINTS)
    validate_contour([])


@pytest.mark.parametrize("points, message", [
    ([Point(1, 0), Point(1, 0)], "duplicate"),
    ([Point(1, 0), Point(2, 2)], "diagonal"),
    ([Point(1, 0), Point(1, 2), Point(1, 4)], "co-linear"),
    ([Point(1, 0), Point(2, 0), Point(3, 0)], "co-linear"),
])
def test_invalid_contours(points, message):
    with pytest.raises(ContourError, match=message):
        validate_contour(points)


def test_heights_use_half_open_spans():
    assert contour_height_at(JOINED_POINTS, 1) == 0
    assert contour_height_at(JOINED_POINTS, 2) == 5
    assert contour_height_at(JOINED_POINTS, 6) == 3
    assert contour_height_at(JOINED_POINTS, 11) == 5
    assert contour_height_at(JOINED_POINTS, 12) == 0

    assert skyline_height_at(JOINED, 6) == 3
    assert skyline_height_at(JOINED, 12) == 0


def test_profiles_agree():
    assert height_profile(JOINED_POINTS, 14) == skyline_profile(JOINED, 14)


def test_check_contour_accepts_solution():
    check_contour(JOINED, JOINED_POINTS)


def test_check_contour_reports_wrong_height():
    wrong = list(JOINED_POINTS)
    wrong[3] = Point(6, 2)
    wrong[4] = Point(8, 2)

    with pytest.raises(ContourError, match="x=6"):
        check_contour(JOINED, wrong)


def test_check_contour_requires_baseline_ends():
    with pytest.raises(ContourError, match="height 0"):
        check_contour([Building(0, 2, 3)], [Point(0, 3), Point(2, 3), Point(2, 0)])
