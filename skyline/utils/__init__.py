"""
Utility functions for the Skyline Contour Solver.
"""

from .contour_utils import (
    ContourError,
    validate_contour,
    contour_height_at,
    skyline_height_at,
    height_profile,
    skyline_profile,
    check_contour,
)

__all__ = [
    'ContourError',
    'validate_contour',
    'contour_height_at',
    'skyline_height_at',
    'height_profile',
    'skyline_profile',
    'check_contour',
]
