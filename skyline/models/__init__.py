"""
Data models for the Skyline Contour Solver.
"""

from .geometry import Point, BBox, ORIGIN
from .building import Building, InvalidBuildingError

__all__ = [
    'Point', 'BBox', 'ORIGIN',
    'Building', 'InvalidBuildingError',
]
