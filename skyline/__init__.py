"""
Skyline Contour Solver

Computes the upper envelope (skyline contour) of a set of rectangular
buildings standing on a common baseline, using a left-to-right sweep
over building edges.

Can be used as:
- Library: skyline.solve([(2, 4, 3), (6, 8, 3)])
- CLI tool: python -m skyline.main solve < buildings.csv
"""

__version__ = "0.3.0"
__author__ = "Skyline Team"

from .models.building import Building, InvalidBuildingError
from .models.geometry import Point
from .processing.sweep import SkylineSolver, SolveStats, solve

__all__ = [
    'Building',
    'InvalidBuildingError',
    'Point',
    'SkylineSolver',
    'SolveStats',
    'solve',
]
