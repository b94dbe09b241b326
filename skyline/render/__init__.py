"""
Text renderers for buildings and contours.
"""

from .grid import TextGrid
from .building_plot import render_buildings
from .contour_plot import render_contour

__all__ = [
    'TextGrid',
    'render_buildings',
    'render_contour',
]
