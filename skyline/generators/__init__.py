"""
Synthetic data generators for the Skyline Contour Solver.
"""

from .random_buildings import generate, generate_buildings

__all__ = [
    'generate',
    'generate_buildings',
]
