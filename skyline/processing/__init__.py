"""
Processing modules for the Skyline Contour Solver.

Contains coordinate indexing, the active set strategies, the contour
builder, and the sweep engine that drives them.
"""

from .indexer import CoordinateIndex, CoordinateIndexer
from .active_set import (
    ActiveEntry,
    ActiveSet,
    AugmentedHeapActiveSet,
    LinearScanActiveSet,
    create_active_set,
)
from .contour import Axis, ContourBuilder
from .sweep import (
    SkylineSolver,
    SolveStats,
    SweepInvariantError,
    SweepState,
    solve,
)

__all__ = [
    'CoordinateIndex',
    'CoordinateIndexer',
    'ActiveEntry',
    'ActiveSet',
    'AugmentedHeapActiveSet',
    'LinearScanActiveSet',
    'create_active_set',
    'Axis',
    'ContourBuilder',
    'SkylineSolver',
    'SolveStats',
    'SweepInvariantError',
    'SweepState',
    'solve',
]
