"""
Configuration constants for the Skyline Contour Solver.

Contains the tunable parameters for solving, synthetic data generation,
CSV formats, and text rendering.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


# =============================================================================
# ACTIVE SET SELECTION
# =============================================================================

class ActiveSetKind(Enum):
    """
    Strategy used to hold the buildings currently crossed by the sweep line.

    AUGMENTED_HEAP: (Default) Binary min-heap keyed by right edge, where every
                    node also carries the maximum height of its subtree.
                    Insert and pop are O(log n).

    LINEAR_SCAN: Unordered list; each close scans every open building to find
                 the nearest right edge and the remaining height. O(n) per
                 close, kept as a reference for cross-checking.
    """
    AUGMENTED_HEAP = "heap"
    LINEAR_SCAN = "linear"


# =============================================================================
# CSV FORMATS
# =============================================================================

# Header line of a building stream, followed by "x1,x2,h" integer triples
BUILDINGS_HEADER = "x1,x2,h"

# Header line of a point stream, followed by "x,y" integer pairs
POINTS_HEADER = "x,y"

# Field names used when reporting parse failures
BUILDING_FIELDS = ("x1", "x2", "h")
POINT_FIELDS = ("x", "y")

# =============================================================================
# SYNTHETIC GENERATOR DEFAULTS
# =============================================================================

# World width: left/right edges are drawn from [0, width)
GEN_DEFAULT_WIDTH = 16

# Height bound: heights are drawn from [1, height - 1]
GEN_DEFAULT_HEIGHT = 32

# Number of buildings per generated set
GEN_DEFAULT_COUNT = 8

# =============================================================================
# TEXT RENDERING
# =============================================================================

# Bounding boxes are inflated by a quarter of each dimension,
# but never by less than this many cells
RENDER_MIN_MARGIN = 2
RENDER_MARGIN_DIVISOR = 4

# Each world cell is drawn as this many terminal columns (double width
# for terminal aspect ratio)
RENDER_CELL_WIDTH = 2

# Frame glyphs
RENDER_FRAME_FILL = "="
RENDER_EMPTY = " "


# =============================================================================
# RUNTIME CONFIGURATION
# =============================================================================

@dataclass
class SolverConfig:
    """
    Runtime configuration for the sweep solver.

    Attributes:
        active_set: Active set strategy (augmented heap or linear scan)
        validate_input: Coerce and validate every building before sweeping.
            When off, a sequence of Building instances is swept as given;
            triples are still converted
        check_result: Check the emitted contour against the buildings before
            returning it (brute-force, O(width * n))
    """
    active_set: ActiveSetKind = ActiveSetKind.AUGMENTED_HEAP
    validate_input: bool = True
    check_result: bool = False

    def __post_init__(self):
        """Validate configuration values."""
        if isinstance(self.active_set, str):
            self.active_set = ActiveSetKind(self.active_set)

        if not isinstance(self.active_set, ActiveSetKind):
            raise ValueError(f"Unknown active set kind: {self.active_set!r}")


@dataclass
class GeneratorConfig:
    """
    Runtime configuration for synthetic building generation.

    Attributes:
        width: Exclusive upper bound for building edges
        height: Exclusive upper bound for building heights
        count: Number of buildings to generate
        seed: Random seed; None picks one from system entropy
    """
    width: int = GEN_DEFAULT_WIDTH
    height: int = GEN_DEFAULT_HEIGHT
    count: int = GEN_DEFAULT_COUNT
    seed: Optional[int] = None

    def __post_init__(self):
        """Validate configuration values."""
        if self.width < 1:
            raise ValueError("width must be at least 1")

        if self.height < 2:
            raise ValueError("height must be at least 2")

        if self.count < 0:
            raise ValueError("count must be non-negative")


# Default configuration instance
DEFAULT_SOLVER_CONFIG = SolverConfig()
