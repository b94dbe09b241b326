"""
Building data model for the Skyline Contour Solver.

A building is a rectangle standing on the baseline y = 0, spanning the
half-open interval [x1, x2) with the given height.
"""

from dataclasses import dataclass
from typing import Any


class InvalidBuildingError(ValueError):
    """Raised when a building violates 0 <= x1 <= x2 or height >= 0."""
    pass


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True)
class Building:
    """
    Immutable building record.

    Attributes:
        x1: Left edge (inclusive)
        x2: Right edge (exclusive)
        height: Roof height above the baseline
    """
    x1: int
    x2: int
    height: int

    def __post_init__(self):
        """Reject coordinates the sweep cannot trace."""
        for name in ('x1', 'x2', 'height'):
            if not _is_int(getattr(self, name)):
                raise InvalidBuildingError(
                    f"{name} must be an integer, got {getattr(self, name)!r}"
                )

        if self.x1 < 0:
            raise InvalidBuildingError(f"x1 must be non-negative, got {self.x1}")

        if self.x1 > self.x2:
            raise InvalidBuildingError(
                f"x1 must not exceed x2, got x1={self.x1} x2={self.x2}"
            )

        if self.height < 0:
            raise InvalidBuildingError(
                f"height must be non-negative, got {self.height}"
            )

    @property
    def width(self) -> int:
        """Span length along the baseline."""
        return self.x2 - self.x1

    @property
    def is_visible(self) -> bool:
        """True when the building encloses any area."""
        return self.height > 0 and self.x2 > self.x1

    def covers(self, x: int) -> bool:
        """Check if x lies in the half-open span [x1, x2)."""
        return self.x1 <= x < self.x2

    def dominates(self, other: 'Building') -> bool:
        """Check if other is contained in this building in both span and height."""
        return (
            self.x1 <= other.x1 and
            other.x2 <= self.x2 and
            other.height <= self.height
        )

    def as_tuple(self) -> tuple:
        """Return (x1, x2, height)."""
        return (self.x1, self.x2, self.height)

    def __str__(self) -> str:
        return f"[{self.x1},{self.x2})@{self.height}"

    @classmethod
    def coerce(cls, value: Any) -> 'Building':
        """
        Convert a Building or an (x1, x2, height) triple into a Building.

        Raises:
            InvalidBuildingError: If value is not a valid building
        """
        if isinstance(value, cls):
            return value

        try:
            x1, x2, height = value
        except (TypeError, ValueError):
            raise InvalidBuildingError(
                f"expected an (x1, x2, height) triple, got {value!r}"
            ) from None

        return cls(x1, x2, height)
