"""
Fixed-size character grid used by the text renderers.

Each world cell is drawn as RENDER_CELL_WIDTH terminal columns, addressed
as a left and a right half. Row 0 is the baseline and is printed last.
"""

from typing import List

from ..config import RENDER_CELL_WIDTH, RENDER_EMPTY, RENDER_FRAME_FILL
from ..models.geometry import BBox


class TextGrid:
    """Character canvas covering a BBox."""

    def __init__(self, box: BBox):
        self.box = box
        self.columns = box.width * RENDER_CELL_WIDTH
        self._rows: List[List[str]] = [
            [RENDER_EMPTY] * self.columns for _ in range(box.height)
        ]

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.box.width and 0 <= y < self.box.height):
            raise ValueError(
                f"cell ({x},{y}) outside {self.box.width}x{self.box.height} grid"
            )

    def put_left(self, x: int, y: int, glyph: str) -> None:
        self._check(x, y)
        self._rows[y][x * RENDER_CELL_WIDTH] = glyph

    def put_right(self, x: int, y: int, glyph: str) -> None:
        self._check(x, y)
        self._rows[y][x * RENDER_CELL_WIDTH + RENDER_CELL_WIDTH - 1] = glyph

    def put(self, x: int, y: int, left: str, right: str) -> None:
        self.put_left(x, y, left)
        self.put_right(x, y, right)

    def render(self) -> str:
        """Return the framed grid, top row first, newline-terminated."""
        rule = RENDER_FRAME_FILL * self.columns
        lines = [f"/{rule}\\"]
        for row in reversed(self._rows):
            lines.append(f"|{''.join(row)}|")
        lines.append(f"\\{rule}/")
        return "\n".join(lines) + "\n"
