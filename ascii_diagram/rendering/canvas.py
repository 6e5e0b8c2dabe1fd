"""
Sparse character canvas with rectangle-outline and text primitives.
"""

import logging
import math
from typing import Optional

from ascii_diagram.geometry.bounds import BoundingBox
from ascii_diagram.geometry.vector import Vector2, round_half_away
from ascii_diagram.rendering.rasterize import Cell, CharacterBuffer, render_buffer

logger = logging.getLogger(__name__)

HORIZONTAL = "-"
VERTICAL = "|"

DEFAULT_MAX_CELLS = 1_000_000


class Canvas:
    """
    Character buffer keyed by integer cells, plus the box that contains them.

    Coordinates are in canvas cells with y growing upward. Writes to an
    occupied cell replace its character. Every write also grows the
    bounding box, so `render()` never clips.

    Usage:
        canvas = Canvas()
        canvas.draw_rectangle_outline(Vector2(0, 0), Vector2(4, 2))
        canvas.draw_text(Vector2(0, 0), "hi")
        print(canvas.render())
    """

    def __init__(self, anchor_origin: bool = True, max_cells: Optional[int] = DEFAULT_MAX_CELLS):
        """
        Args:
            anchor_origin: Start the bounding box at (0, 0, 0, 0) so the origin
                is always part of the render. When False, only written cells
                count.
            max_cells: Largest dense grid `render()` will allocate, or None
                for no limit
        """
        self.buffer: CharacterBuffer = {}
        self.bounds = BoundingBox() if anchor_origin else BoundingBox.unanchored()
        self.max_cells = max_cells

    def put(self, cell: Cell, char: str) -> "Canvas":
        """Write one character at an integer cell."""
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"Canvas cells hold exactly one character, got {char!r}")
        x, y = cell
        self.buffer[(x, y)] = char
        self.bounds.include_point(Vector2(float(x), float(y)))
        return self

    def draw_rectangle_outline(self, center: Vector2, size: Vector2) -> "Canvas":
        """
        Draw a rectangle outline with dashes for rows and bars for columns.

        Half extents are rounded up to whole cells, so a size of 5 spans
        7 cells. Bars are written after dashes and own the four corners.
        """
        _require_finite(center, size)
        half_width = int(math.ceil(size.x / 2))
        half_height = int(math.ceil(size.y / 2))
        center_x = round_half_away(center.x)
        center_y = round_half_away(center.y)

        for dx in range(-half_width, half_width + 1):
            self.put((center_x + dx, center_y - half_height), HORIZONTAL)
            self.put((center_x + dx, center_y + half_height), HORIZONTAL)

        for dy in range(-half_height, half_height + 1):
            self.put((center_x - half_width, center_y + dy), VERTICAL)
            self.put((center_x + half_width, center_y + dy), VERTICAL)

        return self

    def draw_text(self, position: Vector2, text: str) -> "Canvas":
        """Write `text` on one row, horizontally centered on `position`."""
        _require_finite(position)
        start_x = round_half_away(position.x) - len(text) // 2
        start_y = round_half_away(position.y)
        for i, char in enumerate(text):
            self.put((start_x + i, start_y), char)
        return self

    def render(self) -> str:
        """Serialize the canvas, topmost row first. Does not modify the canvas."""
        logger.debug(f"Rendering {len(self.buffer)} cells onto a {self.bounds.width}x{self.bounds.height} grid")
        return render_buffer(self.buffer, self.bounds, max_cells=self.max_cells)

    def __repr__(self):
        return f"Canvas(cells={len(self.buffer)}, bounds={self.bounds})"


def _require_finite(*vectors: Vector2) -> None:
    for vector in vectors:
        if not vector.is_finite():
            raise ValueError(f"Non-finite coordinate passed to canvas: {vector}")
