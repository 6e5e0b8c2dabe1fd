"""
Render-time materialization of a sparse character buffer into text.

Drawing never allocates a dense grid; the buffer stays a mapping of
integer cells to characters until `render_buffer` runs once at the end.
"""

import math
from typing import Dict, Optional, Tuple

import numpy as np

from ascii_diagram.geometry.bounds import BoundingBox

Cell = Tuple[int, int]
CharacterBuffer = Dict[Cell, str]

BLANK = " "


def materialize_grid(buffer: CharacterBuffer, bounds: BoundingBox) -> np.ndarray:
    """
    Copy buffered cells into a dense (height, width) array of characters.

    Row 0 of the returned array is the lowest y; use `grid_to_text` to get
    the topmost row first.

    Args:
        buffer: Sparse mapping of (x, y) cells to single characters
        bounds: Box containing every key of `buffer`

    Returns:
        Array of dtype '<U1' filled with spaces where nothing was drawn
    """
    grid = np.full((bounds.height, bounds.width), BLANK, dtype="<U1")
    if grid.size == 0:
        return grid

    offset_x = int(math.floor(bounds.x_min))
    offset_y = int(math.floor(bounds.y_min))
    for (x, y), char in buffer.items():
        grid[y - offset_y, x - offset_x] = char
    return grid


def grid_to_text(grid: np.ndarray) -> str:
    """Join rows from highest y to lowest, one line per row, no trailing newline."""
    return "\n".join("".join(row) for row in grid[::-1])


def render_buffer(
    buffer: CharacterBuffer,
    bounds: BoundingBox,
    max_cells: Optional[int] = None,
) -> str:
    """
    Materialize and serialize a buffer in one pass.

    Raises:
        ValueError: If the bounds are not finite, or the dense grid would
            hold more than `max_cells` cells
    """
    if bounds.is_empty:
        return ""

    if not all(math.isfinite(v) for v in (bounds.x_min, bounds.x_max, bounds.y_min, bounds.y_max)):
        raise ValueError(f"Cannot render non-finite canvas bounds: {bounds}")

    width, height = bounds.width, bounds.height
    if max_cells is not None and width * height > max_cells:
        raise ValueError(
            f"Canvas too large: {width}x{height} = {width * height} cells "
            f"exceeds the limit of {max_cells}."
        )

    return grid_to_text(materialize_grid(buffer, bounds))
