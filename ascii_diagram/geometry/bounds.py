"""
Axis-aligned bounding box accumulated from written cells.
"""

import math
from dataclasses import dataclass

from ascii_diagram.geometry.vector import Vector2


@dataclass
class BoundingBox:
    """
    Min/max accumulator over points. Only ever grows.

    The default state is the degenerate box at the origin, so any canvas
    rendered from it always contains (0, 0). Use `unanchored()` to track
    the drawn points alone.
    """

    x_min: float = 0.0
    x_max: float = 0.0
    y_min: float = 0.0
    y_max: float = 0.0

    @classmethod
    def unanchored(cls) -> "BoundingBox":
        return cls(x_min=math.inf, x_max=-math.inf, y_min=math.inf, y_max=-math.inf)

    @property
    def is_empty(self) -> bool:
        return self.x_min > self.x_max or self.y_min > self.y_max

    def include_point(self, point: Vector2) -> None:
        """Widen each bound just enough to contain `point`."""
        if point.x < self.x_min:
            self.x_min = point.x
        if point.x > self.x_max:
            self.x_max = point.x
        if point.y < self.y_min:
            self.y_min = point.y
        if point.y > self.y_max:
            self.y_max = point.y

    @property
    def width(self) -> int:
        """Number of cell columns spanned, edges inclusive."""
        if self.is_empty:
            return 0
        return int(math.ceil(self.x_max - self.x_min)) + 1

    @property
    def height(self) -> int:
        """Number of cell rows spanned, edges inclusive."""
        if self.is_empty:
            return 0
        return int(math.ceil(self.y_max - self.y_min)) + 1
