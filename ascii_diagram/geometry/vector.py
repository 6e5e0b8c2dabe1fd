"""
2D vector value type used for world and canvas coordinates.
"""

import math
from dataclasses import dataclass
from typing import Sequence


def round_half_away(value: float) -> int:
    """
    Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3).

    Python's built-in round() ties to even, which would shift labels and
    cells by one at every .5 boundary.
    """
    magnitude = abs(value)
    whole = math.floor(magnitude)
    # magnitude - whole is exact; magnitude + 0.5 is not (0.49999999999999994 + 0.5 == 1.0)
    if magnitude - whole >= 0.5:
        whole += 1
    return whole if value >= 0 else -whole


@dataclass(frozen=True)
class Vector2:
    """
    Immutable 2D point or extent.

    Attributes:
        x: Horizontal component
        y: Vertical component (grows upward)
    """

    x: float
    y: float

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> "Vector2":
        """Build a vector from a two-item sequence such as a YAML list."""
        if len(values) != 2:
            raise ValueError(f"Expected 2 components, got {len(values)}: {values!r}")
        return cls(float(values[0]), float(values[1]))

    def multiply_componentwise(self, other: "Vector2") -> "Vector2":
        """Stretch each axis by the matching component of `other`."""
        return Vector2(self.x * other.x, self.y * other.y)

    def scale_by(self, factor: float) -> "Vector2":
        """Scale both axes by the same factor."""
        return Vector2(self.x * factor, self.y * factor)

    def to_label(self) -> str:
        return f"({round_half_away(self.x)}, {round_half_away(self.y)})"

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)
