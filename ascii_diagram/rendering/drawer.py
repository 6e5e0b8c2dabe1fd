"""
World-space front-end over Canvas.
"""

import logging
import sys
from typing import Optional, TextIO, Union

from ascii_diagram.geometry.vector import Vector2, round_half_away
from ascii_diagram.rendering.canvas import Canvas

logger = logging.getLogger(__name__)

Scale = Union[float, Vector2]


class Drawer:
    """
    Converts world coordinates to canvas cells and forwards draw calls.

    The scale is either a single factor applied to both axes or a Vector2
    stretching each axis independently. Character cells are usually about
    twice as tall as they are wide, so a per-axis scale such as (5.0, 2.25)
    keeps boxes looking proportional.

    Usage:
        drawer = Drawer(Vector2(5.0, 2.25))
        drawer.draw_rectangle(Vector2(-1, 0), Vector2(1, 1))
        drawer.draw_annotated_rectangle(Vector2(0, 0), Vector2(10, 5), show_corners=True)
        drawer.draw()
    """

    def __init__(self, scale: Scale = 1.0, canvas: Optional[Canvas] = None):
        self.scale = scale
        self.canvas = canvas if canvas is not None else Canvas()

    def to_canvas(self, vector: Vector2) -> Vector2:
        """Map a world-space point or extent to canvas space."""
        if isinstance(self.scale, Vector2):
            return vector.multiply_componentwise(self.scale)
        return vector.scale_by(float(self.scale))

    def draw_rectangle(self, center: Vector2, size: Vector2) -> "Drawer":
        self.canvas.draw_rectangle_outline(self.to_canvas(center), self.to_canvas(size))
        return self

    def draw_text(self, position: Vector2, text: str) -> "Drawer":
        """Place text at a scaled position; the text itself is never scaled."""
        self.canvas.draw_text(self.to_canvas(position), text)
        return self

    def draw_annotated_rectangle(
        self,
        center: Vector2,
        size: Vector2,
        show_corners: bool = False,
        show_center: bool = False,
        show_edge_lengths: bool = False,
    ) -> "Drawer":
        """
        Draw a rectangle outline plus optional coordinate and size labels.

        All arguments are in world units. Labels are placed at the exact
        world corners (size / 2, not the rounded-up cell extents of the
        outline) and show world coordinates.

        Args:
            center: Rectangle center
            size: Width and height
            show_corners: Label each corner with its coordinates
            show_center: Label the center with its coordinates
            show_edge_lengths: Label the left edge with the height and the
                bottom edge with the width
        """
        self.draw_rectangle(center, size)

        half_width = size.x / 2
        half_height = size.y / 2

        corners = [
            Vector2(center.x - half_width, center.y - half_height),
            Vector2(center.x + half_width, center.y - half_height),
            Vector2(center.x - half_width, center.y + half_height),
            Vector2(center.x + half_width, center.y + half_height),
        ]

        if show_corners:
            for corner in corners:
                self.draw_text(corner, corner.to_label())

        if show_center:
            self.draw_text(center, center.to_label())

        if show_edge_lengths:
            left_center = Vector2(center.x - half_width, center.y)
            bottom_center = Vector2(center.x, center.y - half_height)
            self.draw_text(left_center, str(round_half_away(size.y)))
            self.draw_text(bottom_center, str(round_half_away(size.x)))

        return self

    def render(self) -> str:
        return self.canvas.render()

    def draw(self, stream: Optional[TextIO] = None) -> None:
        """Write the rendered diagram and a trailing newline to `stream` (stdout by default)."""
        if stream is None:
            stream = sys.stdout
        text = self.render()
        stream.write(text + "\n")
        stream.flush()
        logger.debug(f"Wrote {len(text.splitlines())} lines")
