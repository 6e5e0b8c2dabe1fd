"""
Tests for the world-space Drawer.
"""

import io

import pytest

from ascii_diagram.geometry.vector import Vector2
from ascii_diagram.rendering.canvas import Canvas
from ascii_diagram.rendering.drawer import Drawer


class TestScaling:
    """Tests for world-to-canvas conversion."""

    def test_uniform_scale(self):
        """Test that a float scales both axes."""
        assert Drawer(5.0).to_canvas(Vector2(-1, 2)) == Vector2(-5, 10)

    def test_per_axis_scale(self):
        """Test that a Vector2 scales each axis separately."""
        assert Drawer(Vector2(2, 3)).to_canvas(Vector2(1, -1)) == Vector2(2, -3)

    def test_scaled_rectangle(self):
        """Test that center and size are both scaled before drawing."""
        drawer = Drawer(5.0).draw_rectangle(Vector2(-1, 0), Vector2(1, 1))
        expected = Canvas().draw_rectangle_outline(Vector2(-5, 0), Vector2(5, 5))

        assert drawer.canvas.buffer == expected.buffer
        # ceil(2.5) = 3 cells each way around (-5, 0)
        assert drawer.canvas.buffer[(-8, 0)] == "|"
        assert drawer.canvas.buffer[(-2, 0)] == "|"
        assert drawer.canvas.buffer[(-5, 3)] == "-"
        assert drawer.canvas.buffer[(-5, -3)] == "-"
        assert drawer.canvas.bounds.x_min == -8
        assert drawer.canvas.bounds.y_max == 3

    def test_text_length_is_not_scaled(self):
        """Test that only the text position is scaled."""
        drawer = Drawer(10.0).draw_text(Vector2(1, 0), "abcd")
        assert drawer.canvas.buffer == {(8, 0): "a", (9, 0): "b", (10, 0): "c", (11, 0): "d"}


class TestAnnotatedRectangle:
    """Tests for Drawer.draw_annotated_rectangle."""

    def test_outline_only(self):
        """Test that no flags draws just the outline."""
        plain = Drawer(2.0).draw_rectangle(Vector2(1, 1), Vector2(3, 2))
        annotated = Drawer(2.0).draw_annotated_rectangle(Vector2(1, 1), Vector2(3, 2))
        assert annotated.canvas.buffer == plain.canvas.buffer

    def test_corner_labels(self):
        """Test corner coordinate labels over the outline."""
        drawer = Drawer(Vector2(10, 1))
        drawer.draw_annotated_rectangle(Vector2(0, 0), Vector2(4, 2), show_corners=True)

        assert drawer.render().splitlines() == [
            " (-2, 1)" + "-" * 33 + "(2, 1) ",
            "    |" + " " * 39 + "|   ",
            "(-2, -1)" + "-" * 33 + "(2, -1)",
        ]

    def test_center_label(self):
        """Test the center coordinate label."""
        drawer = Drawer(1.0)
        drawer.draw_annotated_rectangle(Vector2(3, 0), Vector2(10, 4), show_center=True)

        row = "".join(drawer.canvas.buffer[(x, 0)] for x in range(0, 6))
        assert row == "(3, 0)"

    def test_edge_lengths_use_exact_half_extents(self):
        """Test that edge labels sit at size / 2, not at the rounded-up outline."""
        drawer = Drawer(1.0)
        drawer.draw_annotated_rectangle(Vector2(0, 0), Vector2(6.6, 4), show_edge_lengths=True)

        # Outline sits at x = -4 (ceil), the height label at x = -3 (exact 3.3).
        assert drawer.canvas.buffer[(-4, 0)] == "|"
        assert drawer.canvas.buffer[(-3, 0)] == "4"
        assert drawer.canvas.buffer[(0, -2)] == "7"


class TestOutput:
    """Tests for rendering and writing output."""

    def test_draw_writes_trailing_newline(self):
        """Test output to an explicit stream."""
        stream = io.StringIO()
        Drawer().draw_rectangle(Vector2(0, 0), Vector2(4, 2)).draw(stream)
        assert stream.getvalue() == "|---|\n|   |\n|---|\n"

    def test_draw_defaults_to_stdout(self, capsys):
        """Test that draw() writes to stdout by default."""
        Drawer(canvas=Canvas(anchor_origin=False)).draw_text(Vector2(0, 0), "hi").draw()
        assert capsys.readouterr().out == "hi\n"

    def test_chaining_returns_drawer(self):
        """Test that draw methods return the drawer."""
        drawer = Drawer()
        assert drawer.draw_rectangle(Vector2(0, 0), Vector2(1, 1)) is drawer
        assert drawer.draw_text(Vector2(0, 0), "x") is drawer
        assert drawer.draw_annotated_rectangle(Vector2(0, 0), Vector2(1, 1)) is drawer


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
