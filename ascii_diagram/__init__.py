"""
ascii-diagram: axis-aligned rectangles and text labels rasterized to character cells
"""

__version__ = "0.1.0"

# Use direct imports:
#   from ascii_diagram.rendering.drawer import Drawer
#   from ascii_diagram.rendering.canvas import Canvas
#   from ascii_diagram.geometry.vector import Vector2

__all__ = ["__version__"]
