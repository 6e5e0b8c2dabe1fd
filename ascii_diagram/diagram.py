"""
Config-driven diagram composition.

Turns the `drawer`, `canvas` and `shapes` sections of a Config into draw
calls, issued in the order they are listed.
"""

import logging
from typing import Any, Dict, Iterable

from ascii_diagram.geometry.vector import Vector2
from ascii_diagram.rendering.canvas import Canvas, DEFAULT_MAX_CELLS
from ascii_diagram.rendering.drawer import Drawer, Scale
from ascii_diagram.utils.config_validation import validate_config

logger = logging.getLogger(__name__)


def parse_scale(value: Any) -> Scale:
    """A bare number scales both axes; a two-item list scales each axis."""
    if isinstance(value, (list, tuple)):
        return Vector2.from_sequence(value)
    return float(value)


def build_drawer(config: Any) -> Drawer:
    """Create an empty Drawer from the `drawer.*` and `canvas.*` settings."""
    canvas = Canvas(
        anchor_origin=config.get("canvas.anchor_origin", True),
        max_cells=config.get("canvas.max_cells", DEFAULT_MAX_CELLS),
    )
    scale = parse_scale(config.get("drawer.scale", 1.0))
    logger.info(f"Drawer scale: {scale}, origin anchored: {config.get('canvas.anchor_origin', True)}")
    return Drawer(scale=scale, canvas=canvas)


def draw_shapes(drawer: Drawer, shapes: Iterable[Dict[str, Any]]) -> Drawer:
    """Issue one draw call per shape entry. Later shapes overwrite earlier ones."""
    for shape in shapes:
        kind = shape["type"]
        logger.debug(f"Drawing {kind}: {shape}")

        if kind == "rectangle":
            drawer.draw_rectangle(
                Vector2.from_sequence(shape["center"]),
                Vector2.from_sequence(shape["size"]),
            )
        elif kind == "annotated_rectangle":
            drawer.draw_annotated_rectangle(
                Vector2.from_sequence(shape["center"]),
                Vector2.from_sequence(shape["size"]),
                show_corners=shape.get("corners", False),
                show_center=shape.get("center_label", False),
                show_edge_lengths=shape.get("edge_lengths", False),
            )
        elif kind == "text":
            drawer.draw_text(Vector2.from_sequence(shape["position"]), shape["text"])
        else:
            raise ValueError(f"Unsupported shape type '{kind}'")

    return drawer


def render_config(config: Any) -> str:
    """Validate a config, draw every shape and return the rendered text."""
    validate_config(config)
    shapes = config.get("shapes", [])
    drawer = draw_shapes(build_drawer(config), shapes)
    logger.info(f"Drew {len(shapes)} shapes into {len(drawer.canvas.buffer)} cells")
    return drawer.render()
