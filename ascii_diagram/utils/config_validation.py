"""
Lightweight configuration validation to catch malformed diagrams before drawing starts.
"""

import math
from numbers import Real
from typing import Any

SHAPE_KEYS = {
    "rectangle": ("center", "size"),
    "annotated_rectangle": ("center", "size"),
    "text": ("position", "text"),
}
ANNOTATION_FLAGS = ("corners", "center_label", "edge_lengths")


def _is_finite_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def _check_vector(value: Any, where: str) -> None:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"{where} must be a list of two numbers, got {value!r}.")
    if not all(_is_finite_number(v) for v in value):
        raise ValueError(f"{where} must contain finite numbers, got {value!r}.")


def validate_config(config: Any) -> None:
    """
    Validate the drawer settings and every shape entry.
    Raises ValueError on the first problem found.
    """
    scale = config.get("drawer.scale", 1.0)
    if isinstance(scale, (list, tuple)):
        _check_vector(scale, "drawer.scale")
    elif not _is_finite_number(scale):
        raise ValueError(f"drawer.scale must be a number or a list of two numbers, got {scale!r}.")

    anchor_origin = config.get("canvas.anchor_origin", True)
    if not isinstance(anchor_origin, bool):
        raise ValueError(f"canvas.anchor_origin must be true or false, got {anchor_origin!r}.")

    max_cells = config.get("canvas.max_cells")
    if max_cells is not None and (not isinstance(max_cells, int) or isinstance(max_cells, bool) or max_cells <= 0):
        raise ValueError(f"canvas.max_cells must be a positive integer, got {max_cells!r}.")

    shapes = config.get("shapes", [])
    if not isinstance(shapes, list):
        raise ValueError(f"shapes must be a list, got {type(shapes).__name__}.")

    for index, shape in enumerate(shapes):
        where = f"shapes[{index}]"
        if not isinstance(shape, dict):
            raise ValueError(f"{where} must be a mapping, got {shape!r}.")

        kind = shape.get("type")
        if not isinstance(kind, str) or kind not in SHAPE_KEYS:
            raise ValueError(
                f"Unsupported {where}.type '{kind}'. Use one of: {', '.join(sorted(SHAPE_KEYS))}."
            )

        for key in SHAPE_KEYS[kind]:
            if key not in shape:
                raise ValueError(f"{where} ({kind}) is missing required key '{key}'.")

        if kind == "text":
            _check_vector(shape["position"], f"{where}.position")
            if not isinstance(shape["text"], str):
                raise ValueError(f"{where}.text must be a string, got {shape['text']!r}.")
        else:
            _check_vector(shape["center"], f"{where}.center")
            _check_vector(shape["size"], f"{where}.size")

        if kind == "annotated_rectangle":
            for flag in ANNOTATION_FLAGS:
                if not isinstance(shape.get(flag, False), bool):
                    raise ValueError(f"{where}.{flag} must be true or false, got {shape[flag]!r}.")
