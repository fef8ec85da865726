"""Layer and dimension-style declarations shared by both views."""

from __future__ import annotations
import logging

from splicer.models import LayerNames, DraftingParams
from splicer.sinks.base import DrawingSink


logger = logging.getLogger(__name__)

# AutoCAD color index per semantic layer
BASE_COLOR = 4   # cyan
BOLT_COLOR = 2   # yellow
PLATE_COLOR = 1  # red


def layer_table(names: LayerNames) -> list[tuple[str, int]]:
    """(name, color) of the three drawing layers: base, bolt, plate."""
    return [
        (names.base, BASE_COLOR),
        (names.bolt, BOLT_COLOR),
        (names.plate, PLATE_COLOR),
    ]


def declare_layers(sink: DrawingSink, names: LayerNames, params: DraftingParams) -> list[str]:
    """Declare the layers and the dimension style. Returns the layer names."""
    declared: list[str] = []
    for name, color in layer_table(names):
        sink.declare_layer(name, color)
        declared.append(name)

    sink.declare_dimension_style(
        params.dimension_style,
        params.dimension_text_height,
        params.dimension_arrow_size,
        params.dimension_extension_offset,
    )
    logger.debug(f"Declared layers {declared} and dimension style '{params.dimension_style}'")
    return declared
