"""DXF drawing sink backed by ezdxf."""

from __future__ import annotations
import io
import logging
import math
from pathlib import Path

import ezdxf
from ezdxf.lldxf.const import DXFError

from splicer.errors import SinkError
from splicer.models import Point2D
from splicer.sinks.base import DrawingSink


logger = logging.getLogger(__name__)

DXF_VERSION = "R2010"


def _xy(p: Point2D) -> tuple[float, float]:
    return (p.x, p.y)


class DxfSink(DrawingSink):
    """Writes primitives into the modelspace of a new ezdxf document."""

    def __init__(self, dxfversion: str = DXF_VERSION) -> None:
        try:
            self.doc = ezdxf.new(dxfversion)
        except DXFError as e:
            raise SinkError(f"Cannot create DXF document: {e}") from e
        self.msp = self.doc.modelspace()

    def declare_layer(self, name: str, color: int) -> None:
        try:
            if self.doc.layers.has_entry(name):
                self.doc.layers.get(name).color = color
                return
            self.doc.layers.add(name, color=color)
        except DXFError as e:
            raise SinkError(f"Cannot declare layer '{name}': {e}") from e
        logger.debug(f"Layer '{name}' declared with color {color}")

    def declare_dimension_style(
        self,
        name: str,
        text_height: float,
        arrow_size: float,
        extension_offset: float,
    ) -> None:
        attribs = {
            "dimtxt": text_height,
            "dimasz": arrow_size,
            "dimexo": extension_offset,
        }
        try:
            if self.doc.dimstyles.has_entry(name):
                style = self.doc.dimstyles.get(name)
                for key, value in attribs.items():
                    style.dxf.set(key, value)
                return
            self.doc.dimstyles.new(name, dxfattribs=attribs)
        except DXFError as e:
            raise SinkError(f"Cannot declare dimension style '{name}': {e}") from e

    def add_line(self, start: Point2D, end: Point2D, layer: str) -> None:
        try:
            self.msp.add_line(_xy(start), _xy(end), dxfattribs={"layer": layer})
        except DXFError as e:
            raise SinkError(f"Cannot add line on layer '{layer}': {e}") from e

    def add_circle(self, center: Point2D, radius: float, layer: str) -> None:
        try:
            self.msp.add_circle(_xy(center), radius, dxfattribs={"layer": layer})
        except DXFError as e:
            raise SinkError(f"Cannot add circle on layer '{layer}': {e}") from e

    def add_ordinate_dimension(
        self,
        base_point: Point2D,
        ref1: Point2D,
        ref2: Point2D,
        text_anchor: Point2D,
        rotation: float,
        style: str,
        layer: str,
    ) -> None:
        # ezdxf dtype: 1 = X-type (measures along x), 0 = Y-type (along y)
        dtype = 0 if math.isclose(ref1.x, ref2.x) else 1
        offset = text_anchor - ref2
        try:
            dim = self.msp.add_ordinate_dim(
                feature_location=_xy(ref2),
                offset=_xy(offset),
                dtype=dtype,
                origin=_xy(base_point),
                dimstyle=style,
                dxfattribs={"layer": layer, "text_rotation": rotation},
            )
            dim.render()
        except DXFError as e:
            raise SinkError(f"Cannot add dimension on layer '{layer}': {e}") from e

    def save(self, path: str | Path) -> None:
        try:
            self.doc.saveas(path)
        except (OSError, DXFError) as e:
            raise SinkError(f"Cannot save drawing to '{path}': {e}") from e
        logger.info(f"Drawing saved to: {path}")

    def to_string(self) -> str:
        """The drawing as DXF text."""
        stream = io.StringIO()
        try:
            self.doc.write(stream)
        except DXFError as e:
            raise SinkError(f"Cannot serialize drawing: {e}") from e
        return stream.getvalue()
