"""In-memory sink that records every call — used for previews and tests."""

from __future__ import annotations
from pathlib import Path
from pydantic import BaseModel

from splicer.errors import SinkError
from splicer.models import Point2D, Line, Circle, OrdinateDimension
from splicer.sinks.base import DrawingSink


class LayerDeclaration(BaseModel):
    name: str
    color: int


class DimensionStyleDeclaration(BaseModel):
    name: str
    text_height: float
    arrow_size: float
    extension_offset: float


class RecordedDrawing(BaseModel):
    """Everything a sink was asked to draw, in call order per kind."""
    layers: list[LayerDeclaration] = []
    dimension_styles: list[DimensionStyleDeclaration] = []
    lines: list[Line] = []
    circles: list[Circle] = []
    dimensions: list[OrdinateDimension] = []

    def lines_on(self, layer: str) -> list[Line]:
        return [ln for ln in self.lines if ln.layer == layer]

    def circles_on(self, layer: str) -> list[Circle]:
        return [c for c in self.circles if c.layer == layer]


class RecordingSink(DrawingSink):

    def __init__(self) -> None:
        self.drawing = RecordedDrawing()
        self.saved_to: list[Path] = []

    def declare_layer(self, name: str, color: int) -> None:
        self.drawing.layers.append(LayerDeclaration(name=name, color=color))

    def declare_dimension_style(
        self,
        name: str,
        text_height: float,
        arrow_size: float,
        extension_offset: float,
    ) -> None:
        self.drawing.dimension_styles.append(DimensionStyleDeclaration(
            name=name,
            text_height=text_height,
            arrow_size=arrow_size,
            extension_offset=extension_offset,
        ))

    def add_line(self, start: Point2D, end: Point2D, layer: str) -> None:
        self.drawing.lines.append(Line(start=start, end=end, layer=layer))

    def add_circle(self, center: Point2D, radius: float, layer: str) -> None:
        self.drawing.circles.append(Circle(center=center, radius=radius, layer=layer))

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
        self.drawing.dimensions.append(OrdinateDimension(
            base_point=base_point,
            ref1=ref1,
            ref2=ref2,
            text_anchor=text_anchor,
            rotation=rotation,
            style=style,
            layer=layer,
        ))

    def save(self, path: str | Path) -> None:
        """Write the recording as JSON."""
        path = Path(path)
        try:
            path.write_text(self.drawing.model_dump_json(indent=2), encoding="utf-8")
        except OSError as e:
            raise SinkError(f"Cannot save recording to '{path}': {e}") from e
        self.saved_to.append(path)
