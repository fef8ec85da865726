"""Primitive emitter — translates drafting geometry into sink calls."""

from __future__ import annotations
import math

from splicer.models import (
    Point2D, Cross, OrdinateDimension, DrawingStats, PrimitiveType, pt,
)
from splicer.sinks.base import DrawingSink


VERTICAL_TEXT_ROTATION = 270.0


class PrimitiveEmitter:
    """
    Thin adapter between view builders and a drawing sink.

    Every call is forwarded straight away; sink errors propagate to the
    caller. The emitter keeps a tally of what it sent.
    """

    def __init__(self, sink: DrawingSink) -> None:
        self.sink = sink
        self.stats = DrawingStats()

    def line(self, start: Point2D, end: Point2D, layer: str) -> None:
        self.sink.add_line(start, end, layer)
        self.stats.record(PrimitiveType.LINE)

    def rectangle(self, x1: float, y1: float, x2: float, y2: float, layer: str) -> None:
        """Axis-aligned rectangle as four lines: horizontal edges, then vertical edges."""
        self.line(pt(x1, y2), pt(x2, y2), layer)
        self.line(pt(x1, y1), pt(x2, y1), layer)
        self.line(pt(x1, y1), pt(x1, y2), layer)
        self.line(pt(x2, y1), pt(x2, y2), layer)

    def circle(self, center: Point2D, radius: float, layer: str) -> None:
        self.sink.add_circle(center, radius, layer)
        self.stats.record(PrimitiveType.CIRCLE)

    def cross(self, center: Point2D, size: float, layer: str) -> None:
        marker = Cross(center=center, size=size, layer=layer)
        for start, end in marker.segments():
            self.sink.add_line(start, end, layer)
        self.stats.record(PrimitiveType.CROSS)

    def dimension(
        self,
        ref1: Point2D,
        ref2: Point2D,
        offset: float,
        style: str,
        layer: str,
    ) -> OrdinateDimension:
        dim = ordinate_dimension(ref1, ref2, offset, style, layer)
        self.sink.add_ordinate_dimension(
            dim.base_point, dim.ref1, dim.ref2, dim.text_anchor,
            dim.rotation, dim.style, dim.layer,
        )
        self.stats.record(PrimitiveType.DIMENSION)
        return dim


def ordinate_dimension(
    ref1: Point2D,
    ref2: Point2D,
    offset: float,
    style: str,
    layer: str,
) -> OrdinateDimension:
    """
    Lay out a dimension between two reference points.

    Points sharing x give a vertical dimension with text turned 270°,
    anything else is horizontal. The text anchor sits `offset` away from
    the midpoint, perpendicular to the span: above a horizontal span,
    left of a vertical one.
    """
    vertical = math.isclose(ref1.x, ref2.x)
    mid = ref1.midpoint(ref2)
    if vertical:
        anchor = mid.shifted(dx=-offset)
        rotation = VERTICAL_TEXT_ROTATION
    else:
        anchor = mid.shifted(dy=offset)
        rotation = 0.0
    return OrdinateDimension(
        base_point=ref1,
        ref1=ref1,
        ref2=ref2,
        text_anchor=anchor,
        rotation=rotation,
        style=style,
        layer=layer,
    )
