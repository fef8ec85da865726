"""Geometric primitives handed to the drawing sink."""

from __future__ import annotations
import math
from pydantic import BaseModel, ConfigDict


class Point2D(BaseModel):
    """Point in drawing space (x along the member, y up)."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    def midpoint(self, other: Point2D) -> Point2D:
        return Point2D(x=(self.x + other.x) / 2, y=(self.y + other.y) / 2)

    def mirrored_x(self) -> Point2D:
        """Reflect about the x = 0 axis (the splice centerline)."""
        return Point2D(x=-self.x, y=self.y)

    def mirrored_y(self, axis: float) -> Point2D:
        """Reflect about the horizontal line y = axis."""
        return Point2D(x=self.x, y=2 * axis - self.y)

    def shifted(self, dx: float = 0.0, dy: float = 0.0) -> Point2D:
        return Point2D(x=self.x + dx, y=self.y + dy)

    def __sub__(self, other: Point2D) -> Point2D:
        return Point2D(x=self.x - other.x, y=self.y - other.y)


def pt(x: float, y: float) -> Point2D:
    return Point2D(x=x, y=y)


class Line(BaseModel):
    start: Point2D
    end: Point2D
    layer: str

    @property
    def is_vertical(self) -> bool:
        return math.isclose(self.start.x, self.end.x)


class Circle(BaseModel):
    center: Point2D
    radius: float
    layer: str


class Cross(BaseModel):
    """Bolt marker: two perpendicular segments of length `size` through `center`."""
    center: Point2D
    size: float
    layer: str

    def segments(self) -> list[tuple[Point2D, Point2D]]:
        half = self.size / 2
        c = self.center
        return [
            (c.shifted(dx=-half), c.shifted(dx=half)),
            (c.shifted(dy=-half), c.shifted(dy=half)),
        ]


class OrdinateDimension(BaseModel):
    """
    Dimension between two reference points.

    `base_point` is the datum the measurement is taken from,
    `text_anchor` is where the leader ends and the text sits.
    """
    base_point: Point2D
    ref1: Point2D
    ref2: Point2D
    text_anchor: Point2D
    rotation: float   # Text rotation in degrees
    style: str
    layer: str

    @property
    def is_vertical(self) -> bool:
        return math.isclose(self.ref1.x, self.ref2.x)
