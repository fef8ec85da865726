"""Drawing output models — per-view and whole-drawing statistics."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel


class PrimitiveType(str, Enum):
    LINE = "line"
    CIRCLE = "circle"
    CROSS = "cross"
    DIMENSION = "dimension"


class DrawingStats(BaseModel):
    """Primitive counts emitted by one view (or a whole drawing)."""
    lines: int = 0        # Plain lines; cross arms are counted as crosses
    circles: int = 0
    crosses: int = 0
    dimensions: int = 0

    @property
    def total(self) -> int:
        return self.lines + self.circles + self.crosses + self.dimensions

    def record(self, kind: PrimitiveType) -> None:
        if kind == PrimitiveType.LINE:
            self.lines += 1
        elif kind == PrimitiveType.CIRCLE:
            self.circles += 1
        elif kind == PrimitiveType.CROSS:
            self.crosses += 1
        elif kind == PrimitiveType.DIMENSION:
            self.dimensions += 1

    def __add__(self, other: DrawingStats) -> DrawingStats:
        return DrawingStats(
            lines=self.lines + other.lines,
            circles=self.circles + other.circles,
            crosses=self.crosses + other.crosses,
            dimensions=self.dimensions + other.dimensions,
        )


class ViewSummary(BaseModel):
    view_id: str
    name: str
    stats: DrawingStats


class DrawingSummary(BaseModel):
    """The result of one drawing pass."""
    views: list[ViewSummary]
    layers: list[str]

    @property
    def totals(self) -> DrawingStats:
        total = DrawingStats()
        for view in self.views:
            total = total + view.stats
        return total

    def get_view(self, view_id: str) -> ViewSummary | None:
        for v in self.views:
            if v.view_id == view_id:
                return v
        return None
