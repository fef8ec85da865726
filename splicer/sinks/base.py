"""Abstract drawing sink.

A sink accepts layer and dimension-style declarations plus line, circle
and dimension primitives, and persists them. View builders only ever
talk to a sink through this interface, so any sink can stand in for
another (DXF file, in-memory recorder, ...).

Sinks raise SinkError when they cannot accept a primitive or cannot
save. Callers never catch it.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from pathlib import Path

from splicer.models import Point2D


class DrawingSink(ABC):

    @abstractmethod
    def declare_layer(self, name: str, color: int) -> None:
        """Create a layer with an ACI color index. Repeating a name is allowed."""
        ...

    @abstractmethod
    def declare_dimension_style(
        self,
        name: str,
        text_height: float,
        arrow_size: float,
        extension_offset: float,
    ) -> None:
        ...

    @abstractmethod
    def add_line(self, start: Point2D, end: Point2D, layer: str) -> None:
        ...

    @abstractmethod
    def add_circle(self, center: Point2D, radius: float, layer: str) -> None:
        ...

    @abstractmethod
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
        ...

    @abstractmethod
    def save(self, path: str | Path) -> None:
        """Persist the drawing. Raises SinkError on failure."""
        ...
