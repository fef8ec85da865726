"""Abstract base class for all view builders.

Every view of the splice drawing implements this interface. Views are:
- Self-contained: each lays out one view of the joint
- Independent: no view reads another's output, they share only the
  coordinate convention and the layer names
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from splicer.core.emitter import PrimitiveEmitter
from splicer.models.context import DrawingContext


class ViewBuilder(ABC):
    """
    Base class for all view builders.

    Subclasses implement `build()`. The generator calls `build()` on each
    view in draw order, with a fresh emitter per view.
    """

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this view (e.g., 'view.elevation')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'Elevation View')."""
        ...

    @abstractmethod
    def build(self, context: DrawingContext, emitter: PrimitiveEmitter) -> None:
        """
        Emit the view's primitives.

        The context is read-only; every primitive goes through the emitter.
        """
        ...
