"""Main drawing generator — orchestrates checks, layers and views."""

from __future__ import annotations
import logging
from collections.abc import Sequence

from splicer.models import (
    JointSpec, DraftingParams, DrawingContext, DrawingSummary, ViewSummary,
)
from splicer.core.analyzer import JointAnalyzer
from splicer.core.emitter import PrimitiveEmitter
from splicer.core.layers import declare_layers
from splicer.sinks.base import DrawingSink
from splicer.views.base import ViewBuilder
from splicer.views.cross_section import CrossSectionView
from splicer.views.elevation import ElevationView


logger = logging.getLogger(__name__)


def default_views() -> tuple[ViewBuilder, ...]:
    """The two views of a splice sheet in draw order: elevation, then the section band above it."""
    return (ElevationView(), CrossSectionView())


class DrawingGenerator:
    """
    Stateless drawing generator.

    Takes a joint + params, checks the geometry, declares layers, draws
    each view in turn into the sink, and returns a summary of what was
    drawn. Saving is left to the caller.
    """

    def __init__(self, views: Sequence[ViewBuilder] | None = None) -> None:
        self.views = tuple(views) if views is not None else default_views()
        self.analyzer = JointAnalyzer()

    def generate(
        self,
        joint: JointSpec,
        sink: DrawingSink,
        params: DraftingParams | None = None,
    ) -> DrawingSummary:
        if params is None:
            params = DraftingParams()

        # Nothing reaches the sink for a joint that cannot be drawn
        self.analyzer.check(joint, params)

        context = DrawingContext(joint=joint, params=params)
        layers = declare_layers(sink, joint.layers, params)

        views: list[ViewSummary] = []
        for view in self.views:
            emitter = PrimitiveEmitter(sink)
            view.build(context, emitter)
            logger.info(f"{view.get_name()}: {emitter.stats.total} primitives")
            views.append(ViewSummary(
                view_id=view.get_id(),
                name=view.get_name(),
                stats=emitter.stats,
            ))

        return DrawingSummary(views=views, layers=layers)
