"""High-level drawing service — facade for the CLI and the API layer."""

from __future__ import annotations
import logging
from pathlib import Path
from collections.abc import Sequence

from splicer.config import DrawingInput, load_input
from splicer.models import DrawingSummary
from splicer.core.generator import DrawingGenerator
from splicer.sinks.base import DrawingSink
from splicer.sinks.dxf import DxfSink
from splicer.views.base import ViewBuilder


logger = logging.getLogger(__name__)


class DrawingService:
    """Loads input, delegates to the generator, persists output."""

    def __init__(self, views: Sequence[ViewBuilder] | None = None) -> None:
        self.generator = DrawingGenerator(views)

    def render(self, drawing_input: DrawingInput, sink: DrawingSink) -> DrawingSummary:
        """Draw both views into `sink`. Does not save."""
        return self.generator.generate(drawing_input.joint, sink, drawing_input.params)

    def render_file(self, input_path: str | Path, output_path: str | Path) -> DrawingSummary:
        """Load a joint file and write its DXF drawing. Any failure aborts the run."""
        drawing_input = load_input(input_path)
        sink = DxfSink()
        summary = self.render(drawing_input, sink)
        sink.save(output_path)
        logger.info(f"Drawing written to {output_path} ({summary.totals.total} primitives)")
        return summary

    def list_views(self) -> list[dict[str, str]]:
        return [{"id": v.get_id(), "name": v.get_name()} for v in self.generator.views]
