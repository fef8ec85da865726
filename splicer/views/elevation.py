"""Elevation view — the splice seen along the member.

Draws the H-section outline either side of the web gap, the outer and
inner flange splice plates, the flange bolts as ticks through the
flange, the web splice plate and the web bolts.
"""

from __future__ import annotations

from splicer.core.bolt_grid import bolt_grid, column_positions, both_sides
from splicer.core.emitter import PrimitiveEmitter
from splicer.models import DrawingContext, Point2D, pt
from splicer.views.base import ViewBuilder


class ElevationView(ViewBuilder):
    """Length-wise view of the splice, centered on the web gap at x = 0."""

    def get_id(self) -> str:
        return "view.elevation"

    def get_name(self) -> str:
        return "Elevation View"

    def build(self, context: DrawingContext, emitter: PrimitiveEmitter) -> None:
        self._write_base(context, emitter)
        self._write_outer_plate(context, emitter)
        self._write_inner_plate(context, emitter)
        self._write_flange_bolts(context, emitter)
        self._write_web_plate(context, emitter)
        self._write_web_bolts(context, emitter)

    def _write_base(self, context: DrawingContext, emitter: PrimitiveEmitter) -> None:
        sec = context.joint.section
        layer = context.joint.layers.base
        half_gap = context.params.web_gap / 2
        margin = context.params.margin

        # Member ends at the web gap
        emitter.line(pt(-half_gap, 0), pt(-half_gap, sec.h), layer)
        emitter.line(pt(half_gap, 0), pt(half_gap, sec.h), layer)

        # Flange faces, each split by the gap
        for y in (0.0, sec.tf, sec.h - sec.tf, sec.h):
            emitter.line(pt(-margin, y), pt(-half_gap, y), layer)
            emitter.line(pt(half_gap, y), pt(margin, y), layer)

    def _write_outer_plate(self, context: DrawingContext, emitter: PrimitiveEmitter) -> None:
        h = context.joint.section.h
        plate = context.joint.flange.outer_plate
        layer = context.joint.layers.plate
        half = plate.l / 2

        emitter.rectangle(-half, h, half, h + plate.t, layer)
        emitter.rectangle(-half, -plate.t, half, 0, layer)

    def _write_inner_plate(self, context: DrawingContext, emitter: PrimitiveEmitter) -> None:
        sec = context.joint.section
        t = context.joint.flange.inner_plate.t
        layer = context.joint.layers.plate
        # Inner plates run the full length of the outer plates
        half = context.joint.flange.outer_plate.l / 2

        emitter.rectangle(-half, sec.h - sec.tf - t, half, sec.h - sec.tf, layer)
        emitter.rectangle(-half, sec.tf, half, sec.tf + t, layer)

    def flange_bolt_columns(self, context: DrawingContext) -> list[float]:
        """x of the flange bolt columns on the positive side."""
        params = context.params
        bolts = context.joint.flange.bolt
        pitch = params.flange_pitch(bolts.is_staggered)
        return column_positions(params.first_bolt_x, pitch, bolts.nf)

    def _write_flange_bolts(self, context: DrawingContext, emitter: PrimitiveEmitter) -> None:
        sec = context.joint.section
        flange = context.joint.flange
        layer = context.joint.layers.bolt
        overhang = context.params.tick_overhang
        to = flange.outer_plate.t
        ti = flange.inner_plate.t

        bottom_low = -to - overhang
        bottom_high = sec.tf + ti + overhang
        top_high = sec.h + to + overhang
        top_low = sec.h - sec.tf - ti - overhang

        for x in self.flange_bolt_columns(context):
            for side in (x, -x):
                emitter.line(pt(side, bottom_low), pt(side, bottom_high), layer)
                emitter.line(pt(side, top_high), pt(side, top_low), layer)

    def _write_web_plate(self, context: DrawingContext, emitter: PrimitiveEmitter) -> None:
        h = context.joint.section.h
        plate = context.joint.web.plate
        layer = context.joint.layers.plate

        emitter.rectangle(
            -plate.l / 2, h / 2 - plate.b / 2,
            plate.l / 2, h / 2 + plate.b / 2,
            layer,
        )

    def web_bolt_centers(self, context: DrawingContext) -> list[Point2D]:
        """Web bolt centers on the positive side, column by column."""
        params = context.params
        bolts = context.joint.web.bolt
        return bolt_grid(
            x_start=params.first_bolt_x,
            column_spacing=params.web_column_spacing,
            row_pitch=bolts.pc,
            rows=bolts.mw,
            columns=bolts.nw,
            center_y=context.joint.section.h / 2,
        )

    def _write_web_bolts(self, context: DrawingContext, emitter: PrimitiveEmitter) -> None:
        joint = context.joint
        radius = joint.bolt.hole_radius(context.params.hole_clearance)

        for center in both_sides(self.web_bolt_centers(context)):
            emitter.circle(center, radius, joint.layers.plate)
            emitter.cross(center, joint.bolt.diameter, joint.layers.bolt)
