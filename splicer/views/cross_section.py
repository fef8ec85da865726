"""Cross-section view — the flange bolt pattern across the section width.

Drawn in its own band, `view_shift` above the elevation view, so both
views can share one drawing without overlapping.
"""

from __future__ import annotations

from splicer.core.bolt_grid import bolt_grid, both_sides
from splicer.core.emitter import PrimitiveEmitter
from splicer.models import DrawingContext, Point2D, pt
from splicer.views.base import ViewBuilder


class CrossSectionView(ViewBuilder):
    """Flange width view: y runs across the flange, 0 to b, before the shift."""

    def get_id(self) -> str:
        return "view.cross_section"

    def get_name(self) -> str:
        return "Cross-Section View"

    def build(self, context: DrawingContext, emitter: PrimitiveEmitter) -> None:
        self._write_base(context, emitter)
        self._write_outer_plate(context, emitter)
        self._write_flange_bolts(context, emitter)
        self._write_dimensions(context, emitter)

    def _write_base(self, context: DrawingContext, emitter: PrimitiveEmitter) -> None:
        b = context.joint.section.b
        layer = context.joint.layers.base
        shift = context.params.view_shift
        half_gap = context.params.web_gap / 2
        margin = context.params.margin

        # Flange edges, from the margin in to the gap on each side
        for y in (shift, b + shift):
            emitter.line(pt(-margin, y), pt(-half_gap, y), layer)
        for y in (shift, b + shift):
            emitter.line(pt(margin, y), pt(half_gap, y), layer)

        emitter.line(pt(half_gap, shift), pt(half_gap, b + shift), layer)
        emitter.line(pt(-half_gap, shift), pt(-half_gap, b + shift), layer)

    def _write_outer_plate(self, context: DrawingContext, emitter: PrimitiveEmitter) -> None:
        b = context.joint.section.b
        l = context.joint.flange.outer_plate.l
        shift = context.params.view_shift

        emitter.rectangle(-l / 2, shift, l / 2, b + shift, context.joint.layers.plate)

    def first_row_offset(self, context: DrawingContext) -> float:
        """
        y0: distance from the flange edge to the outermost bolt row.

        The rows are symmetric about the web: g1 between the two inner
        rows, g2 between successive rows outward on each side.
        """
        b = context.joint.section.b
        gauge = context.joint.flange.gauge
        mf = context.joint.flange.bolt.mf
        return (b - gauge.g1 - gauge.g2 * (mf - 2)) / 2

    def flange_bolt_centers(self, context: DrawingContext) -> list[Point2D]:
        """
        Flange bolt centers on the positive side, unshifted.

        The lower half of the flange comes first, column by column,
        followed by its mirror image about y = b/2.
        """
        joint = context.joint
        params = context.params
        bolts = joint.flange.bolt
        g2 = joint.flange.gauge.g2

        rows_per_half = bolts.mf // 2
        y0 = self.first_row_offset(context)
        lower = bolt_grid(
            x_start=params.first_bolt_x,
            column_spacing=params.flange_pitch(bolts.is_staggered),
            row_pitch=g2,
            rows=rows_per_half,
            columns=bolts.nf,
            center_y=y0 + g2 * (rows_per_half - 1) / 2,
            stagger=g2 if bolts.is_staggered else 0.0,
        )
        upper = [p.mirrored_y(joint.section.b / 2) for p in lower]
        return lower + upper

    def _write_flange_bolts(self, context: DrawingContext, emitter: PrimitiveEmitter) -> None:
        joint = context.joint
        shift = context.params.view_shift
        radius = joint.bolt.hole_radius(context.params.hole_clearance)

        for center in both_sides(self.flange_bolt_centers(context)):
            at = center.shifted(dy=shift)
            emitter.circle(at, radius, joint.layers.plate)
            emitter.cross(at, joint.bolt.diameter, joint.layers.bolt)

    def _write_dimensions(self, context: DrawingContext, emitter: PrimitiveEmitter) -> None:
        params = context.params
        shift = params.view_shift
        half_gap = params.web_gap / 2
        layer = context.joint.layers.base

        emitter.dimension(
            pt(-half_gap, shift), pt(half_gap, shift),
            params.dimension_offset, params.dimension_style, layer,
        )

        bolts = context.joint.flange.bolt
        if bolts.nf == 0 or bolts.mf == 0:
            return
        # Edge distance of the first bolt, measured from the flange edge
        x0 = params.first_bolt_x
        emitter.dimension(
            pt(x0, shift), pt(x0, shift + self.first_row_offset(context)),
            params.dimension_offset, params.dimension_style, layer,
        )
