import math

import pytest

from splicer.core.emitter import PrimitiveEmitter
from splicer.models import DrawingContext, JointSpec
from splicer.views.cross_section import CrossSectionView

from conftest import joint_data, make_context


BASE = "S母材"
PLATE = "Sプレート"
SHIFT = 1000.0


def build(context, sink) -> PrimitiveEmitter:
    emitter = PrimitiveEmitter(sink)
    CrossSectionView().build(context, emitter)
    return emitter


def test_reference_joint_bolt_rows(context):
    centers = CrossSectionView().flange_bolt_centers(context)
    assert len(centers) == 4 * 2  # nf * mf on the positive side
    assert sorted({p.y for p in centers}) == [50.0, 150.0]
    xs = sorted({p.x for p in centers})
    assert xs == [45.0, 105.0, 165.0, 225.0]


def test_circles_are_shifted_into_their_own_band(context, sink):
    build(context, sink)
    circles = sink.drawing.circles_on(PLATE)
    assert len(circles) == 16
    assert {c.center.y for c in circles} == {1050.0, 1150.0}
    assert all(c.center.y >= SHIFT for c in circles)


def test_outline_and_outer_plate(context, sink):
    emitter = build(context, sink)
    base = sink.drawing.lines_on(BASE)
    assert len(base) == 6
    assert {ln.start.y for ln in base if not ln.is_vertical} == {1000.0, 1200.0}

    plate = sink.drawing.lines_on(PLATE)
    assert len(plate) == 4
    assert {ln.start.x for ln in plate if ln.is_vertical} == {-150.0, 150.0}
    assert emitter.stats.lines == 10


def test_symmetric_about_both_axes_when_not_staggered(context, sink):
    build(context, sink)
    keys = {(c.center.x, c.center.y) for c in sink.drawing.circles}
    assert keys == {(-x, y) for x, y in keys}
    axis = SHIFT + context.joint.section.b / 2
    assert keys == {(x, 2 * axis - y) for x, y in keys}


def test_staggered_columns_use_tight_pitch_and_offset():
    context = make_context(flange_bolt={"is_staggered": True})
    centers = CrossSectionView().flange_bolt_centers(context)
    lower = centers[:4]

    assert [p.x for p in lower] == [45.0, 90.0, 135.0, 180.0]
    assert [p.y for p in lower] == [50.0, 90.0, 50.0, 90.0]
    g2 = context.joint.flange.gauge.g2
    assert math.isclose(lower[1].y - lower[0].y, g2)

    # Mirrored half: odd columns shift toward the web from the far edge
    upper = centers[4:]
    assert [p.x for p in upper] == [45.0, 90.0, 135.0, 180.0]
    assert [p.y for p in upper] == [150.0, 110.0, 150.0, 110.0]
    b = context.joint.section.b
    y0 = CrossSectionView().first_row_offset(context)
    assert math.isclose(upper[1].y, b - y0 - g2)


def test_g2_defaults_to_forty():
    data = joint_data(section={"b": 300.0}, flange_bolt={"mf": 4})
    del data["flange"]["gauge"]["g2"]
    context = DrawingContext(joint=JointSpec.model_validate(data))

    assert context.joint.flange.gauge.g2 == 40.0
    assert CrossSectionView().first_row_offset(context) == (300.0 - 100.0 - 40.0 * 2) / 2


def test_four_rows_across_wide_flange():
    context = make_context(
        section={"b": 300.0},
        flange_bolt={"nf": 2, "mf": 4},
    )
    view = CrossSectionView()
    assert view.first_row_offset(context) == 60.0

    centers = view.flange_bolt_centers(context)
    assert len(centers) == 2 * 4
    assert sorted({p.y for p in centers}) == [60.0, 100.0, 200.0, 240.0]


@pytest.mark.parametrize("nf, mf", [(0, 2), (4, 0)])
def test_no_flange_bolts(nf, mf, sink):
    context = make_context(flange_bolt={"nf": nf, "mf": mf})
    emitter = build(context, sink)
    assert emitter.stats.circles == 0
    assert emitter.stats.crosses == 0
    # Only the web gap is dimensioned when there is no first bolt
    assert emitter.stats.dimensions == 1


def test_dimension_pair(context, sink):
    build(context, sink)
    gap, edge = sink.drawing.dimensions

    assert (gap.ref1.x, gap.ref2.x) == (-5.0, 5.0)
    assert gap.rotation == 0.0
    assert (gap.text_anchor.x, gap.text_anchor.y) == (0.0, SHIFT + 5000.0)

    assert edge.ref1.x == edge.ref2.x == 45.0
    assert (edge.ref1.y, edge.ref2.y) == (SHIFT, SHIFT + 50.0)
    assert edge.rotation == 270.0
    assert (edge.text_anchor.x, edge.text_anchor.y) == (45.0 - 5000.0, SHIFT + 25.0)
    assert gap.style == edge.style == "mydim"
