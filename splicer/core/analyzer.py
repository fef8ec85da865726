"""Joint analysis — cross-field geometry checks run before drafting."""

from __future__ import annotations
import logging

from splicer.errors import GeometryContractViolation
from splicer.models import JointSpec, DraftingParams


logger = logging.getLogger(__name__)


class JointAnalyzer:
    """
    Checks that a joint can be drawn.

    Single-field ranges (positive lengths, non-negative counts) are
    enforced by the models. This pass covers relations between fields.
    """

    def check(self, joint: JointSpec, params: DraftingParams | None = None) -> None:
        """Raise GeometryContractViolation listing every problem found."""
        problems = self.find_problems(joint, params or DraftingParams())
        if problems:
            logger.debug(f"Joint rejected: {problems}")
            raise GeometryContractViolation(problems)

    def find_problems(self, joint: JointSpec, params: DraftingParams) -> list[str]:
        problems: list[str] = []
        sec = joint.section
        flange = joint.flange
        web = joint.web

        if sec.h <= 2 * sec.tf:
            problems.append(
                f"section depth h={sec.h} must exceed twice the flange thickness ({2 * sec.tf})"
            )
        if sec.tw >= sec.b:
            problems.append(f"web thickness tw={sec.tw} must be less than flange width b={sec.b}")

        # Inner plates sit inside the flanges and must not meet
        if 2 * (sec.tf + flange.inner_plate.t) >= sec.h:
            problems.append(
                f"inner plates (t={flange.inner_plate.t}) do not fit inside depth h={sec.h}"
            )

        clear_web = sec.h - 2 * sec.tf
        if web.plate.b > clear_web:
            problems.append(
                f"web plate width b={web.plate.b} exceeds the clear web depth {clear_web}"
            )

        if flange.bolt.mf % 2 != 0:
            problems.append(
                f"flange bolt rows mf={flange.bolt.mf} must split evenly about the web"
            )
        elif flange.bolt.mf > 0:
            gauge = flange.gauge
            rows_per_half = flange.bolt.mf // 2
            spread = gauge.g1 + gauge.g2 * (flange.bolt.mf - 2)
            y0 = (sec.b - spread) / 2
            if y0 <= 0:
                problems.append(
                    f"flange bolt gauges span {spread}, wider than the flange b={sec.b}"
                )
            elif flange.bolt.is_staggered:
                # Odd columns shift g2 toward the web; they must stay on their own half
                inner = y0 + gauge.g2 * (rows_per_half - 1) + gauge.g2
                if inner >= sec.b / 2:
                    problems.append(
                        f"staggered bolt rows reach y={inner}, across the flange centerline {sec.b / 2}"
                    )

        web_span = web.bolt.pc * max(web.bolt.mw - 1, 0)
        if web.bolt.mw > 0 and web_span >= web.plate.b:
            problems.append(
                f"web bolt rows span {web_span}, wider than the web plate b={web.plate.b}"
            )

        return problems
