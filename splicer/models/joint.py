"""Joint description models — section, bolts, flange and web splices."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field


DEFAULT_BASE_LAYER = "S母材"
DEFAULT_BOLT_LAYER = "Sボルト"
DEFAULT_PLATE_LAYER = "Sプレート"

DEFAULT_G2 = 40.0


class _JointModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class Section(_JointModel):
    """H-section dimensions."""
    h: float = Field(gt=0)   # Overall depth
    b: float = Field(gt=0)   # Flange width
    tw: float = Field(gt=0)  # Web thickness
    tf: float = Field(gt=0)  # Flange thickness


class Bolt(_JointModel):
    diameter: float = Field(gt=0)

    def hole_radius(self, clearance: float = 1.0) -> float:
        return self.diameter / 2 + clearance


class FlangeBolt(_JointModel):
    nf: int = Field(ge=0)    # Bolt columns along the member, per side
    mf: int = Field(ge=0)    # Bolt rows across the flange width
    is_staggered: bool = False


class Gauge(_JointModel):
    g1: float = Field(gt=0)               # Center gauge, across the web
    g2: float = Field(default=DEFAULT_G2, gt=0)


class OuterPlate(_JointModel):
    t: float = Field(gt=0)
    l: float = Field(gt=0)


class InnerPlate(_JointModel):
    t: float = Field(gt=0)
    b: float = Field(gt=0)


class Flange(_JointModel):
    bolt: FlangeBolt
    gauge: Gauge
    outer_plate: OuterPlate
    inner_plate: InnerPlate


class WebBolt(_JointModel):
    mw: int = Field(ge=0)    # Rows, up the web
    nw: int = Field(ge=0)    # Columns along the member, per side
    pc: float = Field(gt=0)  # Row pitch


class WebPlate(_JointModel):
    t: float = Field(gt=0)
    b: float = Field(gt=0)
    l: float = Field(gt=0)


class Web(_JointModel):
    bolt: WebBolt
    plate: WebPlate


class LayerNames(_JointModel):
    base: str = DEFAULT_BASE_LAYER
    bolt: str = DEFAULT_BOLT_LAYER
    plate: str = DEFAULT_PLATE_LAYER


class JointSpec(_JointModel):
    """Complete, read-only description of one H-section splice."""
    section: Section
    bolt: Bolt
    flange: Flange
    web: Web
    layer_name: LayerNames = Field(default_factory=LayerNames)

    @property
    def layers(self) -> LayerNames:
        return self.layer_name
