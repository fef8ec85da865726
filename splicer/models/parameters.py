"""Drafting parameters."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field


class DraftingParams(BaseModel):
    """Fixed drafting conventions. Defaults match the shop standard (mm)."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    web_gap: float = Field(default=10.0, gt=0)            # Gap between spliced members
    margin: float = Field(default=1000.0, gt=0)           # Extent of the member outline
    edge_distance: float = Field(default=40.0, gt=0)      # Member end to first bolt
    standard_pitch: float = Field(default=60.0, gt=0)     # Flange bolt pitch
    staggered_pitch: float = Field(default=45.0, gt=0)    # Flange bolt pitch, staggered
    web_column_spacing: float = Field(default=60.0, gt=0)
    tick_overhang: float = Field(default=20.0, ge=0)      # Flange bolt tick beyond plates
    hole_clearance: float = Field(default=1.0, ge=0)
    view_shift: float = Field(default=1000.0, gt=0)       # Cross-section band offset

    dimension_style: str = "mydim"
    dimension_text_height: float = Field(default=1000.0, gt=0)
    dimension_arrow_size: float = Field(default=500.0, gt=0)
    dimension_extension_offset: float = Field(default=2000.0, ge=0)
    dimension_offset: float = Field(default=5000.0, gt=0)  # Midpoint to text anchor

    def flange_pitch(self, is_staggered: bool) -> float:
        return self.staggered_pitch if is_staggered else self.standard_pitch

    @property
    def first_bolt_x(self) -> float:
        return self.web_gap / 2 + self.edge_distance

