"""Drawing context — the inputs shared by every view builder."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field

from .joint import JointSpec
from .parameters import DraftingParams


class DrawingContext(BaseModel):
    """
    Holds the read-only inputs of a single drawing pass.

    The generator creates one context per run and hands it to each
    view builder in turn. Builders only read from it.
    """
    model_config = ConfigDict(frozen=True)

    joint: JointSpec
    params: DraftingParams = Field(default_factory=DraftingParams)
