"""
Input file loading.

A joint is described in a TOML file whose tables mirror JointSpec:

    [section]            h, b, tw, tf
    [bolt]               diameter
    [flange.bolt]        nf, mf, is_staggered
    [flange.gauge]       g1, g2 (optional, 40)
    [flange.outer_plate] t, l
    [flange.inner_plate] t, b
    [web.bolt]           mw, nw, pc
    [web.plate]          t, b, l
    [layer_name]         base, bolt, plate (all optional)

An optional [drafting] table overrides DraftingParams.
"""

from __future__ import annotations
import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from splicer.core.analyzer import JointAnalyzer
from splicer.errors import ConfigurationError
from splicer.models import JointSpec, DraftingParams


logger = logging.getLogger(__name__)

DRAFTING_TABLE = "drafting"


class DrawingInput(BaseModel):
    """Everything read from one input file."""
    joint: JointSpec
    params: DraftingParams = Field(default_factory=DraftingParams)


def _describe(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "<root>"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def parse_input(data: dict[str, Any]) -> DrawingInput:
    """Build and check a DrawingInput from already-parsed TOML data."""
    data = dict(data)
    drafting = data.pop(DRAFTING_TABLE, {})

    try:
        drawing_input = DrawingInput(
            joint=JointSpec.model_validate(data),
            params=DraftingParams.model_validate(drafting),
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid joint description: {_describe(e)}") from e

    JointAnalyzer().check(drawing_input.joint, drawing_input.params)
    return drawing_input


def load_input(path: str | Path) -> DrawingInput:
    """
    Read a joint description file.

    Raises ConfigurationError when the file cannot be read or does not
    match the schema, GeometryContractViolation when its dimensions are
    inconsistent.
    """
    path = Path(path)
    logger.info(f"Loading joint from: {path}")
    try:
        with open(path, "rb") as fh:
            data = tomllib.load(fh)
    except OSError as e:
        raise ConfigurationError(f"Cannot read '{path}': {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Malformed TOML in '{path}': {e}") from e

    drawing_input = parse_input(data)
    logger.debug(f"Joint loaded: {drawing_input.joint}")
    return drawing_input
