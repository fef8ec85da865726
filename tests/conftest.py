"""Shared fixtures: the H-400x200 reference splice and a recording sink."""

from __future__ import annotations
import copy
from pathlib import Path

import pytest

from splicer.models import JointSpec, DrawingContext
from splicer.sinks.recording import RecordingSink


SAMPLES_DIR = Path(__file__).resolve().parent.parent / "samples"

REFERENCE_JOINT = {
    "section": {"h": 400.0, "b": 200.0, "tw": 8.0, "tf": 13.0},
    "bolt": {"diameter": 20},
    "flange": {
        "bolt": {"nf": 4, "mf": 2, "is_staggered": False},
        "gauge": {"g1": 100.0, "g2": 40.0},
        "outer_plate": {"t": 10.0, "l": 300.0},
        "inner_plate": {"t": 10.0, "b": 150.0},
    },
    "web": {
        "bolt": {"mw": 3, "nw": 2, "pc": 70.0},
        "plate": {"t": 8.0, "b": 150.0, "l": 200.0},
    },
}


TABLES = {
    "section": ("section",),
    "bolt": ("bolt",),
    "flange_bolt": ("flange", "bolt"),
    "flange_gauge": ("flange", "gauge"),
    "outer_plate": ("flange", "outer_plate"),
    "inner_plate": ("flange", "inner_plate"),
    "web_bolt": ("web", "bolt"),
    "web_plate": ("web", "plate"),
}


def joint_data(**overrides: dict) -> dict:
    """A deep copy of the reference joint with per-table overrides.

    joint_data(flange_bolt={"is_staggered": True}) updates flange.bolt.
    """
    data = copy.deepcopy(REFERENCE_JOINT)
    for key, values in overrides.items():
        target = data
        for part in TABLES[key]:
            target = target.setdefault(part, {})
        target.update(values)
    return data


def make_context(**overrides: dict) -> DrawingContext:
    return DrawingContext(joint=JointSpec.model_validate(joint_data(**overrides)))


@pytest.fixture
def joint() -> JointSpec:
    return JointSpec.model_validate(joint_data())


@pytest.fixture
def context(joint: JointSpec) -> DrawingContext:
    return DrawingContext(joint=joint)


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def sample_path() -> Path:
    return SAMPLES_DIR / "h400x200.toml"
