import pytest
from pydantic import ValidationError

from splicer.config import load_input, parse_input
from splicer.errors import ConfigurationError, GeometryContractViolation
from splicer.core.analyzer import JointAnalyzer
from splicer.models import DraftingParams, JointSpec

from conftest import joint_data


def test_sample_file_loads(sample_path):
    drawing_input = load_input(sample_path)
    joint = drawing_input.joint
    assert joint.section.h == 400.0
    assert joint.flange.bolt.nf == 4
    assert joint.web.bolt.pc == 70.0
    assert drawing_input.params == DraftingParams()


def test_missing_optional_fields_take_defaults(tmp_path):
    path = tmp_path / "joint.toml"
    path.write_text(
        """
[section]
h = 400.0
b = 200.0
tw = 8.0
tf = 13.0

[bolt]
diameter = 20

[flange.bolt]
nf = 4
mf = 2
is_staggered = false

[flange.gauge]
g1 = 100.0

[flange.outer_plate]
t = 10.0
l = 300.0

[flange.inner_plate]
t = 10.0
b = 150.0

[web.bolt]
mw = 3
nw = 2
pc = 70.0

[web.plate]
t = 8.0
b = 150.0
l = 200.0
""",
        encoding="utf-8",
    )
    joint = load_input(path).joint
    assert joint.flange.gauge.g2 == 40.0
    assert (joint.layers.base, joint.layers.bolt, joint.layers.plate) == (
        "S母材", "Sボルト", "Sプレート",
    )


def test_drafting_table():
    data = joint_data()
    data["drafting"] = {"view_shift": 2000.0, "edge_distance": 35.0}
    drawing_input = parse_input(data)
    assert drawing_input.params.view_shift == 2000.0
    assert drawing_input.params.first_bolt_x == 40.0


def test_unreadable_file(tmp_path):
    with pytest.raises(ConfigurationError, match="Cannot read"):
        load_input(tmp_path / "missing.toml")


def test_malformed_toml(tmp_path):
    path = tmp_path / "broken.toml"
    path.write_text("[section\nh = 400", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="Malformed TOML"):
        load_input(path)


def test_missing_required_table():
    data = joint_data()
    del data["web"]
    with pytest.raises(ConfigurationError, match="web"):
        parse_input(data)


@pytest.mark.parametrize("section", [{"h": -400.0}, {"tf": 0.0}])
def test_non_positive_dimensions_rejected(section):
    with pytest.raises(ConfigurationError):
        parse_input(joint_data(section=section))


def test_negative_bolt_count_rejected():
    with pytest.raises(ConfigurationError, match="nf"):
        parse_input(joint_data(flange_bolt={"nf": -1}))


def test_unknown_key_rejected():
    with pytest.raises(ConfigurationError, match="gage"):
        parse_input(joint_data(flange_gauge={"gage": 3.0}))


def test_depth_must_exceed_twice_flange_thickness():
    with pytest.raises(GeometryContractViolation, match="twice the flange thickness"):
        parse_input(joint_data(section={"h": 26.0, "tf": 13.0}))


def test_joint_is_read_only(joint):
    with pytest.raises(ValidationError):
        joint.section.h = 500.0


@pytest.mark.parametrize("overrides, fragment", [
    ({"flange_bolt": {"mf": 3}}, "split evenly"),
    ({"web_plate": {"b": 380.0}}, "clear web depth"),
    ({"web_bolt": {"mw": 4, "pc": 70.0}}, "web bolt rows span"),
    ({"flange_gauge": {"g1": 200.0}}, "wider than the flange"),
    ({"flange_gauge": {"g1": 60.0}, "flange_bolt": {"is_staggered": True}}, "centerline"),
    ({"inner_plate": {"t": 190.0}}, "inner plates"),
])
def test_analyzer_problems(overrides, fragment):
    joint = JointSpec.model_validate(joint_data(**overrides))
    problems = JointAnalyzer().find_problems(joint, DraftingParams())
    assert any(fragment in p for p in problems)


def test_reference_joint_has_no_problems(joint):
    assert JointAnalyzer().find_problems(joint, DraftingParams()) == []
