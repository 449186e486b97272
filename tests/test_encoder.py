import pytest

from promatch.config import FEATURE_VECTOR_LENGTH, FOOT_OPTIONS, POSITION_OPTIONS
from promatch.features import encode_attributes, one_hot, scale_to_unit
from promatch.models import PlayerAttributes


FOOT_SLICE = slice(6, 9)
POSITION_SLICE = slice(9, 14)


def _attrs(**overrides) -> PlayerAttributes:
    data = {"height_cm": 180, "dominant_foot": "right", "position": "striker", "age": 22}
    data.update(overrides)
    return PlayerAttributes(**data)


def test_feature_vector_layout_and_length():
    features = encode_attributes(_attrs())
    assert len(features) == FEATURE_VECTOR_LENGTH == 14
    assert features[0] == pytest.approx(0.6)
    assert features[1] == pytest.approx(0.5)
    assert features[2:6] == [0.6, 0.6, 0.6, 0.6]
    assert features[FOOT_SLICE] == [1.0, 0.0, 0.0]
    assert features[POSITION_SLICE] == [0.0, 1.0, 0.0, 0.0, 0.0]


@pytest.mark.parametrize(
    "height, expected",
    [(120, 0.0), (150, 0.0), (175, 0.5), (200, 1.0), (215, 1.0)],
)
def test_height_is_scaled_and_clamped(height, expected):
    assert encode_attributes(_attrs(height_cm=height))[0] == pytest.approx(expected)


@pytest.mark.parametrize(
    "age, expected",
    [(8, 0.0), (12, 0.0), (17, 0.25), (32, 1.0), (41, 1.0)],
)
def test_age_is_scaled_and_clamped(age, expected):
    assert encode_attributes(_attrs(age=age))[1] == pytest.approx(expected)


def test_skill_scores_pass_through_unchanged():
    features = encode_attributes(_attrs(pace=0.91, dribbling=0.2, passing=1.4, shooting=-0.1))
    assert features[2:6] == [0.91, 0.2, 1.4, -0.1]


@pytest.mark.parametrize("foot", FOOT_OPTIONS)
def test_known_foot_sets_exactly_one_flag(foot):
    flags = encode_attributes(_attrs(dominant_foot=foot))[FOOT_SLICE]
    assert sum(flags) == 1.0
    assert flags[FOOT_OPTIONS.index(foot)] == 1.0


@pytest.mark.parametrize("foot", ["Right", "both", "", None, 1, ["left"], {"foot": "right"}])
def test_unknown_foot_encodes_to_zeros(foot):
    assert encode_attributes(_attrs(dominant_foot=foot))[FOOT_SLICE] == [0.0, 0.0, 0.0]


@pytest.mark.parametrize("position", POSITION_OPTIONS)
def test_known_position_sets_exactly_one_flag(position):
    flags = encode_attributes(_attrs(position=position))[POSITION_SLICE]
    assert sum(flags) == 1.0
    assert flags[POSITION_OPTIONS.index(position)] == 1.0


@pytest.mark.parametrize("position", ["keeper", "STRIKER", None, 2, ["striker"]])
def test_unknown_position_encodes_to_zeros(position):
    assert encode_attributes(_attrs(position=position))[POSITION_SLICE] == [0.0] * 5


def test_helpers():
    assert scale_to_unit(5, 0, 10) == pytest.approx(0.5)
    assert scale_to_unit(-1, 0, 10) == 0.0
    assert one_hot("b", ("a", "b", "c")) == [0.0, 1.0, 0.0]
