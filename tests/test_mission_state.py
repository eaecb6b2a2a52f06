"""Tests for the mission state record."""

import dataclasses

import pytest
from fllscorer.core.enums import FieldKind, MissionField
from fllscorer.core.mission_state import (
    INITIAL_MISSIONS_STATE,
    MissionState,
    MissionStateError,
    load_mission_state,
)


def test_record_has_slot_per_field():
    """Test every mission field has a matching record slot."""
    slot_names = [f.name for f in dataclasses.fields(MissionState)]

    assert slot_names == [mission_field.value for mission_field in MissionField]
    assert len(slot_names) == 27


def test_count_fields():
    """Test which fields hold counts."""
    counts = {f for f in MissionField if f.kind == FieldKind.COUNT}

    assert counts == {
        MissionField.M08_MANHOLE_COVERS_FLIPPED,
        MissionField.M16_BIG_WATER_IN_TARGET,
        MissionField.PENALTIES,
    }


def test_initial_state_fully_populated():
    """Test the initial state has every field at its no-progress value."""
    values = INITIAL_MISSIONS_STATE.to_dict()

    assert len(values) == 27
    assert values["penalties"] == 0
    assert values["m08_manhole_covers_flipped"] == 0
    assert values["m01_broken_pipe_in_base"] is False


def test_initial_state_is_frozen():
    """Test the shared default cannot be modified."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        INITIAL_MISSIONS_STATE.penalties = 3


def test_absent_versus_zero():
    """Test an absent count reads as None, a recorded zero as 0."""
    absent = MissionState()
    zero = MissionState(penalties=0)

    assert absent.count(MissionField.PENALTIES) is None
    assert not absent.is_present(MissionField.PENALTIES)
    assert zero.count(MissionField.PENALTIES) == 0
    assert zero.is_present(MissionField.PENALTIES)


def test_flag_reader():
    """Test boolean reads use presence and truthiness."""
    state = MissionState(m01_broken_pipe_in_base=True, m02_big_water_moved=False)

    assert state.flag(MissionField.M01_BROKEN_PIPE_IN_BASE) is True
    assert state.flag(MissionField.M02_BIG_WATER_MOVED) is False
    assert state.flag(MissionField.M03_PUMP_ADDITION_MOVED) is False


def test_from_mapping_keeps_values_as_given():
    """Test values are stored raw and unknown keys dropped."""
    state = MissionState.from_mapping({
        "m08_manhole_covers_flipped": 5,
        "m13_flower_raised": True,
        "referee": "Sam",
    })

    assert state.m08_manhole_covers_flipped == 5
    assert state.to_dict() == {"m08_manhole_covers_flipped": 5, "m13_flower_raised": True}


def test_load_mission_state():
    """Test parsing a JSON score sheet."""
    state = load_mission_state('{"m01_broken_pipe_in_base": true, "penalties": 2}')

    assert state == MissionState(m01_broken_pipe_in_base=True, penalties=2)


@pytest.mark.parametrize("text", ["not json", "[1, 2]", '"m01"', "42"])
def test_load_mission_state_rejects_non_objects(text):
    """Test malformed sheets raise MissionStateError."""
    with pytest.raises(MissionStateError):
        load_mission_state(text)


def test_mission_state_error_is_value_error():
    """Test callers can catch loader errors as ValueError."""
    assert issubclass(MissionStateError, ValueError)


def test_count_reader_is_lenient():
    """Test count reads of bools and non-numbers."""
    assert MissionState(penalties=True).count(MissionField.PENALTIES) == 1
    assert MissionState(penalties="3").count(MissionField.PENALTIES) is None
    assert MissionState(m08_manhole_covers_flipped=3).count(MissionField.M08_MANHOLE_COVERS_FLIPPED) == 3


@pytest.mark.parametrize(
    "text",
    ['{"penalties": "1"}', '{"m08_manhole_covers_flipped": "2"}', '{"m16_big_water_in_target": [1]}'],
)
def test_load_mission_state_rejects_non_numeric_counts(text):
    """Test the loader refuses counts that are not numbers."""
    with pytest.raises(MissionStateError, match="must be a number"):
        load_mission_state(text)


def test_load_mission_state_accepts_boolean_count():
    """Test JSON booleans pass the loader's count check."""
    assert load_mission_state('{"penalties": false}').count(MissionField.PENALTIES) == 0
