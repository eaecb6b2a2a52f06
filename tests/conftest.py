"""Pytest configuration and fixtures."""

import pytest
from fllscorer.core.config import ScorerConfig
from fllscorer.core.mission_state import INITIAL_MISSIONS_STATE, MissionState


@pytest.fixture
def scorer_config():
    """Create a test scorer configuration."""
    return ScorerConfig(
        verbose=False,
        save_logs=False,
        strict=False,
    )


@pytest.fixture
def initial_state():
    """Score sheet before the round starts."""
    return INITIAL_MISSIONS_STATE


@pytest.fixture
def perfect_run():
    """Every mission at its best legal outcome, no penalties."""
    return {
        "m01_broken_pipe_in_base": True,
        "m02_big_water_moved": True,
        "m03_pump_addition_moved": True,
        "m04_rain_came_out": True,
        "m05_filter_moved_north": True,
        "m06_big_water_ejected": True,
        "m07_fountain_layer_raised": True,
        "m08_manhole_covers_flipped": 2,
        "m08_both_covers_in_separate_targets": True,
        "m09_tripod_partly_in_target": False,
        "m09_tripod_completely_in_target": True,
        "m10_pipe_moved": True,
        "m11_pipe_partly_in_target": False,
        "m11_pipe_completely_in_target": True,
        "m12_sludge_touching_wood": True,
        "m13_flower_raised": True,
        "m13_rain_in_purple_part": True,
        "m14_well_partly_in_target": False,
        "m14_well_completely_in_target": True,
        "m15_fire_dropped": True,
        "m16_rain_in_target": True,
        "m16_big_water_in_target": 1,
        "m16_big_water_stacked": True,
        "m17_slingshot_in_target": True,
        "m17_dirty_water_and_rain_in_target": True,
        "m18_water_obviously_blue": True,
        "penalties": 0,
    }


@pytest.fixture
def messy_sheet():
    """Score sheet that trips every warning."""
    return MissionState(
        m08_manhole_covers_flipped=3,
        m08_both_covers_in_separate_targets=True,
        m09_tripod_partly_in_target=True,
        m09_tripod_completely_in_target=True,
        m11_pipe_partly_in_target=True,
        m11_pipe_completely_in_target=True,
        m13_rain_in_purple_part=True,
        m14_well_partly_in_target=True,
        m14_well_completely_in_target=True,
        m16_big_water_stacked=True,
        m17_dirty_water_and_rain_in_target=True,
        penalties=7,
    )
