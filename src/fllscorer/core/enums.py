"""Enumerations for mission fields and scoring warnings."""

from enum import Enum


class FieldKind(Enum):
    """How a mission field is recorded on the score sheet."""

    BOOLEAN = "boolean"
    COUNT = "count"


class MissionField(Enum):
    """Mission fields of the 2017 Hydro Dynamics robot game.

    Values are the keys used in mission-state mappings.
    """

    M01_BROKEN_PIPE_IN_BASE = "m01_broken_pipe_in_base"
    M02_BIG_WATER_MOVED = "m02_big_water_moved"
    M03_PUMP_ADDITION_MOVED = "m03_pump_addition_moved"
    M04_RAIN_CAME_OUT = "m04_rain_came_out"
    M05_FILTER_MOVED_NORTH = "m05_filter_moved_north"
    M06_BIG_WATER_EJECTED = "m06_big_water_ejected"
    M07_FOUNTAIN_LAYER_RAISED = "m07_fountain_layer_raised"
    M08_MANHOLE_COVERS_FLIPPED = "m08_manhole_covers_flipped"
    M08_BOTH_COVERS_IN_SEPARATE_TARGETS = "m08_both_covers_in_separate_targets"
    M09_TRIPOD_PARTLY_IN_TARGET = "m09_tripod_partly_in_target"
    M09_TRIPOD_COMPLETELY_IN_TARGET = "m09_tripod_completely_in_target"
    M10_PIPE_MOVED = "m10_pipe_moved"
    M11_PIPE_PARTLY_IN_TARGET = "m11_pipe_partly_in_target"
    M11_PIPE_COMPLETELY_IN_TARGET = "m11_pipe_completely_in_target"
    M12_SLUDGE_TOUCHING_WOOD = "m12_sludge_touching_wood"
    M13_FLOWER_RAISED = "m13_flower_raised"
    M13_RAIN_IN_PURPLE_PART = "m13_rain_in_purple_part"
    M14_WELL_PARTLY_IN_TARGET = "m14_well_partly_in_target"
    M14_WELL_COMPLETELY_IN_TARGET = "m14_well_completely_in_target"
    M15_FIRE_DROPPED = "m15_fire_dropped"
    M16_RAIN_IN_TARGET = "m16_rain_in_target"
    M16_BIG_WATER_IN_TARGET = "m16_big_water_in_target"
    M16_BIG_WATER_STACKED = "m16_big_water_stacked"
    M17_SLINGSHOT_IN_TARGET = "m17_slingshot_in_target"
    M17_DIRTY_WATER_AND_RAIN_IN_TARGET = "m17_dirty_water_and_rain_in_target"
    M18_WATER_OBVIOUSLY_BLUE = "m18_water_obviously_blue"
    PENALTIES = "penalties"

    @property
    def kind(self) -> FieldKind:
        """Whether the field holds a flag or a count."""
        if self in COUNT_FIELDS:
            return FieldKind.COUNT
        return FieldKind.BOOLEAN


COUNT_FIELDS = frozenset(
    {
        MissionField.M08_MANHOLE_COVERS_FLIPPED,
        MissionField.M16_BIG_WATER_IN_TARGET,
        MissionField.PENALTIES,
    }
)


class WarningCode(Enum):
    """Inconsistencies detected on a score sheet.

    Warnings never change the score; they are for the referee to review.
    """

    M08_MAX_VALUE_EXCEEDED = "m08_max_value_exceeded"
    M08_BONUS_REQUIREMENTS_NOT_MET = "m08_bonus_requirements_not_met"
    M09_CANNOT_SCORE_BOTH = "m09_cannot_score_both"
    M11_CANNOT_SCORE_BOTH = "m11_cannot_score_both"
    M13_BONUS_REQUIREMENTS_NOT_MET = "m13_bonus_requirements_not_met"
    M14_CANNOT_SCORE_BOTH = "m14_cannot_score_both"
    M16_BONUS_REQUIREMENTS_NOT_MET = "m16_bonus_requirements_not_met"
    M17_BONUS_REQUIREMENTS_NOT_MET = "m17_bonus_requirements_not_met"
    TOO_MANY_PENALTIES = "too_many_penalties"
