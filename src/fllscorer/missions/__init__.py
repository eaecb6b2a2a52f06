"""Mission rules for the 2017 Hydro Dynamics robot game.

Rules are evaluated in table order. The order never changes the total,
only the order in which warnings are reported.
"""

from ..core.enums import MissionField as F
from ..core.enums import WarningCode as W
from .base import BaseMission, MissionResult
from .bonus import BonusMission, count_at_least, count_equals, flag_set
from .count import CountMission
from .flag import FlagMission
from .pair import PartialCompleteMission
from .penalty import PenaltyMission

# Referee may give up to six penalties, -5 each
PENALTY_COST = 5
MAX_PENALTIES = 6

# Two manhole covers on the field
MAX_MANHOLE_COVERS = 2

# Full 2017 rule table
MISSION_TABLE = (
    FlagMission("M01", F.M01_BROKEN_PIPE_IN_BASE, 20),
    FlagMission("M02", F.M02_BIG_WATER_MOVED, 25),
    FlagMission("M03", F.M03_PUMP_ADDITION_MOVED, 20),
    FlagMission("M04", F.M04_RAIN_CAME_OUT, 20),
    FlagMission("M05", F.M05_FILTER_MOVED_NORTH, 30),
    FlagMission("M06", F.M06_BIG_WATER_EJECTED, 20),
    FlagMission("M07", F.M07_FOUNTAIN_LAYER_RAISED, 20),
    CountMission(
        "M08",
        F.M08_MANHOLE_COVERS_FLIPPED,
        points_each=15,
        maximum=MAX_MANHOLE_COVERS,
        max_warning=W.M08_MAX_VALUE_EXCEEDED,
    ),
    # Bonus needs the full 30 cover points, so exactly both covers
    BonusMission(
        "M08",
        F.M08_BOTH_COVERS_IN_SEPARATE_TARGETS,
        30,
        requirement=count_equals(F.M08_MANHOLE_COVERS_FLIPPED, MAX_MANHOLE_COVERS),
        unmet_warning=W.M08_BONUS_REQUIREMENTS_NOT_MET,
        requirement_text="both covers flipped",
    ),
    PartialCompleteMission(
        "M09",
        F.M09_TRIPOD_PARTLY_IN_TARGET,
        15,
        F.M09_TRIPOD_COMPLETELY_IN_TARGET,
        20,
        conflict_warning=W.M09_CANNOT_SCORE_BOTH,
    ),
    FlagMission("M10", F.M10_PIPE_MOVED, 20),
    PartialCompleteMission(
        "M11",
        F.M11_PIPE_PARTLY_IN_TARGET,
        15,
        F.M11_PIPE_COMPLETELY_IN_TARGET,
        20,
        conflict_warning=W.M11_CANNOT_SCORE_BOTH,
    ),
    FlagMission("M12", F.M12_SLUDGE_TOUCHING_WOOD, 30),
    FlagMission("M13", F.M13_FLOWER_RAISED, 30),
    BonusMission(
        "M13",
        F.M13_RAIN_IN_PURPLE_PART,
        30,
        requirement=flag_set(F.M13_FLOWER_RAISED),
        unmet_warning=W.M13_BONUS_REQUIREMENTS_NOT_MET,
        requirement_text="flower raised",
    ),
    PartialCompleteMission(
        "M14",
        F.M14_WELL_PARTLY_IN_TARGET,
        15,
        F.M14_WELL_COMPLETELY_IN_TARGET,
        25,
        conflict_warning=W.M14_CANNOT_SCORE_BOTH,
    ),
    FlagMission("M15", F.M15_FIRE_DROPPED, 25),
    FlagMission("M16", F.M16_RAIN_IN_TARGET, 10),
    CountMission("M16", F.M16_BIG_WATER_IN_TARGET, points_each=10),
    BonusMission(
        "M16",
        F.M16_BIG_WATER_STACKED,
        30,
        requirement=count_at_least(F.M16_BIG_WATER_IN_TARGET, 1),
        unmet_warning=W.M16_BONUS_REQUIREMENTS_NOT_MET,
        requirement_text="at least one big water in target",
    ),
    FlagMission("M17", F.M17_SLINGSHOT_IN_TARGET, 20),
    BonusMission(
        "M17",
        F.M17_DIRTY_WATER_AND_RAIN_IN_TARGET,
        15,
        requirement=flag_set(F.M17_SLINGSHOT_IN_TARGET),
        unmet_warning=W.M17_BONUS_REQUIREMENTS_NOT_MET,
        requirement_text="slingshot in target",
    ),
    FlagMission("M18", F.M18_WATER_OBVIOUSLY_BLUE, 25),
    PenaltyMission(
        "Penalties",
        F.PENALTIES,
        cost_each=PENALTY_COST,
        maximum=MAX_PENALTIES,
        max_warning=W.TOO_MANY_PENALTIES,
    ),
)

# Mission names for display
MISSION_NAMES = {
    "M01": "Pipe Removal",
    "M02": "Flow",
    "M03": "Pump Addition",
    "M04": "Rain",
    "M05": "Filter",
    "M06": "Water Treatment",
    "M07": "Fountain",
    "M08": "Manhole Covers",
    "M09": "Tripod",
    "M10": "Pipe Replacement",
    "M11": "Pipe Construction",
    "M12": "Sludge",
    "M13": "Flower",
    "M14": "Water Well",
    "M15": "Fire",
    "M16": "Water Collection",
    "M17": "Slingshot",
    "M18": "Faucet",
    "Penalties": "Penalties",
}

__all__ = [
    "BaseMission",
    "MissionResult",
    "FlagMission",
    "CountMission",
    "PartialCompleteMission",
    "BonusMission",
    "PenaltyMission",
    "flag_set",
    "count_at_least",
    "count_equals",
    "MISSION_TABLE",
    "MISSION_NAMES",
    "PENALTY_COST",
    "MAX_PENALTIES",
    "MAX_MANHOLE_COVERS",
]
