"""Robot game scorer for the 2017 Hydro Dynamics season.

Typical use::

    from fllscorer import evaluate

    result = evaluate({"m01_broken_pipe_in_base": True, "penalties": 1})
    result.score      # 15
    result.warnings   # ()
"""

from .core.enums import FieldKind, MissionField, WarningCode
from .core.mission_state import (
    INITIAL_MISSIONS_STATE,
    MissionState,
    MissionStateError,
    load_mission_state,
)
from .core.scoring import ScoreResult, evaluate, get_score, get_warnings

__version__ = "0.1.0"

__all__ = [
    "FieldKind",
    "MissionField",
    "WarningCode",
    "MissionState",
    "MissionStateError",
    "INITIAL_MISSIONS_STATE",
    "load_mission_state",
    "ScoreResult",
    "evaluate",
    "get_score",
    "get_warnings",
]
