"""Robot game score calculator.

``evaluate`` runs every rule of the mission table against a mission state
and collects the total score along with advisory warnings. It never raises
on content: missing fields count as not achieved, and anything suspicious
is reported as a warning rather than rejected.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple, Union

from ..missions import MISSION_TABLE
from .enums import WarningCode
from .mission_state import MissionState


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreResult:
    """Outcome of scoring one robot game round."""

    score: int
    warnings: Tuple[WarningCode, ...] = ()
    # group -> points, only groups that contributed; read-only view
    breakdown: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "warnings", tuple(self.warnings))
        object.__setattr__(self, "breakdown", MappingProxyType(dict(self.breakdown)))

    def __hash__(self) -> int:
        return hash((self.score, self.warnings, frozenset(self.breakdown.items())))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "score": self.score,
            "warnings": [warning.value for warning in self.warnings],
            "breakdown": dict(self.breakdown),
        }


def evaluate(missions: Union[MissionState, Mapping[str, Any]]) -> ScoreResult:
    """
    Score a robot game round.

    Args:
        missions: MissionState, or any mapping keyed by mission field name

    Returns:
        ScoreResult with the total score, warnings in rule order, and the
        per-group breakdown
    """
    if isinstance(missions, MissionState):
        state = missions
    else:
        state = MissionState.from_mapping(missions)

    score = 0
    warnings = []
    breakdown: Dict[str, int] = {}

    for mission in MISSION_TABLE:
        result = mission.evaluate(state)

        if result.points:
            score += result.points
            breakdown[mission.group] = breakdown.get(mission.group, 0) + result.points

        if result.warning is not None:
            logger.debug(f"{mission.group}: {result.warning.value}")
            warnings.append(result.warning)

    return ScoreResult(score=score, warnings=tuple(warnings), breakdown=breakdown)


def get_score(missions: Union[MissionState, Mapping[str, Any]]) -> int:
    """Total score only."""
    return evaluate(missions).score


def get_warnings(missions: Union[MissionState, Mapping[str, Any]]) -> Tuple[WarningCode, ...]:
    """Warnings only, in rule order."""
    return evaluate(missions).warnings
