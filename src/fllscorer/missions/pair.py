"""Missions with a partial and a full score level."""

from ..core.enums import MissionField, WarningCode
from ..core.mission_state import MissionState
from .base import BaseMission, MissionResult


class PartialCompleteMission(BaseMission):
    """Partial/full achievement of the same model placement.

    Only one level can physically be true at a time. When both are recorded
    both values are still added and ``conflict_warning`` is raised.
    """

    def __init__(
        self,
        group: str,
        partial_field: MissionField,
        partial_points: int,
        complete_field: MissionField,
        complete_points: int,
        conflict_warning: WarningCode,
    ):
        super().__init__(group)
        self.partial_field = partial_field
        self.partial_points = partial_points
        self.complete_field = complete_field
        self.complete_points = complete_points
        self.conflict_warning = conflict_warning

    def evaluate(self, state: MissionState) -> MissionResult:
        partly = state.flag(self.partial_field)
        completely = state.flag(self.complete_field)

        points = 0
        if partly:
            points += self.partial_points
        if completely:
            points += self.complete_points

        warning = self.conflict_warning if partly and completely else None
        return MissionResult(points=points, warning=warning)

    def get_description(self) -> str:
        return (
            f"{self.partial_field.value}: {self.partial_points} points, "
            f"or {self.complete_field.value}: {self.complete_points} points"
        )
