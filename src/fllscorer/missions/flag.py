"""Single-flag missions: done or not done."""

from ..core.enums import MissionField
from ..core.mission_state import MissionState
from .base import BaseMission, MissionResult


class FlagMission(BaseMission):
    """Fixed points when the mission flag is set."""

    def __init__(self, group: str, mission_field: MissionField, points: int):
        super().__init__(group)
        self.field = mission_field
        self.points = points

    def evaluate(self, state: MissionState) -> MissionResult:
        if state.flag(self.field):
            return MissionResult(points=self.points)
        return MissionResult()

    def get_description(self) -> str:
        return f"{self.field.value}: {self.points} points"
