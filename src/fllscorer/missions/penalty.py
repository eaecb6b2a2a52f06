"""Referee penalties."""

from ..core.enums import MissionField, WarningCode
from ..core.mission_state import MissionState
from .base import BaseMission, MissionResult


class PenaltyMission(BaseMission):
    """Deduction per penalty incurred.

    The deduction applies whenever the field is recorded, including an
    explicit ``0``. Going over ``maximum`` is warned, never clamped.
    """

    def __init__(
        self,
        group: str,
        mission_field: MissionField,
        cost_each: int,
        maximum: int,
        max_warning: WarningCode,
    ):
        super().__init__(group)
        self.field = mission_field
        self.cost_each = cost_each
        self.maximum = maximum
        self.max_warning = max_warning

    def evaluate(self, state: MissionState) -> MissionResult:
        penalties = state.count(self.field)

        if penalties is None:
            return MissionResult()

        warning = self.max_warning if penalties > self.maximum else None
        return MissionResult(points=penalties * -self.cost_each, warning=warning)

    def get_description(self) -> str:
        return f"{self.field.value}: -{self.cost_each} points each (max {self.maximum})"
