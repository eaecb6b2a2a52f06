"""Repeatable missions scored per unit."""

from typing import Optional

from ..core.enums import MissionField, WarningCode
from ..core.mission_state import MissionState
from .base import BaseMission, MissionResult


class CountMission(BaseMission):
    """Points for each unit achieved.

    A count above the physical maximum is still scored in full; the excess
    only raises ``max_warning`` so the referee can double-check the sheet.
    """

    def __init__(
        self,
        group: str,
        mission_field: MissionField,
        points_each: int,
        maximum: Optional[int] = None,
        max_warning: Optional[WarningCode] = None,
    ):
        super().__init__(group)
        self.field = mission_field
        self.points_each = points_each
        self.maximum = maximum
        self.max_warning = max_warning

    def evaluate(self, state: MissionState) -> MissionResult:
        count = state.count(self.field)

        if count is None or count <= 0:
            return MissionResult()

        warning = None
        if self.maximum is not None and count > self.maximum:
            warning = self.max_warning

        return MissionResult(points=count * self.points_each, warning=warning)

    def get_description(self) -> str:
        description = f"{self.field.value}: {self.points_each} points each"
        if self.maximum is not None:
            description += f" (max {self.maximum})"
        return description
