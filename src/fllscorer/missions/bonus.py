"""Bonus missions that only score on top of a base achievement."""

from typing import Callable

from ..core.enums import MissionField, WarningCode
from ..core.mission_state import MissionState
from .base import BaseMission, MissionResult


def flag_set(mission_field: MissionField) -> Callable[[MissionState], bool]:
    """Prerequisite: the base mission flag is set."""

    def check(state: MissionState) -> bool:
        return state.flag(mission_field)

    return check


def count_at_least(mission_field: MissionField, minimum: int) -> Callable[[MissionState], bool]:
    """Prerequisite: the base count is present and at least ``minimum``."""

    def check(state: MissionState) -> bool:
        count = state.count(mission_field)
        return count is not None and count >= minimum

    return check


def count_equals(mission_field: MissionField, expected: int) -> Callable[[MissionState], bool]:
    """Prerequisite: the base count is present and exactly ``expected``."""

    def check(state: MissionState) -> bool:
        return state.count(mission_field) == expected

    return check


class BonusMission(BaseMission):
    """Bonus points contingent on a prerequisite.

    A bonus recorded without its prerequisite scores nothing and raises
    ``unmet_warning``.
    """

    def __init__(
        self,
        group: str,
        mission_field: MissionField,
        points: int,
        requirement: Callable[[MissionState], bool],
        unmet_warning: WarningCode,
        requirement_text: str = "",
    ):
        super().__init__(group)
        self.field = mission_field
        self.points = points
        self.requirement = requirement
        self.unmet_warning = unmet_warning
        self.requirement_text = requirement_text

    def evaluate(self, state: MissionState) -> MissionResult:
        if not state.flag(self.field):
            return MissionResult()

        if self.requirement(state):
            return MissionResult(points=self.points)

        return MissionResult(warning=self.unmet_warning)

    def get_description(self) -> str:
        description = f"{self.field.value}: {self.points} bonus points"
        if self.requirement_text:
            description += f" ({self.requirement_text})"
        return description
