"""Base mission rule class and result dataclass."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ..core.enums import WarningCode
from ..core.mission_state import MissionState


@dataclass(frozen=True)
class MissionResult:
    """Contribution of a single rule to the round score."""

    points: int = 0
    warning: Optional[WarningCode] = None


class BaseMission(ABC):
    """Abstract base class for all mission rules."""

    def __init__(self, group: str):
        """
        Initialize the rule.

        Args:
            group: Score sheet group the rule belongs to (e.g. "M08")
        """
        self.group = group

    @abstractmethod
    def evaluate(self, state: MissionState) -> MissionResult:
        """
        Score the rule against a mission state.

        Returns:
            MissionResult with the points earned and at most one warning
        """
        pass

    @abstractmethod
    def get_description(self) -> str:
        """
        Get rule description for the score sheet.

        Returns:
            String description of how the rule scores
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.group})"
