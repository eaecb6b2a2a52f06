"""Mission state record captured by the referee during a robot game round."""

import json
import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional, Union

from .enums import FieldKind, MissionField


logger = logging.getLogger(__name__)


class MissionStateError(ValueError):
    """Raised when a score sheet document cannot be read as a mission state."""


@dataclass(frozen=True)
class MissionState:
    """Sparse record of mission outcomes.

    Every slot is optional: ``None`` means the referee did not record the
    field, which is not the same thing as recording ``False`` or ``0``.
    Values are kept exactly as given; nothing is clamped or coerced.
    """

    m01_broken_pipe_in_base: Optional[bool] = None
    m02_big_water_moved: Optional[bool] = None
    m03_pump_addition_moved: Optional[bool] = None
    m04_rain_came_out: Optional[bool] = None
    m05_filter_moved_north: Optional[bool] = None
    m06_big_water_ejected: Optional[bool] = None
    m07_fountain_layer_raised: Optional[bool] = None
    m08_manhole_covers_flipped: Optional[int] = None
    m08_both_covers_in_separate_targets: Optional[bool] = None
    m09_tripod_partly_in_target: Optional[bool] = None
    m09_tripod_completely_in_target: Optional[bool] = None
    m10_pipe_moved: Optional[bool] = None
    m11_pipe_partly_in_target: Optional[bool] = None
    m11_pipe_completely_in_target: Optional[bool] = None
    m12_sludge_touching_wood: Optional[bool] = None
    m13_flower_raised: Optional[bool] = None
    m13_rain_in_purple_part: Optional[bool] = None
    m14_well_partly_in_target: Optional[bool] = None
    m14_well_completely_in_target: Optional[bool] = None
    m15_fire_dropped: Optional[bool] = None
    m16_rain_in_target: Optional[bool] = None
    m16_big_water_in_target: Optional[int] = None
    m16_big_water_stacked: Optional[bool] = None
    m17_slingshot_in_target: Optional[bool] = None
    m17_dirty_water_and_rain_in_target: Optional[bool] = None
    m18_water_obviously_blue: Optional[bool] = None
    penalties: Optional[int] = None

    @classmethod
    def from_mapping(cls, missions: Mapping[str, Any]) -> "MissionState":
        """
        Build a record from a loose mapping of mission keys.

        Args:
            missions: Mapping keyed by mission field name (e.g. a parsed
                score sheet). Unknown keys are ignored.

        Returns:
            MissionState with only the given fields present
        """
        values = {}
        for mission_field in MissionField:
            if mission_field.value in missions:
                values[mission_field.value] = missions[mission_field.value]

        ignored = set(missions) - set(values)
        if ignored:
            logger.debug(f"Ignoring unknown mission keys: {sorted(ignored, key=str)}")

        return cls(**values)

    @classmethod
    def initial(cls) -> "MissionState":
        """Record with every field present at its "no progress" value."""
        values = {}
        for mission_field in MissionField:
            if mission_field.kind == FieldKind.COUNT:
                values[mission_field.value] = 0
            else:
                values[mission_field.value] = False
        return cls(**values)

    def get(self, mission_field: MissionField) -> Optional[Union[bool, int]]:
        """Raw stored value, ``None`` when absent."""
        return getattr(self, mission_field.value)

    def is_present(self, mission_field: MissionField) -> bool:
        return self.get(mission_field) is not None

    def flag(self, mission_field: MissionField) -> bool:
        """Read a boolean mission: present and truthy."""
        value = self.get(mission_field)
        return value is not None and bool(value)

    def count(self, mission_field: MissionField) -> Optional[int]:
        """Read a numeric mission: the stored number, or ``None`` when absent.

        A value that is not a number reads as absent. ``True``/``False``
        count as 1/0.
        """
        value = self.get(mission_field)
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, (int, float)):
            return value
        if value is not None:
            logger.debug(f"Ignoring non-numeric {mission_field.value}: {value!r}")
        return None

    def to_dict(self) -> Dict[str, Union[bool, int]]:
        """Convert to a plain mapping holding only the present fields."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


# Baseline score sheet: scores exactly 0 with no warnings
INITIAL_MISSIONS_STATE = MissionState.initial()


def load_mission_state(text: str) -> MissionState:
    """
    Parse a JSON score sheet.

    Args:
        text: JSON document holding a single object of mission keys

    Returns:
        Parsed MissionState

    Raises:
        MissionStateError: If the document is not valid JSON, not an object,
            or holds a count that is not a number
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MissionStateError(f"Score sheet is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise MissionStateError(
            f"Score sheet must be a JSON object, got {type(data).__name__}"
        )

    state = MissionState.from_mapping(data)

    for mission_field in MissionField:
        if mission_field.kind != FieldKind.COUNT:
            continue
        value = state.get(mission_field)
        if value is not None and not isinstance(value, (int, float)):
            raise MissionStateError(
                f"{mission_field.value} must be a number, got {value!r}"
            )

    return state
