"""Referee-facing text for score sheets and warnings."""

from typing import List

from ..core.enums import WarningCode
from ..core.scoring import ScoreResult
from ..missions import MISSION_NAMES, MISSION_TABLE

# What the referee should re-check for each warning
WARNING_MESSAGES = {
    WarningCode.M08_MAX_VALUE_EXCEEDED: "M08: more than two manhole covers flipped",
    WarningCode.M08_BONUS_REQUIREMENTS_NOT_MET: (
        "M08: covers-in-targets bonus needs both covers flipped"
    ),
    WarningCode.M09_CANNOT_SCORE_BOTH: "M09: tripod cannot be both partly and completely in target",
    WarningCode.M11_CANNOT_SCORE_BOTH: "M11: pipe cannot be both partly and completely in target",
    WarningCode.M13_BONUS_REQUIREMENTS_NOT_MET: "M13: rain bonus needs the flower raised",
    WarningCode.M14_CANNOT_SCORE_BOTH: "M14: well cannot be both partly and completely in target",
    WarningCode.M16_BONUS_REQUIREMENTS_NOT_MET: (
        "M16: stacked bonus needs at least one big water in target"
    ),
    WarningCode.M17_BONUS_REQUIREMENTS_NOT_MET: (
        "M17: dirty water bonus needs the slingshot in target"
    ),
    WarningCode.TOO_MANY_PENALTIES: "Penalties: more than six penalties recorded",
}


def describe_warning(warning: WarningCode) -> str:
    """Get the referee message for a warning.

    Example:
        >>> describe_warning(WarningCode.TOO_MANY_PENALTIES)
        'Penalties: more than six penalties recorded'
    """
    return WARNING_MESSAGES.get(warning, warning.value)


def format_points(points: int) -> str:
    """Signed points, e.g. ``+20`` or ``-35``."""
    return f"{points:+d}"


def format_score_sheet(result: ScoreResult) -> str:
    """Render a score result as plain text for the referee table."""
    lines: List[str] = []

    for group, points in result.breakdown.items():
        name = MISSION_NAMES.get(group, group)
        label = group if group == name else f"{group} {name}"
        lines.append(f"  {label:<24}{format_points(points):>6}")

    if not lines:
        lines.append("  (no missions scored)")

    lines.append(f"  {'TOTAL':<24}{result.score:>6}")

    if result.warnings:
        lines.append("")
        lines.append("Warnings:")
        for warning in result.warnings:
            lines.append(f"  ! {describe_warning(warning)}")

    return "\n".join(lines)


def format_rules() -> str:
    """List every scoring rule in evaluation order, grouped by mission."""
    lines: List[str] = []
    current_group = None

    for mission in MISSION_TABLE:
        if mission.group != current_group:
            current_group = mission.group
            name = MISSION_NAMES.get(current_group, current_group)
            lines.append(current_group if current_group == name else f"{current_group} {name}")
        lines.append(f"  {mission.get_description()}")

    return "\n".join(lines)
