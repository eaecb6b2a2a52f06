"""Scorer configuration dataclass.

The rule table itself is fixed for the season; only how the scorer reports
its results is configurable.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class ScorerConfig:
    """Configuration for the command line scorer."""

    # ===========================================
    # LOGGING
    # ===========================================
    verbose: bool = False  # DEBUG level, shows every warning as it is raised
    save_logs: bool = False  # Also write a timestamped log file
    log_dir: str = "data/scores"

    # ===========================================
    # ACCEPTANCE POLICY
    # ===========================================
    # Warnings never change the score. With strict=True the CLI exits
    # non-zero when any warning was raised so the sheet gets re-checked.
    strict: bool = False

    @classmethod
    def from_env(cls) -> "ScorerConfig":
        """Load settings from the environment (and a .env file if present)."""
        load_dotenv()

        return cls(
            verbose=_env_flag("FLLSCORER_VERBOSE", cls.verbose),
            save_logs=_env_flag("FLLSCORER_SAVE_LOGS", cls.save_logs),
            log_dir=os.getenv("FLLSCORER_LOG_DIR", cls.log_dir),
            strict=_env_flag("FLLSCORER_STRICT", cls.strict),
        )
