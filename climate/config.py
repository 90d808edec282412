"""
Runtime settings read from the environment (and a .env file, if loaded).
"""

import os
from dataclasses import dataclass

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class Settings:
    """
    Diagnostic settings. None of them change the aggregated results.

    Attributes:
        debug (bool): Log at DEBUG level (CLIMATE_DEBUG).
        report_malformed (bool): Log a warning for every malformed line
            (CLIMATE_REPORT_MALFORMED).
    """

    debug: bool = False
    report_malformed: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the current environment."""
        return cls(
            debug=_env_flag("CLIMATE_DEBUG", False),
            report_malformed=_env_flag("CLIMATE_REPORT_MALFORMED", True),
        )
