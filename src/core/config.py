"""Runtime configuration model for earthsim-tools.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR, SUPPORTED_LOG_LEVELS
from core.errors import EarthsimConfigError


@dataclass(frozen=True)
class EarthsimConfig:
    """Validated runtime configuration.

    Attributes:
        log_level: Minimum level name for structured log events.
    """

    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "EarthsimConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            EarthsimConfigError: If environment values are invalid.
        """
        log_level_value = os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)
        return cls(log_level=_parse_log_level(log_level_value))


def _parse_log_level(raw_value: str) -> str:
    """Parse the log level environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Upper-cased level name.

    Raises:
        EarthsimConfigError: If value is not a known level name.
    """
    level_name = raw_value.strip().upper()
    if level_name not in SUPPORTED_LOG_LEVELS:
        raise EarthsimConfigError(
            f"Invalid {LOG_LEVEL_ENV_VAR} value: "
            f"expected one of {', '.join(SUPPORTED_LOG_LEVELS)}, got '{raw_value}'. "
            f"Set {LOG_LEVEL_ENV_VAR} to a standard logging level name."
        )
    return level_name
