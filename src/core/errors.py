"""earthsim-tools exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class EarthsimError(Exception):
    """Base exception for all earthsim-tools failures."""


class EarthsimConfigError(EarthsimError):
    """Raised for invalid runtime configuration."""


class EarthsimSourceError(EarthsimError):
    """Raised for malformed column data sources."""


class EarthsimToolError(EarthsimError):
    """Raised for invalid toolbar tool configuration."""


class EarthsimSnapshotError(EarthsimError):
    """Raised when a tool action fails on one or more data sources."""

    def __init__(self, message: str, failed_sources: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.failed_sources = failed_sources
