"""Shared typed models.

This module defines immutable data models passed between the source,
snapshot, and tool layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

ColumnData = dict[str, Any]


@dataclass(frozen=True)
class Snapshot:
    """Point-in-time copy of one data source's columns.

    Attributes:
        source_name: Name of the source the columns were copied from.
        columns: Column mapping, independent of the live source data.
        depth: One-based stack position the snapshot was pushed at.
    """

    source_name: str
    columns: Mapping[str, Any]
    depth: int


@dataclass(frozen=True)
class ToolDescriptor:
    """Host-facing presentation details for one toolbar tool.

    Attributes:
        type_name: Registered tool type identifier.
        tool_name: Display name shown by the host toolbar.
        icon: Host icon class identifier.
        source_names: Names of the configured data sources.
    """

    type_name: str
    tool_name: str
    icon: str
    source_names: tuple[str, ...]


@dataclass(frozen=True)
class SourceFailure:
    """One data source that raised during a tool action.

    Attributes:
        source_name: Name of the failing source.
        error: Exception raised while processing the source.
    """

    source_name: str
    error: Exception
