"""Public SDK surface for earthsim-tools.

This module provides a stable import path for host integrations.
It re-exports the data source, snapshot, and toolbar tool types.
"""

from __future__ import annotations

from core.config import EarthsimConfig
from core.errors import (
    EarthsimConfigError,
    EarthsimError,
    EarthsimSnapshotError,
    EarthsimSourceError,
    EarthsimToolError,
)
from core.logging_config import configure_logging
from core.types import Snapshot, ToolDescriptor
from snapshot.column_copy import copy_column, copy_columns, copy_value, is_array_like
from snapshot.snapshot_stack import SnapshotRegistry, SnapshotStack, default_registry
from sources.column_data_source import ColumnDataSource
from tools.action_tool import ActionTool
from tools.checkpoint_tool import CheckpointTool
from tools.clear_tool import ClearTool
from tools.registry import build_tool, supported_tool_types
from tools.restore_tool import RestoreTool

__all__ = [
    "ActionTool",
    "CheckpointTool",
    "ClearTool",
    "ColumnDataSource",
    "EarthsimConfig",
    "EarthsimConfigError",
    "EarthsimError",
    "EarthsimSnapshotError",
    "EarthsimSourceError",
    "EarthsimToolError",
    "RestoreTool",
    "Snapshot",
    "SnapshotRegistry",
    "SnapshotStack",
    "ToolDescriptor",
    "build_tool",
    "configure_logging",
    "copy_column",
    "copy_columns",
    "copy_value",
    "default_registry",
    "is_array_like",
    "supported_tool_types",
]
