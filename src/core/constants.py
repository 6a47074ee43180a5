"""Core constants used across earthsim-tools modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

DEFAULT_LOG_LEVEL = "INFO"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_LEVEL_ENV_VAR = "EARTHSIM_LOG_LEVEL"
DATA_PROPERTY_NAME = "data"
UNNAMED_SOURCE_PREFIX = "source"
CHECKPOINT_TOOL_TYPE = "CheckpointTool"
RESTORE_TOOL_TYPE = "RestoreTool"
CLEAR_TOOL_TYPE = "ClearTool"
CHECKPOINT_TOOL_NAME = "Checkpoint"
RESTORE_TOOL_NAME = "Restore"
CLEAR_TOOL_NAME = "Clear data"
CHECKPOINT_TOOL_ICON = "bk-tool-icon-save"
RESTORE_TOOL_ICON = "bk-tool-icon-undo"
CLEAR_TOOL_ICON = "bk-tool-icon-reset"
