"""Checkpoint tool: push a copy of each source's columns onto its stack."""

from __future__ import annotations

from core.constants import CHECKPOINT_TOOL_ICON, CHECKPOINT_TOOL_NAME, CHECKPOINT_TOOL_TYPE
from core.logging_config import get_logger
from sources.column_data_source import ColumnDataSource
from tools.action_tool import SnapshotActionTool

_LOGGER = get_logger(__name__)


class CheckpointTool(SnapshotActionTool):
    """Save the current data of every source without notifying the host."""

    type_name = CHECKPOINT_TOOL_TYPE
    tool_name = CHECKPOINT_TOOL_NAME
    icon = CHECKPOINT_TOOL_ICON

    def apply(self, source: ColumnDataSource) -> None:
        stack = self.registry.ensure_stack(source)
        snapshot = stack.push(source.name, source.data)
        _LOGGER.debug("checkpoint_saved", source=source.name, depth=snapshot.depth)
