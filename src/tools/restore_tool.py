"""Restore tool: pop the newest snapshot back onto each source."""

from __future__ import annotations

from core.constants import RESTORE_TOOL_ICON, RESTORE_TOOL_NAME, RESTORE_TOOL_TYPE
from core.logging_config import get_logger
from sources.column_data_source import ColumnDataSource
from tools.action_tool import SnapshotActionTool

_LOGGER = get_logger(__name__)


class RestoreTool(SnapshotActionTool):
    """Replace each source's data with its most recent checkpoint.

    Sources without a checkpoint are skipped silently. The replaced live data
    is discarded, so there is no redo.
    """

    type_name = RESTORE_TOOL_TYPE
    tool_name = RESTORE_TOOL_NAME
    icon = RESTORE_TOOL_ICON

    def apply(self, source: ColumnDataSource) -> None:
        stack = self.registry.stack_for(source)
        snapshot = stack.pop() if stack is not None else None
        if snapshot is None:
            _LOGGER.debug("restore_skipped", source=source.name)
            return
        source.data = snapshot.columns
        source.emit_data_changed()
        _LOGGER.debug("restore_applied", source=source.name, depth=len(stack))
