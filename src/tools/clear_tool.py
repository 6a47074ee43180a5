"""Clear tool: empty every column while keeping the column names."""

from __future__ import annotations

from core.constants import CLEAR_TOOL_ICON, CLEAR_TOOL_NAME, CLEAR_TOOL_TYPE
from core.logging_config import get_logger
from sources.column_data_source import ColumnDataSource
from tools.action_tool import ActionTool

_LOGGER = get_logger(__name__)


class ClearTool(ActionTool):
    """Reset all columns of each source to empty lists.

    Snapshot stacks are left alone, so a later restore brings the data back.
    """

    type_name = CLEAR_TOOL_TYPE
    tool_name = CLEAR_TOOL_NAME
    icon = CLEAR_TOOL_ICON

    def apply(self, source: ColumnDataSource) -> None:
        for column_name in source.column_names:
            source.data[column_name] = []
        source.emit_data_changed()
        _LOGGER.debug("data_cleared", source=source.name, columns=len(source.column_names))
