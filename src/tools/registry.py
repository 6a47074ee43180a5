"""Tool type lookup by registered type name."""

from __future__ import annotations

from typing import Any

from core.errors import EarthsimToolError
from tools.action_tool import ActionTool
from tools.checkpoint_tool import CheckpointTool
from tools.clear_tool import ClearTool
from tools.restore_tool import RestoreTool

_TOOL_TYPES: dict[str, type[ActionTool]] = {
    tool_class.type_name: tool_class for tool_class in (CheckpointTool, RestoreTool, ClearTool)
}


def supported_tool_types() -> tuple[str, ...]:
    """Return registered tool type names in sorted order."""
    return tuple(sorted(_TOOL_TYPES))


def build_tool(type_name: str, **options: Any) -> ActionTool:
    """Instantiate a tool by its type name.

    Args:
        type_name: Registered type, e.g. ``"CheckpointTool"``.
        **options: Constructor keyword arguments, e.g. ``sources``.

    Returns:
        Configured tool instance.

    Raises:
        EarthsimToolError: If the type name is not registered.
    """
    tool_class = _TOOL_TYPES.get(type_name)
    if tool_class is None:
        raise EarthsimToolError(
            f"Unsupported tool type '{type_name}'. "
            f"Supported types: {', '.join(supported_tool_types())}."
        )
    return tool_class(**options)
