"""Base class for toolbar action tools.

An action tool holds a list of configured data sources and applies one
operation to each of them, in configured order, when the host triggers it.
A failure on one source is logged and does not stop the remaining sources;
all failures are reported together once the pass is complete.
"""

from __future__ import annotations

from typing import ClassVar, Iterable

from core.errors import EarthsimSnapshotError, EarthsimToolError
from core.logging_config import get_logger
from core.types import SourceFailure, ToolDescriptor
from snapshot.snapshot_stack import SnapshotRegistry, default_registry
from sources.column_data_source import ColumnDataSource

_LOGGER = get_logger(__name__)


class ActionTool:
    """Toolbar tool that runs one operation over its configured sources."""

    type_name: ClassVar[str] = "ActionTool"
    tool_name: ClassVar[str] = ""
    icon: ClassVar[str] = ""

    def __init__(self, sources: Iterable[ColumnDataSource] | None = None) -> None:
        self._sources: list[ColumnDataSource] = []
        self.sources = sources if sources is not None else []

    @property
    def sources(self) -> list[ColumnDataSource]:
        return list(self._sources)

    @sources.setter
    def sources(self, value: Iterable[ColumnDataSource]) -> None:
        self._sources = _validate_sources(value, self.type_name)

    def do_it(self) -> None:
        """Apply this tool's operation to every configured source.

        Raises:
            EarthsimSnapshotError: If the operation raised for any source.
        """
        failures: list[SourceFailure] = []
        for source in self._sources:
            try:
                self.apply(source)
            except Exception as error:
                _LOGGER.error(
                    "source_operation_failed",
                    tool=self.type_name,
                    source=source.name,
                    error=str(error),
                )
                failures.append(SourceFailure(source_name=source.name, error=error))
        if failures:
            _raise_failures(self.type_name, failures)

    def apply(self, source: ColumnDataSource) -> None:
        """Apply the operation to one source."""
        raise NotImplementedError

    def describe(self) -> ToolDescriptor:
        """Return presentation details for the host toolbar."""
        return ToolDescriptor(
            type_name=self.type_name,
            tool_name=self.tool_name,
            icon=self.icon,
            source_names=tuple(source.name for source in self._sources),
        )


class SnapshotActionTool(ActionTool):
    """Action tool that reads or writes per-source snapshot stacks."""

    def __init__(
        self,
        sources: Iterable[ColumnDataSource] | None = None,
        registry: SnapshotRegistry | None = None,
    ) -> None:
        super().__init__(sources)
        self.registry = registry if registry is not None else default_registry()


def _validate_sources(
    value: Iterable[ColumnDataSource],
    type_name: str,
) -> list[ColumnDataSource]:
    """Check that every configured entry is a column data source.

    Raises:
        EarthsimToolError: If value is not iterable or holds other objects.
    """
    if isinstance(value, (str, bytes, ColumnDataSource)):
        raise EarthsimToolError(
            f"{type_name}.sources expects a list of ColumnDataSource objects, "
            f"got {type(value).__name__}."
        )
    try:
        sources = list(value)
    except TypeError as error:
        raise EarthsimToolError(
            f"{type_name}.sources expects a list of ColumnDataSource objects, "
            f"got {type(value).__name__}."
        ) from error
    for source in sources:
        if not isinstance(source, ColumnDataSource):
            raise EarthsimToolError(
                f"{type_name}.sources entries must be ColumnDataSource objects, "
                f"got {type(source).__name__}."
            )
    return sources


def _raise_failures(type_name: str, failures: list[SourceFailure]) -> None:
    failed_names = tuple(failure.source_name for failure in failures)
    raise EarthsimSnapshotError(
        f"{type_name} failed for {len(failures)} source(s): {', '.join(failed_names)}.",
        failed_sources=failed_names,
    ) from failures[0].error
