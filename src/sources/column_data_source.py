"""Column data source backing one rendered plot.

The host toolkit owns rendering; this class only holds the column mapping
and emits the two notifications the host listens for after a data swap:
the object-level ``change`` signal and the ``data`` property signal.
"""

from __future__ import annotations

from itertools import count
from typing import Any, Iterator, Mapping

from core.constants import DATA_PROPERTY_NAME, UNNAMED_SOURCE_PREFIX
from core.errors import EarthsimSourceError
from core.types import ColumnData
from sources.signal import Signal

_SOURCE_COUNTER = count(1)


class ColumnDataSource:
    """Mapping of column name to column values with change signals."""

    def __init__(self, data: Mapping[str, Any] | None = None, name: str | None = None) -> None:
        self.name = name or f"{UNNAMED_SOURCE_PREFIX}-{next(_SOURCE_COUNTER)}"
        self._data: ColumnData = _validate_columns(data or {}, self.name)
        self.change = Signal("change")
        self._property_signals = {DATA_PROPERTY_NAME: Signal(DATA_PROPERTY_NAME)}

    @property
    def data(self) -> ColumnData:
        """Live column mapping; mutations in place are not signalled."""
        return self._data

    @data.setter
    def data(self, value: Mapping[str, Any]) -> None:
        self._data = _validate_columns(value, self.name)

    @property
    def column_names(self) -> tuple[str, ...]:
        return tuple(self._data)

    def property_signal(self, property_name: str) -> Signal:
        """Return the change signal of one named property.

        Raises:
            EarthsimSourceError: If the property has no signal.
        """
        try:
            return self._property_signals[property_name]
        except KeyError as error:
            raise EarthsimSourceError(
                f"Data source '{self.name}' has no '{property_name}' property signal."
            ) from error

    def emit_data_changed(self) -> None:
        """Notify the host that the whole source and its data property changed."""
        self.change.emit(self)
        self.property_signal(DATA_PROPERTY_NAME).emit(self)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"ColumnDataSource(name={self.name!r}, columns={list(self._data)!r})"


def _validate_columns(data: Mapping[str, Any], source_name: str) -> ColumnData:
    """Copy a column mapping into a plain dict after checking its keys.

    Args:
        data: Candidate column mapping.
        source_name: Source name used in error messages.

    Returns:
        New dict sharing the column objects of ``data``.

    Raises:
        EarthsimSourceError: If data is not a mapping of string keys.
    """
    if not isinstance(data, Mapping):
        raise EarthsimSourceError(
            f"Data source '{source_name}' expects a mapping of columns, "
            f"got {type(data).__name__}."
        )
    for column_name in data:
        if not isinstance(column_name, str):
            raise EarthsimSourceError(
                f"Data source '{source_name}' column names must be strings, "
                f"got {column_name!r}."
            )
    return dict(data)
