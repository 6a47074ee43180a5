"""Column copy policy for snapshots.

Array-like cells are copied one level deep so a snapshot never aliases
the live data. Other cells are stored by reference and treated as
immutable; nested mappings inside a cell are not deep-copied.
"""

from __future__ import annotations

from array import array
from typing import Any, Mapping

import numpy as np

from core.types import ColumnData

_ARRAY_LIKE_TYPES = (list, np.ndarray, array, bytearray, memoryview)


def is_array_like(value: Any) -> bool:
    """Return whether a value is an array or binary buffer view.

    Strings, bytes, and tuples are immutable and count as scalars.
    """
    return isinstance(value, _ARRAY_LIKE_TYPES)


def copy_value(value: Any) -> Any:
    """Copy one cell element-wise if array-like, else return it unchanged.

    Args:
        value: Column cell value.

    Returns:
        New container of the same kind, or ``value`` itself.
    """
    if not is_array_like(value):
        return value
    if isinstance(value, np.ndarray):
        return value.copy()
    if isinstance(value, memoryview):
        # numpy keeps byte order, struct layout, and shape of the view
        return memoryview(np.array(value, copy=True))
    if isinstance(value, array):
        return array(value.typecode, value)
    if isinstance(value, bytearray):
        return bytearray(value)
    return list(value)


def copy_column(column: Any) -> Any:
    """Copy a column so later mutation of either side stays local.

    Args:
        column: Sequence of cells, numpy array, or any iterable.

    Returns:
        Numpy array for numpy columns, otherwise a new list of copied cells.
    """
    if isinstance(column, np.ndarray):
        if column.dtype != object:
            return column.copy()
        copied = np.empty(column.shape, dtype=object)
        for index, cell in np.ndenumerate(column):
            copied[index] = copy_value(cell)
        return copied
    if isinstance(column, (str, bytes)):
        return column
    return [copy_value(cell) for cell in column]


def copy_columns(data: Mapping[str, Any]) -> ColumnData:
    """Copy every column of a data source mapping."""
    return {column_name: copy_column(column) for column_name, column in data.items()}
