"""Unit tests for the snapshot column copy policy."""

from __future__ import annotations

from array import array

import numpy as np

from snapshot.column_copy import copy_column, copy_columns, copy_value, is_array_like


def test_is_array_like_accepts_arrays_and_buffers() -> None:
    """Lists, numpy arrays, typed arrays, and buffers are array-like."""
    values = [[1], np.zeros(2), array("d", [1.0]), bytearray(b"ab"), memoryview(b"ab")]

    assert all(is_array_like(value) for value in values)


def test_is_array_like_rejects_scalars_and_immutables() -> None:
    """Strings, bytes, tuples, numbers, and mappings are not array-like."""
    values = ["abc", b"abc", (1, 2), 3, 1.5, None, {"a": 1}]

    assert not any(is_array_like(value) for value in values)


def test_copy_value_returns_new_numpy_array_with_same_dtype() -> None:
    """Numpy cells should be copied into a new buffer."""
    cell = np.array([1.0, 2.0], dtype=np.float32)

    copied = copy_value(cell)
    cell[0] = 9.0

    assert copied.dtype == np.float32 and copied.tolist() == [1.0, 2.0]


def test_copy_value_copies_typed_array() -> None:
    """array.array cells should keep their typecode and values."""
    cell = array("i", [1, 2])

    copied = copy_value(cell)
    cell.append(3)

    assert copied.typecode == "i" and list(copied) == [1, 2]


def test_copy_value_copies_memoryview_buffer() -> None:
    """Memoryview cells should point at a fresh buffer with the same format."""
    backing = array("d", [1.5, 2.5])
    view = memoryview(backing)

    copied = copy_value(view)
    backing[0] = 0.0

    assert copied.format == "d" and copied.tolist() == [1.5, 2.5]


def test_copy_value_copies_non_native_memoryview() -> None:
    """Big-endian views should be copied with their byte order intact."""
    backing = np.array([1.0, 2.0], dtype=">f8")
    view = memoryview(backing)

    copied = copy_value(view)
    backing[0] = 0.0

    assert copied.format == view.format and copied.tolist() == [1.0, 2.0]


def test_copy_value_keeps_memoryview_shape() -> None:
    """Multi-dimensional views should keep their shape."""
    backing = np.arange(6, dtype=np.int32).reshape(2, 3)
    view = memoryview(backing)

    copied = copy_value(view)
    backing[0, 0] = 99

    assert copied.shape == (2, 3) and copied.tolist() == [[0, 1, 2], [3, 4, 5]]


def test_copy_value_keeps_mappings_by_reference() -> None:
    """Nested mappings are stored shallowly and still alias the original."""
    cell = {"label": "a"}

    copied = copy_value(cell)

    assert copied is cell


def test_copy_column_copies_ragged_cells_one_level() -> None:
    """Cells that are lists should not be shared with the source column."""
    column = [[1, 2], [3]]

    copied = copy_column(column)
    column[0].append(99)

    assert copied == [[1, 2], [3]] and copied is not column


def test_copy_column_keeps_numeric_numpy_columns_as_arrays() -> None:
    """Numeric numpy columns should be copied as numpy arrays."""
    column = np.arange(3)

    copied = copy_column(column)
    column[0] = 10

    assert isinstance(copied, np.ndarray) and copied.tolist() == [0, 1, 2]


def test_copy_column_copies_cells_of_object_arrays() -> None:
    """Object numpy columns should get copied cells in a new object array."""
    column = np.empty(2, dtype=object)
    column[0] = [1, 2]
    column[1] = np.array([3.0])

    copied = copy_column(column)
    column[0].append(5)
    column[1][0] = 0.0

    assert copied.dtype == object and copied[0] == [1, 2] and copied[1][0] == 3.0


def test_copy_column_turns_tuples_into_lists() -> None:
    """Non-list sequences become plain lists."""
    copied = copy_column((1, 2, 3))

    assert copied == [1, 2, 3]


def test_copy_columns_preserves_column_names() -> None:
    """Every column should be present in the copy."""
    data = {"x": [1, 2], "y": ["a", "b"]}

    copied = copy_columns(data)
    data["x"].append(3)

    assert copied == {"x": [1, 2], "y": ["a", "b"]}
