"""Per-source snapshot stacks.

Each data source gets its own last-in-first-out stack, created on the first
checkpoint. The registry keys stacks by source identity through weak
references, so a stack is dropped together with its source.
"""

from __future__ import annotations

from typing import Any
from weakref import WeakKeyDictionary

from core.types import Snapshot
from snapshot.column_copy import copy_columns


class SnapshotStack:
    """Unbounded LIFO of snapshots for one data source."""

    def __init__(self) -> None:
        self._snapshots: list[Snapshot] = []

    def push(self, source_name: str, data: Any) -> Snapshot:
        """Copy ``data`` into a new snapshot and push it.

        Args:
            source_name: Name recorded on the snapshot.
            data: Live column mapping to copy.

        Returns:
            The pushed snapshot.
        """
        snapshot = Snapshot(
            source_name=source_name,
            columns=copy_columns(data),
            depth=len(self._snapshots) + 1,
        )
        self._snapshots.append(snapshot)
        return snapshot

    def pop(self) -> Snapshot | None:
        """Remove and return the newest snapshot, or None when empty."""
        if not self._snapshots:
            return None
        return self._snapshots.pop()

    def peek(self) -> Snapshot | None:
        return self._snapshots[-1] if self._snapshots else None

    def __len__(self) -> int:
        return len(self._snapshots)

    def __bool__(self) -> bool:
        return bool(self._snapshots)


class SnapshotRegistry:
    """Mapping from data source identity to its optional snapshot stack."""

    def __init__(self) -> None:
        self._stacks: WeakKeyDictionary[Any, SnapshotStack] = WeakKeyDictionary()

    def stack_for(self, source: Any) -> SnapshotStack | None:
        """Return the source's stack, or None before its first checkpoint."""
        return self._stacks.get(source)

    def ensure_stack(self, source: Any) -> SnapshotStack:
        """Return the source's stack, creating an empty one if absent."""
        stack = self._stacks.get(source)
        if stack is None:
            stack = SnapshotStack()
            self._stacks[source] = stack
        return stack

    def depth(self, source: Any) -> int:
        """Number of snapshots held for a source; zero when it has no stack."""
        stack = self._stacks.get(source)
        return 0 if stack is None else len(stack)

    def discard(self, source: Any) -> None:
        """Drop a source's stack, if any."""
        self._stacks.pop(source, None)

    def __contains__(self, source: object) -> bool:
        return source in self._stacks

    def __len__(self) -> int:
        return len(self._stacks)


_DEFAULT_REGISTRY = SnapshotRegistry()


def default_registry() -> SnapshotRegistry:
    """Return the process-wide registry shared by tools built without one."""
    return _DEFAULT_REGISTRY
