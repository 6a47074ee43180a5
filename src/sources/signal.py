"""Minimal change signal used for host notifications."""

from __future__ import annotations

from typing import Callable

Listener = Callable[..., object]


class Signal:
    """Ordered list of listeners invoked synchronously on emit."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._listeners: list[Listener] = []

    def connect(self, listener: Listener) -> None:
        """Register a listener; connecting the same listener twice is a no-op."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def disconnect(self, listener: Listener) -> None:
        """Remove a listener if it is registered."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self, *args: object) -> None:
        """Invoke every listener in connection order."""
        for listener in tuple(self._listeners):
            listener(*args)

    def __len__(self) -> int:
        return len(self._listeners)
