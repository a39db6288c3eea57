"""Minimal subscribe/notify support for services that expose a state snapshot."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

SnapshotT = TypeVar("SnapshotT")


class ObservableState(ABC, Generic[SnapshotT]):
    """Base class keeping a list of listeners that are called with every new snapshot."""

    def __init__(self) -> None:
        self._listeners: list[Callable[[SnapshotT], Any]] = []

    @abstractmethod
    def snapshot(self) -> SnapshotT:
        """Returns an immutable view of the current state."""
        pass

    def subscribe(self, listener: Callable[[SnapshotT], Any]) -> Callable[[], None]:
        """Registers a listener and returns a callable that removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        """Pushes the current snapshot to every listener; a failing listener does not stop the others."""
        current = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(current)
            except Exception as e:
                logger.error(f"State listener {listener!r} failed: {e}")
