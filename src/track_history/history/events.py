"""Change notifications emitted by trackers after each committed transition."""

from __future__ import annotations

from typing import Callable, Dict, Optional

from .state import HistoryView

UPDATE = "history.update"
UNDO = "history.undo"
REDO = "history.redo"
RESET = "history.reset"
EVENTS = (UPDATE, UNDO, REDO, RESET)

Listener = Callable[[str, HistoryView], None]


class HistoryBus:
    """Minimal event bus; ``None`` subscribes a listener to every event."""

    def __init__(self) -> None:
        self._subscribers: Dict[Optional[str], list[Listener]] = {}

    def subscribe(self, callback: Listener, *, event: Optional[str] = None) -> None:
        if event is not None and event not in EVENTS:
            raise KeyError(f"Unknown history event '{event}'")
        self._subscribers.setdefault(event, []).append(callback)

    def unsubscribe(self, callback: Listener, *, event: Optional[str] = None) -> bool:
        listeners = self._subscribers.get(event, [])
        if callback not in listeners:
            return False
        listeners.remove(callback)
        return True

    def emit(self, event: str, view: HistoryView) -> None:
        # Copy so listeners may (un)subscribe while being notified.
        for callback in list(self._subscribers.get(event, ())):
            callback(event, view)
        for callback in list(self._subscribers.get(None, ())):
            callback(event, view)

    def listener_count(self) -> int:
        return sum(len(listeners) for listeners in self._subscribers.values())


__all__ = ["EVENTS", "HistoryBus", "Listener", "REDO", "RESET", "UNDO", "UPDATE"]
