"""Textual adapter that wires a HistoryTracker into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from track_history.history import HistoryTracker, HistoryView


_UNSET = object()


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_view: Callable[[HistoryView], None]
    update_status: Callable[[str], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


class TextualHistoryAdapter:
    """Bridges one editable field's tracker to a Textual-friendly surface.

    Every committed transition, whoever triggered it, is pushed to
    ``hooks.update_view`` so the host only ever re-displays tracker state.
    """

    def __init__(
        self,
        tracker: HistoryTracker[Any],
        hooks: TextualUIHooks,
        *,
        reset_value: Any = None,
    ) -> None:
        self.tracker = tracker
        self.hooks = hooks
        self.reset_value = reset_value
        self.tracker.subscribe(self._handle_event)
        self.hooks.update_view(self.tracker.view())

    def handle_input(self, value: Any) -> bool:
        """Record a value-changing input event.

        Change events carrying the value already current (the host echoing a
        re-display back) are ignored. Returns whether a snapshot was added.
        """

        if value == self.tracker.current():
            self._log_state("input ~", skipped=True)
            return False
        self._log_state("input ->", value=value)
        self.tracker.update(value)
        return True

    def undo(self) -> bool:
        moved = self.tracker.undo()
        if not moved:
            self.hooks.update_status("nothing to undo")
        return moved

    def redo(self) -> bool:
        moved = self.tracker.redo()
        if not moved:
            self.hooks.update_status("nothing to redo")
        return moved

    def reset(self, value: Any = _UNSET) -> None:
        """Reseed the tracker; without ``value`` the adapter's ``reset_value`` is used."""

        self.tracker.reset(self.reset_value if value is _UNSET else value)

    def handle_action(self, name: str) -> bool:
        """Dispatch a control by name (``undo``, ``redo`` or ``reset``)."""

        if name == "undo":
            return self.undo()
        if name == "redo":
            return self.redo()
        if name == "reset":
            self.reset()
            return True
        raise KeyError(f"Unknown history action '{name}'")

    def _handle_event(self, event: str, view: HistoryView) -> None:
        self._log_state("event ->", event=event)
        self.hooks.update_view(view)
        self.hooks.update_status(self._describe(event, view))

    @staticmethod
    def _describe(event: str, view: HistoryView) -> str:
        action = event.rsplit(".", 1)[-1]
        return f"{action}: {view.pointer + 1}/{view.length}"

    def _log_state(self, prefix: str, **fields: Optional[object]) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        return {
            "tracker": self.tracker.name,
            "pointer": self.tracker.pointer,
            "length": self.tracker.length,
            "can_undo": self.tracker.can_undo(),
            "can_redo": self.tracker.can_redo(),
        }


__all__ = ["TextualHistoryAdapter", "TextualUIHooks"]
