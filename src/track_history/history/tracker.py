"""Linear undo/redo history over full value snapshots."""

from __future__ import annotations

from typing import Any, Generic, Optional, Tuple, TypeVar

from track_history.runtime import telemetry

from . import events
from .events import HistoryBus, Listener
from .options import (
    InvalidConfigurationError,
    TrackHistoryOptions,
    coerce_options,
    ensure_max_history_size,
)
from .state import HistoryView, TimelineState

T = TypeVar("T")

LOGGER_NAME = "track_history.tracker"


class HistoryTracker(Generic[T]):
    """Bounded linear history: update, undo, redo and reset over snapshots.

    The tracker keeps a single ``TimelineState`` and swaps it in one
    assignment per transition, so every read made after a call returns sees
    that call's result. Listeners are notified only after the swap.

        >>> tracker = HistoryTracker("a")
        >>> tracker.update("b")
        >>> tracker.undo()
        True
        >>> tracker.current()
        'a'
        >>> tracker.can_redo()
        True

    Snapshots are stored as given; the tracker never copies or inspects them.
    """

    def __init__(
        self,
        default_value: Optional[T] = None,
        options: TrackHistoryOptions | dict[str, Any] | None = None,
        *,
        max_history_size: Optional[int] = None,
        name: str = "history",
        bus: Optional[HistoryBus] = None,
    ) -> None:
        resolved = coerce_options(options)
        if max_history_size is not None:
            if resolved.max_history_size is not None:
                raise InvalidConfigurationError(
                    "Provide max_history_size either in options or as a keyword, not both.",
                    option="max_history_size",
                    value=max_history_size,
                )
            resolved = TrackHistoryOptions(max_history_size=max_history_size)
        self.name = name
        self.bus = bus or HistoryBus()
        self._max_history_size = resolved.max_history_size
        self._state: TimelineState[T] = TimelineState.seed(default_value)

    # queries

    def current(self) -> Optional[T]:
        return self._state.current

    @property
    def value(self) -> Optional[T]:
        return self._state.current

    @property
    def pointer(self) -> int:
        return self._state.pointer

    @property
    def length(self) -> int:
        return self._state.length

    def __len__(self) -> int:
        return self._state.length

    def can_undo(self) -> bool:
        return self._state.can_undo

    def can_redo(self) -> bool:
        return self._state.can_redo

    def snapshots(self) -> Tuple[Optional[T], ...]:
        return self._state.snapshots

    def view(self) -> HistoryView:
        return HistoryView.from_state(
            self._state, max_history_size=self._max_history_size
        )

    @property
    def max_history_size(self) -> Optional[int]:
        return self._max_history_size

    @max_history_size.setter
    def max_history_size(self, value: Optional[int]) -> None:
        """Change the cap; it takes effect on the next ``update``."""

        self._max_history_size = ensure_max_history_size(value)
        telemetry.record_event(
            "history.capacity",
            level="debug",
            data={"tracker": self.name, "max_history_size": value},
            logger_name=LOGGER_NAME,
        )

    # transitions

    def update(self, new_value: T) -> None:
        """Make ``new_value`` current, dropping any redo future.

        If the timeline then exceeds ``max_history_size``, the oldest
        snapshots are dropped; the new value always stays current.
        """

        with telemetry.span(
            "history::update",
            logger_name=LOGGER_NAME,
            component="history",
            metadata={"tracker": self.name},
        ) as handle:
            before = self._state
            after = before.append(new_value, self._max_history_size)
            discarded = before.length - before.pointer - 1
            trimmed = before.pointer + 2 - after.length
            if discarded:
                handle.add_metadata("discarded_redo", discarded)
            if trimmed > 0:
                handle.add_metadata("trimmed", trimmed)
            self._state = after
        self._notify(events.UPDATE)

    def undo(self) -> bool:
        """Step back one snapshot; a no-op at the start of the timeline."""

        return self._step(-1, events.UNDO)

    def redo(self) -> bool:
        """Step forward one snapshot; a no-op at the end of the timeline."""

        return self._step(1, events.REDO)

    def reset(self, new_value: Optional[T] = None) -> None:
        """Discard all history and start over from ``new_value``."""

        with telemetry.span(
            "history::reset",
            logger_name=LOGGER_NAME,
            component="history",
            metadata={"tracker": self.name, "discarded": self._state.length},
        ):
            self._state = TimelineState.seed(new_value)
        self._notify(events.RESET)

    def _step(self, step: int, event: str) -> bool:
        before = self._state
        after = before.move(step)
        moved = after is not before
        telemetry.record_event(
            event,
            level="debug",
            data={
                "tracker": self.name,
                "moved": moved,
                "pointer": after.pointer,
                "length": after.length,
            },
            logger_name=LOGGER_NAME,
        )
        if not moved:
            return False
        self._state = after
        self._notify(event)
        return True

    # listeners

    def subscribe(self, callback: Listener, *, event: Optional[str] = None) -> None:
        self.bus.subscribe(callback, event=event)

    def unsubscribe(self, callback: Listener, *, event: Optional[str] = None) -> bool:
        return self.bus.unsubscribe(callback, event=event)

    def _notify(self, event: str) -> None:
        self.bus.emit(event, self.view())

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(name={self.name!r}, pointer={self.pointer}, "
            f"length={self.length}, max_history_size={self._max_history_size})"
        )


def create(
    default_value: Optional[T] = None,
    options: TrackHistoryOptions | dict[str, Any] | None = None,
    **kwargs: Any,
) -> HistoryTracker[T]:
    """Build a ``HistoryTracker``; keyword arguments are passed through."""

    return HistoryTracker(default_value, options, **kwargs)


__all__ = ["HistoryTracker", "create"]
