"""Timeline state and the read-only views handed to hosts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Optional, Tuple, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class TimelineState(Generic[T]):
    """Snapshots plus pointer, replaced as a whole on every transition.

    ``snapshots`` is never empty and ``0 <= pointer < len(snapshots)``.
    """

    snapshots: Tuple[Optional[T], ...]
    pointer: int = 0

    @classmethod
    def seed(cls, value: Optional[T] = None) -> "TimelineState[T]":
        return cls(snapshots=(value,), pointer=0)

    @property
    def current(self) -> Optional[T]:
        return self.snapshots[self.pointer]

    @property
    def length(self) -> int:
        return len(self.snapshots)

    @property
    def can_undo(self) -> bool:
        return self.pointer > 0

    @property
    def can_redo(self) -> bool:
        return self.pointer < len(self.snapshots) - 1

    def append(
        self, value: Optional[T], max_size: Optional[int] = None
    ) -> "TimelineState[T]":
        """Return the state after branch truncation, append and capacity trim."""

        kept = self.snapshots[: self.pointer + 1] + (value,)
        if max_size is not None and len(kept) > max_size:
            kept = kept[-max_size:]
        return TimelineState(snapshots=kept, pointer=len(kept) - 1)

    def move(self, step: int) -> "TimelineState[T]":
        """Return the state with the pointer shifted by ``step``, clamped."""

        pointer = min(max(self.pointer + step, 0), len(self.snapshots) - 1)
        if pointer == self.pointer:
            return self
        return TimelineState(snapshots=self.snapshots, pointer=pointer)


@dataclass(frozen=True, slots=True)
class HistoryView:
    """Host-friendly snapshot of a tracker after a committed transition."""

    value: Any
    pointer: int
    length: int
    can_undo: bool
    can_redo: bool
    max_history_size: Optional[int] = None

    @classmethod
    def from_state(
        cls, state: TimelineState[Any], *, max_history_size: Optional[int] = None
    ) -> "HistoryView":
        return cls(
            value=state.current,
            pointer=state.pointer,
            length=state.length,
            can_undo=state.can_undo,
            can_redo=state.can_redo,
            max_history_size=max_history_size,
        )


__all__ = ["HistoryView", "TimelineState"]
