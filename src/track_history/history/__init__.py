"""Undo/redo history state machine and its supporting types."""

from .events import EVENTS, HistoryBus
from .options import InvalidConfigurationError, TrackHistoryOptions, ensure_max_history_size
from .state import HistoryView, TimelineState
from .tracker import HistoryTracker, create

__all__ = [
    "EVENTS",
    "HistoryBus",
    "HistoryTracker",
    "HistoryView",
    "InvalidConfigurationError",
    "TimelineState",
    "TrackHistoryOptions",
    "create",
    "ensure_max_history_size",
]
