"""Bounded linear undo/redo history tracking."""

from .history import (
    HistoryTracker,
    HistoryView,
    InvalidConfigurationError,
    TrackHistoryOptions,
    create,
)

__all__ = [
    "HistoryTracker",
    "HistoryView",
    "InvalidConfigurationError",
    "TrackHistoryOptions",
    "create",
    "adapters",
    "history",
    "runtime",
]

__version__ = "0.1.0"
