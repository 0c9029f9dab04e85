"""Tracker configuration and its validation."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

MAX_SIZE_ENV = "TRACK_HISTORY_MAX_SIZE"

# camelCase spellings accepted from host configs
_ALIASES = {"maxHistorySize": "max_history_size"}


class InvalidConfigurationError(ValueError):
    """Raised when a tracker option holds a value it can never accept."""

    def __init__(self, message: str, *, option: str, value: Any = None) -> None:
        super().__init__(message)
        self.option = option
        self.value = value


def ensure_max_history_size(value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfigurationError(
            f"max_history_size must be a positive integer, got {value!r}",
            option="max_history_size",
            value=value,
        )
    if value < 1:
        raise InvalidConfigurationError(
            f"max_history_size must be >= 1, got {value}",
            option="max_history_size",
            value=value,
        )
    return value


@dataclass(frozen=True, slots=True)
class TrackHistoryOptions:
    """Options for a ``HistoryTracker``.

    ``max_history_size`` caps how many snapshots are retained; ``None`` lets
    the timeline grow without bound.
    """

    max_history_size: Optional[int] = None

    def __post_init__(self) -> None:
        ensure_max_history_size(self.max_history_size)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TrackHistoryOptions":
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in data.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                raise InvalidConfigurationError(
                    f"Unknown option '{key}'", option=key, value=value
                )
            values[name] = value
        return cls(**values)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TrackHistoryOptions":
        env = os.environ if environ is None else environ
        raw = env.get(MAX_SIZE_ENV, "").strip()
        if not raw:
            return cls()
        try:
            size = int(raw)
        except ValueError as exc:
            raise InvalidConfigurationError(
                f"{MAX_SIZE_ENV} must be an integer, got {raw!r}",
                option="max_history_size",
                value=raw,
            ) from exc
        return cls(max_history_size=size)


def coerce_options(options: Any) -> TrackHistoryOptions:
    if options is None:
        return TrackHistoryOptions()
    if isinstance(options, TrackHistoryOptions):
        return options
    if isinstance(options, Mapping):
        return TrackHistoryOptions.from_mapping(options)
    raise InvalidConfigurationError(
        f"options must be TrackHistoryOptions or a mapping, got {type(options).__name__}",
        option="options",
        value=options,
    )


__all__ = [
    "InvalidConfigurationError",
    "TrackHistoryOptions",
    "coerce_options",
    "ensure_max_history_size",
]
