"""telelog wiring for the history tracker and its demo host.

Loggers are created lazily from a single active configuration. Until
``configure`` is called, that configuration comes from ``TRACK_HISTORY_*``
environment variables (``LOG_LEVEL``, ``LOG_FILE``, ``LOG_JSON``,
``DISABLE_CONSOLE``, ``NO_COLOR``).
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from typing import Any, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "TRACK_HISTORY_"
DEFAULT_LOGGER_NAME = "track_history"
PRESETS = ("development", "production")

_loggers: MutableMapping[str, Any] = {}
_config: Optional[Any] = None


def _env(name: str) -> str:
    return os.getenv(f"{ENV_PREFIX}{name}", "")


def _env_flag(name: str) -> bool:
    return _env(name).lower() in {"1", "true", "yes", "on"}


def _text(value: Any) -> str:
    return value if isinstance(value, str) else repr(value)


def _config_from_env() -> Any:
    config = tl.Config()
    config.with_min_level((_env("LOG_LEVEL") or "INFO").upper())
    console = not _env_flag("DISABLE_CONSOLE")
    config.with_console_output(console)
    if console:
        config.with_colored_output(not _env_flag("NO_COLOR"))
    config.with_json_format(_env_flag("LOG_JSON"))
    if _env("LOG_FILE"):
        config.with_file_output(_env("LOG_FILE"))
    return config


def _config_for_preset(preset: str) -> Any:
    if preset not in PRESETS:
        raise ValueError(f"Unknown preset '{preset}', expected one of {PRESETS}.")
    config = tl.Config()
    if preset == "development":
        config.with_min_level("DEBUG")
        config.with_console_output(True)
        config.with_colored_output(True)
    else:
        # full-screen hosts own the terminal, so only write to a file
        config.with_min_level("INFO")
        config.with_console_output(False)
        config.with_file_output(_env("LOG_FILE") or "track_history.log")
    return config


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Install ``config`` or a named ``preset`` (one of ``PRESETS``).

    With neither, the environment-derived default is rebuilt. Loggers
    handed out earlier are forgotten so later lookups use the new setup.
    """

    global _config
    if config is not None and preset is not None:
        raise ValueError("Provide either `config` or `preset`, not both.")
    if preset is not None:
        config = _config_for_preset(preset)
    _config = config if config is not None else _config_from_env()
    _config.with_profiling(True)
    _loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    if _config is None:
        configure()
    key = name or DEFAULT_LOGGER_NAME
    if key not in _loggers:
        _loggers[key] = tl.Logger.with_config(key, _config)
    return _loggers[key]


def _write(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    structured = getattr(logger, f"{level}_with", None)
    if structured is not None:
        structured(message, [(key, _text(value)) for key, value in payload.items()])
        return
    plain = getattr(logger, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Log ``event::<name>`` with ``data`` attached as key/value pairs."""

    payload = {"event": name, **(data or {})}
    _write(get_logger(logger_name), level.lower(), f"event::{name}", payload)


class SpanHandle:
    """Collects metadata for the enclosing ``span``; logged if the block fails."""

    def __init__(self) -> None:
        self.metadata: Dict[str, str] = {}

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile the block, tracked under ``component`` when one is given.

    ``metadata`` is pushed as logger context for the duration of the block.
    """

    log = get_logger(logger_name)
    handle = SpanHandle()
    context = {key: _text(value) for key, value in (metadata or {}).items()}
    for key, value in context.items():
        log.add_context(key, value)

    with ExitStack() as stack:
        if component:
            stack.enter_context(log.track_component(component))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            failure = {"span": name, **context, **handle.metadata, "reason": exc}
            _write(log, "error", "span::fail", failure)
            raise
        finally:
            for key in context:
                log.remove_context(key)


__all__ = ["PRESETS", "SpanHandle", "configure", "get_logger", "record_event", "span"]
