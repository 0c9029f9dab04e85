"""Executable Textual app: a single text field with undo/redo history."""

from __future__ import annotations

import argparse
import os
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.containers import Horizontal, Vertical
    from textual.widgets import Button, Footer, Header, Input, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use track_history.adapters.textual.app"
    ) from exc

from track_history.history import (
    HistoryTracker,
    HistoryView,
    InvalidConfigurationError,
    TrackHistoryOptions,
)
from track_history.history.options import MAX_SIZE_ENV
from track_history.runtime import telemetry

from .controller import TextualHistoryAdapter, TextualUIHooks

DEFAULT_TEXT = "Initial text"


class HistoryEditorApp(App[None]):
    """Minimal Textual UI around one tracked text field."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#editor {
		border: round $accent;
		padding: 1 1;
		height: auto;
	}

	#toolbar {
		height: auto;
		padding: 0 1;
	}

	#toolbar Button {
		margin: 0 1 0 0;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        Binding("ctrl+z", "history('undo')", "Undo", priority=True),
        Binding("ctrl+y", "history('redo')", "Redo", priority=True),
        Binding("ctrl+r", "history('reset')", "Reset", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        *,
        initial_text: str = DEFAULT_TEXT,
        options: Optional[TrackHistoryOptions] = None,
    ) -> None:
        super().__init__()
        self.tracker: HistoryTracker[str] = HistoryTracker(
            initial_text, options, name="editor"
        )
        self.adapter: TextualHistoryAdapter | None = None
        self._initial_text = initial_text
        self._history_logger = telemetry.get_logger("track_history.app")

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="editor"):
            yield Input(value=self._initial_text, id="text")
            with Horizontal(id="toolbar"):
                yield Button("Undo", id="undo", disabled=True)
                yield Button("Redo", id="redo", disabled=True)
                yield Button("Reset", id="reset", variant="warning")
        yield Static("", id="status-line")
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_view=self._update_view,
            update_status=self._update_status,
            log=self._log_line,
        )
        self.adapter = TextualHistoryAdapter(
            self.tracker, hooks, reset_value=self._initial_text
        )

    def on_input_changed(self, event: Input.Changed) -> None:
        if self.adapter:
            self.adapter.handle_input(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if self.adapter and event.button.id:
            self.adapter.handle_action(event.button.id)

    def action_history(self, name: str) -> None:
        if self.adapter:
            self.adapter.handle_action(name)

    def _update_view(self, view: HistoryView) -> None:
        field = self.query_one("#text", Input)
        text = "" if view.value is None else str(view.value)
        if field.value != text:
            with field.prevent(Input.Changed):
                field.value = text
        self.query_one("#undo", Button).disabled = not view.can_undo
        self.query_one("#redo", Button).disabled = not view.can_redo

    def _update_status(self, status: str) -> None:
        self.query_one("#status-line", Static).update(status)

    def _log_line(self, line: str) -> None:
        self._history_logger.debug(line)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the history tracker Textual demo.")
    parser.add_argument(
        "--initial-text",
        default=os.environ.get("TRACK_HISTORY_INITIAL_TEXT", DEFAULT_TEXT),
        help=f"Seed value for the text field (default: {DEFAULT_TEXT!r})",
    )
    parser.add_argument(
        "--max-history-size",
        type=int,
        default=None,
        help=f"Maximum number of snapshots to retain (default: ${MAX_SIZE_ENV} or unbounded)",
    )
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default=os.environ.get("TRACK_HISTORY_LOG_PRESET", "production"),
        help="telelog preset; 'production' logs to a file only (default)",
    )
    return parser


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse ``argv`` and attach validated ``TrackHistoryOptions`` as ``options``.

    An invalid size, from the flag or from the environment, is a usage error.
    """

    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        if args.max_history_size is None:
            args.options = TrackHistoryOptions.from_env()
        else:
            args.options = TrackHistoryOptions(max_history_size=args.max_history_size)
    except InvalidConfigurationError as exc:
        parser.error(str(exc))
    return args


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset=args.log_preset)
    app = HistoryEditorApp(initial_text=args.initial_text, options=args.options)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
