from __future__ import annotations

import asyncio

import pytest
from textual.widgets import Button, Input

from track_history.adapters.textual.app import DEFAULT_TEXT, HistoryEditorApp, _parse_args, main
from track_history.history import TrackHistoryOptions


def test_parse_args_defaults(monkeypatch) -> None:
    monkeypatch.delenv("TRACK_HISTORY_MAX_SIZE", raising=False)
    monkeypatch.delenv("TRACK_HISTORY_INITIAL_TEXT", raising=False)
    monkeypatch.delenv("TRACK_HISTORY_LOG_PRESET", raising=False)

    args = _parse_args([])

    assert args.initial_text == DEFAULT_TEXT
    assert args.options.max_history_size is None
    assert args.log_preset == "production"


def test_parse_args_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("TRACK_HISTORY_MAX_SIZE", "12")
    monkeypatch.setenv("TRACK_HISTORY_INITIAL_TEXT", "seed")

    args = _parse_args(["--log-preset", "development"])

    assert args.options.max_history_size == 12
    assert args.initial_text == "seed"
    assert args.log_preset == "development"


def test_size_flag_overrides_environment(monkeypatch) -> None:
    monkeypatch.setenv("TRACK_HISTORY_MAX_SIZE", "many")

    args = _parse_args(["--max-history-size", "4"])

    assert args.options.max_history_size == 4


def test_invalid_size_in_environment_is_a_usage_error(monkeypatch, capsys) -> None:
    monkeypatch.setenv("TRACK_HISTORY_MAX_SIZE", "many")

    with pytest.raises(SystemExit) as info:
        _parse_args([])

    assert info.value.code == 2
    assert "TRACK_HISTORY_MAX_SIZE" in capsys.readouterr().err


@pytest.mark.parametrize("size", ["0", "-3"])
def test_non_positive_size_flag_is_a_usage_error(monkeypatch, capsys, size: str) -> None:
    monkeypatch.delenv("TRACK_HISTORY_MAX_SIZE", raising=False)

    with pytest.raises(SystemExit) as info:
        main(["--max-history-size", size])

    assert info.value.code == 2
    assert "max_history_size" in capsys.readouterr().err


def test_app_wires_input_and_buttons() -> None:
    app = HistoryEditorApp(
        initial_text="start", options=TrackHistoryOptions(max_history_size=3)
    )

    async def scenario() -> None:
        async with app.run_test() as pilot:
            field = app.query_one("#text", Input)
            assert app.query_one("#undo", Button).disabled is True

            field.value = "edited"
            await pilot.pause()
            assert app.tracker.current() == "edited"
            assert app.query_one("#undo", Button).disabled is False

            app.action_history("undo")
            await pilot.pause()
            assert field.value == "start"
            assert app.tracker.length == 2
            assert app.query_one("#redo", Button).disabled is False

            app.action_history("reset")
            await pilot.pause()
            assert app.tracker.length == 1
            assert field.value == "start"

    asyncio.run(scenario())
