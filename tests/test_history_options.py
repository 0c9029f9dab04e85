import pytest

from track_history import HistoryTracker, InvalidConfigurationError, TrackHistoryOptions
from track_history.history import HistoryBus
from track_history.history.options import MAX_SIZE_ENV


@pytest.mark.parametrize("bad", [0, -1, 2.5, "3", True, False])
def test_invalid_max_history_size_rejected_at_construction(bad: object) -> None:
    with pytest.raises(InvalidConfigurationError) as info:
        HistoryTracker("x", max_history_size=bad)  # type: ignore[arg-type]

    assert info.value.option == "max_history_size"
    assert info.value.value == bad


def test_invalid_configuration_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        TrackHistoryOptions(max_history_size=0)


def test_invalid_assignment_keeps_previous_cap() -> None:
    tracker = HistoryTracker("x", max_history_size=4)

    with pytest.raises(InvalidConfigurationError):
        tracker.max_history_size = -2

    assert tracker.max_history_size == 4


def test_unknown_option_key_rejected() -> None:
    with pytest.raises(InvalidConfigurationError) as info:
        HistoryTracker("x", {"max_size": 3})

    assert info.value.option == "max_size"


def test_options_of_wrong_type_rejected() -> None:
    with pytest.raises(InvalidConfigurationError):
        HistoryTracker("x", 3)  # type: ignore[arg-type]


def test_cap_given_twice_rejected() -> None:
    with pytest.raises(InvalidConfigurationError):
        HistoryTracker("x", TrackHistoryOptions(max_history_size=2), max_history_size=3)


def test_options_from_env() -> None:
    assert TrackHistoryOptions.from_env({}).max_history_size is None
    assert TrackHistoryOptions.from_env({MAX_SIZE_ENV: "7"}).max_history_size == 7

    with pytest.raises(InvalidConfigurationError):
        TrackHistoryOptions.from_env({MAX_SIZE_ENV: "many"})
    with pytest.raises(InvalidConfigurationError):
        TrackHistoryOptions.from_env({MAX_SIZE_ENV: "0"})


def test_bus_rejects_unknown_event() -> None:
    bus = HistoryBus()

    with pytest.raises(KeyError):
        bus.subscribe(lambda event, view: None, event="history.merge")

    assert bus.listener_count() == 0
