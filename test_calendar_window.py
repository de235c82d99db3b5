"""Theme switching in the month window notifies the tray."""

from datetime import date
from types import SimpleNamespace

import pytest

pytest.importorskip("tkinter")

from calendar_window import CalendarWindow  # noqa: E402
from view_state import ViewState  # noqa: E402


def _window_stub():
    calls = []
    stub = SimpleNamespace(
        state=ViewState(today=date(2024, 1, 1), dark_mode=False),
        _refresh=lambda: calls.append("refresh"),
        _persist=lambda: calls.append("persist"),
        on_theme_change=None,
    )
    return stub, calls


def test_toggle_dark_mode_calls_theme_listener():
    stub, calls = _window_stub()
    seen = []
    stub.on_theme_change = seen.append
    CalendarWindow.toggle_dark_mode(stub)
    CalendarWindow.toggle_dark_mode(stub)
    assert seen == [True, False]
    assert calls == ["refresh", "persist", "refresh", "persist"]


def test_toggle_dark_mode_without_listener():
    stub, calls = _window_stub()
    CalendarWindow.toggle_dark_mode(stub)
    assert stub.state.dark_mode is True
    assert calls == ["refresh", "persist"]
