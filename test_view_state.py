"""Tests for month-window navigation state."""

from datetime import date

from ifc_types import LeapDay, NormalDay, YearDay
from view_state import ViewState


def test_starts_on_todays_month():
    state = ViewState(today=date(2024, 1, 29))
    assert (state.year, state.month) == (2024, 2)
    assert state.selected is None


def test_starts_after_special_day_month():
    assert ViewState(today=date(2024, 6, 17)).month == 6      # Leap Day
    assert ViewState(today=date(2023, 12, 31)).month == 13    # Year Day


def test_month_navigation_wraps_years():
    state = ViewState(today=date(2024, 12, 30))
    assert (state.year, state.month) == (2024, 13)
    assert state.next_month()
    assert (state.year, state.month) == (2025, 1)
    assert state.prev_month()
    assert state.prev_month()
    assert (state.year, state.month) == (2024, 12)


def test_navigation_stops_at_range_limits():
    state = ViewState(today=date(2024, 1, 1))
    state.year, state.month = 1, 1
    assert not state.can_go_prev
    assert not state.prev_month()
    assert not state.prev_year()
    assert (state.year, state.month) == (1, 1)

    state.year, state.month = 9999, 13
    assert not state.can_go_next
    assert not state.next_month()
    assert not state.next_year()
    assert (state.year, state.month) == (9999, 13)


def test_year_navigation_keeps_month():
    state = ViewState(today=date(2024, 3, 1))
    month = state.month
    assert state.next_year()
    assert (state.year, state.month) == (2025, month)
    assert state.prev_year()
    assert state.year == 2024


def test_go_to_month_and_year():
    state = ViewState(today=date(2024, 1, 1))
    assert state.go_to_month(7)
    assert state.month == 7
    assert not state.go_to_month(14)
    assert not state.go_to_month(7)
    assert state.go_to_year(20000)
    assert state.year == 9999
    assert state.go_to_year(-5)
    assert state.year == 1


def test_go_today_clears_selection():
    state = ViewState(today=date(2024, 1, 1))
    state.go_to_year(1990)
    state.select(state.days(today=date(2024, 1, 1))[3])
    state.go_today(today=date(2024, 12, 31))
    assert (state.year, state.month) == (2024, 13)
    assert state.selected is None


def test_selection_uses_ifc_equality():
    state = ViewState(today=date(2024, 6, 1))
    state.go_to_month(6)
    special = state.special(today=date(2024, 6, 1))
    assert special.ifc_date == LeapDay(2024)
    state.select(special)
    assert state.is_selected(special)
    assert not any(state.is_selected(d) for d in state.days(today=date(2024, 6, 1)))
    state.clear_selection()
    assert not state.is_selected(special)


def test_days_and_special_share_today():
    state = ViewState(today=date(2023, 12, 31))
    today = date(2023, 12, 31)
    assert not any(d.is_today for d in state.days(today))
    special = state.special(today)
    assert special.ifc_date == YearDay(2023)
    assert special.is_today


def test_title_marks_leap_years():
    state = ViewState(today=date(2024, 6, 18))
    assert state.title() == "Sol 2024 (leap year)"
    state.go_to_year(2023)
    assert state.title() == "Sol 2023"


def test_footer_text():
    today = date(2024, 1, 1)
    state = ViewState(today=today)
    assert state.footer_text(today) == "Today: January 1, 2024"
    day = state.days(today)[0]
    assert day.ifc_date == NormalDay(2024, 1, 1)
    state.select(day)
    assert state.footer_text(today) == "January 1, 2024 = Mon, Jan 1, 2024"


def test_toggle_dark_mode():
    state = ViewState(today=date(2024, 1, 1), dark_mode=False)
    assert state.toggle_dark_mode() is True
    assert state.dark_mode
    assert state.toggle_dark_mode() is False
