"""Navigation state of the month window, kept free of tkinter."""

from __future__ import annotations

import logging
from datetime import date

from calendar_logic import (
    LEAP_DAY_AFTER_MONTH,
    MAX_YEAR,
    MIN_YEAR,
    YEAR_DAY_AFTER_MONTH,
    format_gregorian_date,
    format_ifc_date,
    is_leap_year,
    is_valid_month,
    month_days,
    month_name,
    next_month,
    prev_month,
    same_ifc_date,
    special_day,
    today_ifc,
)
from ifc_types import CalendarDay, IFCDate

log = logging.getLogger(__name__)


def _home_month(ifc: IFCDate) -> int:
    """The month a date is displayed under; special days sit after one."""
    if ifc.is_year_day:
        return YEAR_DAY_AFTER_MONTH
    if ifc.is_leap_day:
        return LEAP_DAY_AFTER_MONTH
    return ifc.month


class ViewState:
    """Which IFC month is shown, which day is selected, and the theme."""

    def __init__(self, today: date | None = None, dark_mode: bool = False) -> None:
        ifc = today_ifc(today)
        self.year: int = ifc.year
        self.month: int = _home_month(ifc)
        self.selected: CalendarDay | None = None
        self.dark_mode = dark_mode

    # ------------------------------------------------------------------
    # Range limits
    # ------------------------------------------------------------------
    @property
    def can_go_prev(self) -> bool:
        return self.year > MIN_YEAR or (self.year == MIN_YEAR and self.month > 1)

    @property
    def can_go_next(self) -> bool:
        return self.year < MAX_YEAR or (self.year == MAX_YEAR and self.month < 13)

    # ------------------------------------------------------------------
    # Navigation — each returns True when the view moved
    # ------------------------------------------------------------------
    def prev_month(self) -> bool:
        if not self.can_go_prev:
            log.debug("Already at first month %d/%d", self.year, self.month)
            return False
        self.year, self.month = prev_month(self.year, self.month)
        log.debug("Showing %d/%d", self.year, self.month)
        return True

    def next_month(self) -> bool:
        if not self.can_go_next:
            log.debug("Already at last month %d/%d", self.year, self.month)
            return False
        self.year, self.month = next_month(self.year, self.month)
        log.debug("Showing %d/%d", self.year, self.month)
        return True

    def prev_year(self) -> bool:
        if self.year <= MIN_YEAR:
            return False
        self.year -= 1
        return True

    def next_year(self) -> bool:
        if self.year >= MAX_YEAR:
            return False
        self.year += 1
        return True

    def go_to_month(self, month: int) -> bool:
        if not is_valid_month(month) or month == self.month:
            return False
        self.month = month
        return True

    def go_to_year(self, year: int) -> bool:
        clamped = max(MIN_YEAR, min(MAX_YEAR, year))
        if clamped != year:
            log.debug("Clamped year %d to %d", year, clamped)
        if clamped == self.year:
            return False
        self.year = clamped
        return True

    def go_today(self, today: date | None = None) -> None:
        ifc = today_ifc(today)
        self.year = ifc.year
        self.month = _home_month(ifc)
        self.clear_selection()

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    def select(self, day: CalendarDay) -> None:
        self.selected = day

    def clear_selection(self) -> None:
        self.selected = None

    def is_selected(self, day: CalendarDay) -> bool:
        return self.selected is not None and same_ifc_date(
            self.selected.ifc_date, day.ifc_date)

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------
    def days(self, today: date | None = None) -> list[CalendarDay]:
        return month_days(self.year, self.month, today_ifc(today))

    def special(self, today: date | None = None) -> CalendarDay | None:
        return special_day(self.year, self.month, today_ifc(today))

    def title(self) -> str:
        text = f"{month_name(self.month)} {self.year}"
        if is_leap_year(self.year):
            text += " (leap year)"
        return text

    def footer_text(self, today: date | None = None) -> str:
        if self.selected is not None:
            return (f"{format_ifc_date(self.selected.ifc_date)} = "
                    f"{format_gregorian_date(self.selected.gregorian_date)}")
        return f"Today: {format_ifc_date(today_ifc(today))}"

    def toggle_dark_mode(self) -> bool:
        self.dark_mode = not self.dark_mode
        return self.dark_mode
