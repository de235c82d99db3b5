"""Pure IFC calendar calculations — no UI dependencies."""

from __future__ import annotations

from datetime import date, timedelta

from ifc_types import (
    DAYS_PER_MONTH,
    MAX_YEAR,
    MIN_YEAR,
    MONTHS_PER_YEAR,
    CalendarDay,
    IFCDate,
    InvalidDate,
    LeapDay,
    NormalDay,
    YearDay,
)

# Month 7 (Sol) is the extra month between June and July
MONTH_NAMES = (
    "",
    "January", "February", "March", "April", "May", "June",
    "Sol",
    "July", "August", "September", "October", "November", "December",
)

# Display only: IFC weeks restart after each special day
DAY_ABBR = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

YEAR_DAY_NAME = "Year Day"
LEAP_DAY_NAME = "Leap Day"

LEAP_DAY_AFTER_MONTH = 6
YEAR_DAY_AFTER_MONTH = 13
LEAP_DAY_POSITION = LEAP_DAY_AFTER_MONTH * DAYS_PER_MONTH + 1  # day 169

_GREG_MONTH_ABBR = (
    "", "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
_GREG_DAY_ABBR = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule, defined for any integer year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def day_of_year(d: date) -> int:
    """Return the 1-based day-of-year for the given date."""
    return d.timetuple().tm_yday


def _year_length(year: int) -> int:
    return 366 if is_leap_year(year) else 365


# ------------------------------------------------------------------
# Conversion
# ------------------------------------------------------------------
def gregorian_to_ifc(d: date) -> IFCDate:
    """Convert a civil Gregorian date to its IFC date.

    The last day of every year is Year Day. In leap years day 169 (the day
    after IFC June 28) is Leap Day and later days shift back by one so that
    Sol through December keep their 28-day grid.
    """
    year = d.year
    doy = day_of_year(d)
    leap = is_leap_year(year)

    if doy == _year_length(year):
        return YearDay(year)
    if leap and doy == LEAP_DAY_POSITION:
        return LeapDay(year)

    adjusted = doy - 1 if leap and doy > LEAP_DAY_POSITION else doy
    month = (adjusted + DAYS_PER_MONTH - 1) // DAYS_PER_MONTH
    day = (adjusted - 1) % DAYS_PER_MONTH + 1
    return NormalDay(year, month, day)


def ifc_to_gregorian(ifc: IFCDate) -> date:
    """Convert an IFC date back to a civil Gregorian date.

    Raises InvalidDate for a Leap Day outside a leap year.
    """
    year = ifc.year
    leap = is_leap_year(year)

    if ifc.is_year_day:
        doy = _year_length(year)
    elif ifc.is_leap_day:
        if not leap:
            raise InvalidDate(f"Leap Day does not exist in {year} (not a leap year)")
        doy = LEAP_DAY_POSITION
    else:
        doy = (ifc.month - 1) * DAYS_PER_MONTH + ifc.day
        if leap and ifc.month > LEAP_DAY_AFTER_MONTH:
            doy += 1

    return date(year, 1, 1) + timedelta(days=doy - 1)


def today_ifc(today: date | None = None) -> IFCDate:
    """Return today's IFC date (or that of the given civil date)."""
    if today is None:
        today = date.today()
    return gregorian_to_ifc(today)


def same_ifc_date(a: IFCDate, b: IFCDate) -> bool:
    """Return True if both values denote the same IFC day."""
    if a.is_year_day or b.is_year_day:
        return a.is_year_day and b.is_year_day and a.year == b.year
    if a.is_leap_day or b.is_leap_day:
        return a.is_leap_day and b.is_leap_day and a.year == b.year
    return a.year == b.year and a.month == b.month and a.day == b.day


# ------------------------------------------------------------------
# Navigation
# ------------------------------------------------------------------
def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one IFC month earlier."""
    if month == 1:
        return year - 1, MONTHS_PER_YEAR
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one IFC month later."""
    if month == MONTHS_PER_YEAR:
        return year + 1, 1
    return year, month + 1


def is_valid_year(year: int) -> bool:
    return MIN_YEAR <= year <= MAX_YEAR


def is_valid_month(month: int) -> bool:
    return 1 <= month <= MONTHS_PER_YEAR


# ------------------------------------------------------------------
# Month enumeration
# ------------------------------------------------------------------
def _calendar_day(ifc: IFCDate, today: IFCDate) -> CalendarDay:
    return CalendarDay(
        ifc_date=ifc,
        gregorian_date=ifc_to_gregorian(ifc),
        is_today=same_ifc_date(ifc, today),
        is_current_month=True,
    )


def month_days(year: int, month: int,
               today: IFCDate | None = None) -> list[CalendarDay]:
    """Return the 28 regular days of an IFC month, day 1 first.

    ``today`` is the caller's snapshot of the current IFC date; it is
    sampled once here when not given.
    """
    if today is None:
        today = today_ifc()
    return [
        _calendar_day(NormalDay(year, month, day), today)
        for day in range(1, DAYS_PER_MONTH + 1)
    ]


def special_day(year: int, month: int,
                today: IFCDate | None = None) -> CalendarDay | None:
    """Return the intercalary day that follows the given month, if any.

    Leap Day follows June in leap years, Year Day follows December.
    """
    if month == LEAP_DAY_AFTER_MONTH and is_leap_year(year):
        ifc: IFCDate = LeapDay(year)
    elif month == YEAR_DAY_AFTER_MONTH:
        ifc = YearDay(year)
    else:
        return None
    if today is None:
        today = today_ifc()
    return _calendar_day(ifc, today)


# ------------------------------------------------------------------
# Display strings
# ------------------------------------------------------------------
def month_name(month: int) -> str:
    if not is_valid_month(month):
        return ""
    return MONTH_NAMES[month]


def format_ifc_date(ifc: IFCDate) -> str:
    """'Sol 12, 2024', 'Year Day, 2024' or 'Leap Day, 2024'."""
    if ifc.is_year_day:
        return f"{YEAR_DAY_NAME}, {ifc.year}"
    if ifc.is_leap_day:
        return f"{LEAP_DAY_NAME}, {ifc.year}"
    return f"{MONTH_NAMES[ifc.month]} {ifc.day}, {ifc.year}"


def format_gregorian_date(d: date) -> str:
    """Short en-US style date, e.g. 'Sat, Jun 29, 2024'."""
    return f"{_GREG_DAY_ABBR[d.weekday()]}, {_GREG_MONTH_ABBR[d.month]} {d.day}, {d.year}"
