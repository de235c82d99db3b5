"""IFC date value types — no UI dependencies.

An IFC date is one of three variants, each carrying its year:

- ``NormalDay``: one of the 28 days of one of the 13 regular months.
- ``YearDay``: the last day of every year, outside any month or week.
- ``LeapDay``: the day after IFC June 28 in Gregorian leap years, also outside
  any month or week.

The flat ``month`` / ``day`` / ``is_year_day`` / ``is_leap_day`` view is
available on every variant for display code; special days report 0/0.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Union

DAYS_PER_MONTH = 28
MONTHS_PER_YEAR = 13
MIN_YEAR = 1
MAX_YEAR = 9999


class InvalidDate(ValueError):
    """An IFC date that cannot exist (e.g. Leap Day in a non-leap year)."""


def _check_year(year: int) -> None:
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidDate(f"year must be {MIN_YEAR}-{MAX_YEAR}, got {year}")


@dataclass(frozen=True)
class NormalDay:
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        _check_year(self.year)
        if not 1 <= self.month <= MONTHS_PER_YEAR:
            raise InvalidDate(f"IFC month must be 1-{MONTHS_PER_YEAR}, got {self.month}")
        if not 1 <= self.day <= DAYS_PER_MONTH:
            raise InvalidDate(f"IFC day must be 1-{DAYS_PER_MONTH}, got {self.day}")

    @property
    def is_year_day(self) -> bool:
        return False

    @property
    def is_leap_day(self) -> bool:
        return False


@dataclass(frozen=True)
class YearDay:
    year: int

    def __post_init__(self) -> None:
        _check_year(self.year)

    @property
    def month(self) -> int:
        return 0

    @property
    def day(self) -> int:
        return 0

    @property
    def is_year_day(self) -> bool:
        return True

    @property
    def is_leap_day(self) -> bool:
        return False


@dataclass(frozen=True)
class LeapDay:
    # Only valid in leap years; checked when converted to Gregorian.
    year: int

    def __post_init__(self) -> None:
        _check_year(self.year)

    @property
    def month(self) -> int:
        return 0

    @property
    def day(self) -> int:
        return 0

    @property
    def is_year_day(self) -> bool:
        return False

    @property
    def is_leap_day(self) -> bool:
        return True


IFCDate = Union[NormalDay, YearDay, LeapDay]


@dataclass(frozen=True)
class CalendarDay:
    """One displayable day: the IFC date plus its Gregorian equivalent."""

    ifc_date: IFCDate
    gregorian_date: date
    is_today: bool = False
    is_current_month: bool = True

    @property
    def is_special(self) -> bool:
        return self.ifc_date.is_year_day or self.ifc_date.is_leap_day
