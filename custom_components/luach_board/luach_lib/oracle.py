# custom_components/luach_board/luach_lib/oracle.py
"""
Hebrew calendar capability used by the board logic.

The decision code never converts dates itself; it asks an oracle. The real
oracle is backed by pyluach:

    pip install pyluach

Absolute day numbers are Rata Die counts (``date.toordinal()``), so day 1 is
Monday, 1 January 1 CE and ``abs % 7`` gives 0=Sunday … 6=Saturday.
"""

from __future__ import annotations

import datetime
from collections.abc import Callable
from typing import Protocol

from pyluach.hebrewcal import HebrewDate as PHebrewDate, Year

from .models import HebrewDate

SATURDAY = 6  # abs % 7


class HebrewDateOracle(Protocol):
    def to_hebrew(self, gdate: datetime.date) -> HebrewDate: ...

    def is_leap_year(self, hebrew_year: int) -> bool: ...

    def current_hebrew_date(self) -> HebrewDate: ...

    def saturday_on_or_before(self, abs_day: int) -> int: ...

    def absolute_day_number(self, hdate: HebrewDate) -> int: ...


def day_on_or_before(weekday: int, abs_day: int) -> int:
    """Absolute day of the given weekday (0=Sunday) on or before ``abs_day``."""
    return abs_day - ((abs_day - weekday) % 7)


class PyluachOracle:
    """HebrewDateOracle backed by pyluach."""

    def __init__(self, today: Callable[[], datetime.date] | None = None) -> None:
        # "today" is injectable so callers can hand in a sunset-aware date
        self._today = today or datetime.date.today

    def to_hebrew(self, gdate: datetime.date) -> HebrewDate:
        hd = PHebrewDate.from_pydate(gdate)
        return HebrewDate(
            month=hd.month,
            day=hd.day,
            year=hd.year,
            is_leap_year=self.is_leap_year(hd.year),
        )

    def is_leap_year(self, hebrew_year: int) -> bool:
        return Year(hebrew_year).leap

    def current_hebrew_date(self) -> HebrewDate:
        return self.to_hebrew(self._today())

    def saturday_on_or_before(self, abs_day: int) -> int:
        return day_on_or_before(SATURDAY, abs_day)

    def absolute_day_number(self, hdate: HebrewDate) -> int:
        return PHebrewDate(hdate.year, hdate.month, hdate.day).to_pydate().toordinal()

    def to_gregorian(self, hdate: HebrewDate) -> datetime.date:
        return PHebrewDate(hdate.year, hdate.month, hdate.day).to_pydate()
