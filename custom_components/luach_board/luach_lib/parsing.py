# custom_components/luach_board/luach_lib/parsing.py
"""Lenient parsing of the YYYY-MM-DD strings stored by the settings screen."""

from __future__ import annotations

import datetime
from typing import NamedTuple


class CalendarDateParts(NamedTuple):
    day: int
    month: int
    year: int

    @property
    def is_empty(self) -> bool:
        return self.day == 0 or self.month == 0 or self.year == 0


EMPTY_DATE_PARTS = CalendarDateParts(0, 0, 0)


def parse_calendar_date_string(value: str | None) -> CalendarDateParts:
    """
    Split a ``YYYY-MM-DD`` string into numeric parts.

    Never raises: a missing or non-numeric component (or anything that is not a
    string) yields ``CalendarDateParts(0, 0, 0)``.
    """
    if not isinstance(value, str):
        return EMPTY_DATE_PARTS

    parts = value.strip().split("-")
    if len(parts) != 3 or not all(parts):
        return EMPTY_DATE_PARTS

    # ASCII digits only: int() would also take "1_0", "+1" or Arabic-Indic digits
    if not all(p.isascii() and p.isdigit() for p in parts):
        return EMPTY_DATE_PARTS

    year_str, month_str, day_str = parts
    try:
        return CalendarDateParts(int(day_str), int(month_str), int(year_str))
    except ValueError:
        # digit strings past the int() conversion limit
        return EMPTY_DATE_PARTS


def to_gregorian_date(value: str | None) -> datetime.date | None:
    """Return a real date for the string, or None if it is not one (e.g. 2023-02-30)."""
    parts = parse_calendar_date_string(value)
    if parts.is_empty:
        return None
    try:
        return datetime.date(parts.year, parts.month, parts.day)
    except (ValueError, OverflowError):
        return None
