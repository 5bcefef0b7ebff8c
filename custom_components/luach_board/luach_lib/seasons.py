# custom_components/luach_board/luach_lib/seasons.py
"""Hebrew date windows that switch a phrase in davening on and off."""

from __future__ import annotations

from typing import NamedTuple

from .models import CHESHVAN, NISAN, TISHREI


class HebrewRangeEdge(NamedTuple):
    day: int
    month: int
    hour: int | None = None


MORID_HATAL = (HebrewRangeEdge(15, NISAN, 10), HebrewRangeEdge(22, TISHREI, 10))
VSEN_BRACHA = (HebrewRangeEdge(15, NISAN, 10), HebrewRangeEdge(6, CHESHVAN))


def is_between_hebrew_range(
    month: int,
    day: int,
    hour: int,
    sunset_hour: int,
    start: HebrewRangeEdge,
    end: HebrewRangeEdge,
) -> bool:
    """
    True when (month, day, hour) lies inside ``start`` … ``end``.

    On the start day the window opens at ``start.hour`` and only counts until
    sunset (after sunset the Hebrew date has already moved on). On the end day
    it closes at ``end.hour``, or stays open all day when that is None.
    Months are compared by pyluach number, so the range must not wrap past Adar.
    """
    if month == start.month:
        if day > start.day:
            return True
        start_hour = start.hour or 0
        return day == start.day and start_hour <= hour <= sunset_hour

    if month == end.month:
        if day < end.day:
            return True
        return day == end.day and (end.hour is None or hour < end.hour)

    return start.month < month < end.month


def is_morid_hatal(month: int, day: int, hour: int, sunset_hour: int) -> bool:
    return is_between_hebrew_range(month, day, hour, sunset_hour, *MORID_HATAL)


def is_vsen_bracha(month: int, day: int, hour: int, sunset_hour: int) -> bool:
    return is_between_hebrew_range(month, day, hour, sunset_hour, *VSEN_BRACHA)
