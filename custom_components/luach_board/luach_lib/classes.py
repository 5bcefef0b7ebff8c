# custom_components/luach_board/luach_lib/classes.py
"""Weekly class (shiur) schedule: which classes run today, in time order, a few per page."""

from __future__ import annotations

import datetime
import math
import re
from collections.abc import Sequence

from .models import Shiur
from .pagination import slice_for_page

CLASSES_PER_PAGE = 3

# 0=Sunday … 6=Saturday, as stored by the settings screen
WEEKDAY_KEYS: list[str] = [
    "sunday",
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
]

WEEKDAY_NAMES_HE: list[str] = [
    "ראשון",
    "שני",
    "שלישי",
    "רביעי",
    "חמישי",
    "שישי",
    "שבת",
]

_TIME_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")


def weekday_number(day: datetime.date) -> int:
    """Sunday-based weekday (Python's ``weekday()`` is Monday-based)."""
    return (day.weekday() + 1) % 7


def validate_day_numbers(day_numbers: Sequence[int]) -> bool:
    return all(0 <= num <= 6 for num in day_numbers)


def day_names(day_numbers: Sequence[int], names: Sequence[str] = WEEKDAY_NAMES_HE) -> str:
    """Comma-separated names for the given weekdays; unknown numbers are dropped."""
    return ", ".join(names[num] for num in day_numbers if 0 <= num <= 6)


def format_time_range(start: str, end: str) -> str:
    return f"{start}-{end}"


def calculate_sub_pages(classes_count: int, per_page: int = CLASSES_PER_PAGE) -> int:
    if not classes_count or per_page < 1:
        return 0
    return math.ceil(classes_count / per_page)


def current_page_classes(
    classes: Sequence[Shiur], page_index: int, per_page: int = CLASSES_PER_PAGE
) -> list[Shiur]:
    return slice_for_page(classes, page_index, per_page)


def start_minutes(shiur: Shiur) -> int | None:
    """Minutes after midnight for ``shiur.start``, None when it is not HH:MM."""
    match = _TIME_RE.match(shiur.start)
    if not match:
        return None
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        return None
    return hours * 60 + minutes


def sort_classes_by_time(classes: Sequence[Shiur]) -> list[Shiur]:
    """Earliest first; classes without a usable start time go last, in input order."""
    return sorted(
        classes,
        key=lambda s: (start_minutes(s) is None, start_minutes(s) or 0),
    )


def is_class_today(shiur: Shiur, day_of_week: int) -> bool:
    return day_of_week in shiur.days


def filter_classes_by_day(classes: Sequence[Shiur], day_of_week: int) -> list[Shiur]:
    return [s for s in classes if is_class_today(s, day_of_week)]


def todays_classes(classes: Sequence[Shiur], reference: datetime.date) -> list[Shiur]:
    """Classes held on ``reference``'s weekday, sorted by start time."""
    return sort_classes_by_time(filter_classes_by_day(classes, weekday_number(reference)))
