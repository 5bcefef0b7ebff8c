# custom_components/luach_board/luach_lib/yahrzeit.py
"""
Which memorial names are "due" in the current Hebrew month.

Adar resolution:

    today leap,    death leap     → exact month (Adar I ↔ Adar I, Adar II ↔ Adar II)
    today leap,    death regular  → shown in Adar I only
    today regular, death any year → every Adar / Adar I / Adar II death shows in Adar

A regular-year Adar yahrzeit is kept in Adar I of a leap year. Some communities
keep it in Adar II; changing that is a minhag decision, not a bug fix.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .models import (
    ADAR_I,
    DISPLAY_MODE_ALL,
    DISPLAY_MODE_MONTHLY,
    DisplayModeConfig,
    HebrewDate,
    MemorialRecord,
    PagingResult,
)
from .oracle import HebrewDateOracle
from .pagination import paginate
from .parsing import to_gregorian_date

_LOGGER = logging.getLogger(__name__)


def is_yahrzeit_month(death: HebrewDate, today: HebrewDate) -> bool:
    """Return True if a death on ``death`` is observed in ``today``'s month."""
    if not (death.is_adar and today.is_adar):
        return death.month == today.month

    if today.is_leap_year:
        if death.is_leap_year:
            return death.month == today.month
        return today.month == ADAR_I

    # Regular year: Adar I and Adar II both collapse onto the single Adar
    return True


def filter_by_month(
    records: Sequence[MemorialRecord],
    today: HebrewDate,
    oracle: HebrewDateOracle,
    mode: str = DISPLAY_MODE_MONTHLY,
) -> list[MemorialRecord]:
    """
    Keep the records whose yahrzeit falls in ``today``'s Hebrew month.

    ``mode='all'`` returns the records untouched. Records without a usable
    ``date_of_death`` are skipped, never raised on.
    """
    if mode == DISPLAY_MODE_ALL:
        return list(records)

    due: list[MemorialRecord] = []
    for record in records:
        gdate = to_gregorian_date(record.date_of_death)
        if gdate is None:
            _LOGGER.debug(
                "Memorial %s has no usable date of death (%r)",
                record.id,
                record.date_of_death,
            )
            continue
        if is_yahrzeit_month(oracle.to_hebrew(gdate), today):
            due.append(record)
    return due


def calculate_memorial_pages(
    records: Sequence[MemorialRecord],
    config: DisplayModeConfig,
    today: HebrewDate,
    oracle: HebrewDateOracle,
) -> PagingResult:
    """Filter by the configured display mode, then split into grid pages."""
    if not records:
        return PagingResult([], 0)

    filtered = filter_by_month(records, today, oracle, mode=config.mode)
    return paginate(filtered, config.grid_rows, config.grid_columns)


def has_complete_dates(record: MemorialRecord) -> bool:
    """Both civil and Hebrew dates of birth and death are filled in."""
    return bool(
        record.date_of_birth
        and record.date_of_death
        and record.hebrew_date_of_birth
        and record.hebrew_date_of_death
    )


def calculate_age_at_death(date_of_birth: str | None, date_of_death: str | None) -> int | None:
    """Whole years lived, or None when either date is unusable or death precedes birth."""
    born = to_gregorian_date(date_of_birth)
    died = to_gregorian_date(date_of_death)
    if born is None or died is None or died < born:
        return None

    age = died.year - born.year
    if (died.month, died.day) < (born.month, born.day):
        age -= 1
    return age
