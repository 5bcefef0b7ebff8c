"""Tests for the Morid HaTal / V'sen Bracha windows."""

import pytest

from custom_components.luach_board.luach_lib.models import CHESHVAN, NISAN, TISHREI
from custom_components.luach_board.luach_lib.seasons import (
    HebrewRangeEdge,
    is_between_hebrew_range,
    is_morid_hatal,
    is_vsen_bracha,
)

SIVAN = 3
ELUL = 6
SHEVAT = 11
SUNSET = 19


@pytest.mark.parametrize(
    "month, day, hour, expected",
    [
        (NISAN, 14, 12, False),
        (NISAN, 15, 9, False),
        (NISAN, 15, 10, True),
        (NISAN, 15, 20, False),
        (NISAN, 16, 2, True),
        (SIVAN, 1, 12, True),
        (ELUL, 29, 23, True),
        (TISHREI, 21, 23, True),
        (TISHREI, 22, 9, True),
        (TISHREI, 22, 10, False),
        (TISHREI, 23, 8, False),
        (CHESHVAN, 1, 12, False),
        (SHEVAT, 1, 12, False),
    ],
)
def test_morid_hatal(month, day, hour, expected):
    assert is_morid_hatal(month, day, hour, SUNSET) is expected


@pytest.mark.parametrize(
    "month, day, hour, expected",
    [
        (NISAN, 15, 10, True),
        (TISHREI, 25, 12, True),
        (CHESHVAN, 5, 23, True),
        (CHESHVAN, 6, 23, True),
        (CHESHVAN, 7, 0, False),
        (SHEVAT, 10, 12, False),
    ],
)
def test_vsen_bracha(month, day, hour, expected):
    assert is_vsen_bracha(month, day, hour, SUNSET) is expected


def test_start_without_hour_opens_at_midnight():
    start = HebrewRangeEdge(1, SIVAN)
    end = HebrewRangeEdge(1, ELUL)
    assert is_between_hebrew_range(SIVAN, 1, 0, SUNSET, start, end)
    assert is_between_hebrew_range(ELUL, 1, 23, SUNSET, start, end)
    assert not is_between_hebrew_range(ELUL, 2, 0, SUNSET, start, end)
