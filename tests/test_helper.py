"""Tests for the Hebrew display labels."""

import pytest

from custom_components.luach_board.luach_lib.helper import (
    hebrew_date_label,
    hebrew_month_name,
    int_to_hebrew,
)
from custom_components.luach_board.luach_lib.models import ADAR_I, ADAR_II, HebrewDate


@pytest.mark.parametrize(
    "num, expected",
    [
        (1, "א׳"),
        (5, "ה׳"),
        (10, "י׳"),
        (11, "י״א"),
        (15, "ט״ו"),
        (16, "ט״ז"),
        (29, "כ״ט"),
        (30, "ל׳"),
        (115, "קט״ו"),
    ],
)
def test_int_to_hebrew(num, expected):
    assert int_to_hebrew(num) == expected


def test_adar_names_depend_on_leap_year():
    assert hebrew_month_name(ADAR_I, False) == "אדר"
    assert hebrew_month_name(ADAR_I, True) == "אדר א׳"
    assert hebrew_month_name(ADAR_II, True) == "אדר ב׳"
    assert hebrew_month_name(99, False) == ""


def test_hebrew_date_label():
    assert hebrew_date_label(HebrewDate(ADAR_I, 29, 5784, True)) == "כ״ט אדר א׳"
    assert hebrew_date_label(HebrewDate(7, 1, 5785)) == "א׳ תשרי"
