# custom_components/luach_board/luach_lib/helper.py
"""Hebrew display strings for board labels."""

from __future__ import annotations

from .models import ADAR_I, ADAR_II, HebrewDate

GERESH = "׳"
GERSHAYIM = "״"

_LETTERS: list[tuple[int, str]] = [
    (400, "ת"), (300, "ש"), (200, "ר"), (100, "ק"),
    (90, "צ"), (80, "פ"), (70, "ע"), (60, "ס"), (50, "נ"),
    (40, "מ"), (30, "ל"), (20, "כ"), (10, "י"),
    (9, "ט"), (8, "ח"), (7, "ז"), (6, "ו"), (5, "ה"),
    (4, "ד"), (3, "ג"), (2, "ב"), (1, "א"),
]

# 15/16 are never spelled with the letters of the Name
_AVOID = {15: "טו", 16: "טז"}

MONTH_NAMES: dict[int, str] = {
    1: "ניסן",
    2: "אייר",
    3: "סיון",
    4: "תמוז",
    5: "אב",
    6: "אלול",
    7: "תשרי",
    8: "חשון",
    9: "כסלו",
    10: "טבת",
    11: "שבט",
    12: "אדר",
    13: "אדר ב׳",
}


def int_to_hebrew(num: int) -> str:
    """
    Hebrew numerals with geresh / gershayim.

    5 → 'ה׳', 15 → 'ט״ו', 29 → 'כ״ט', 115 → 'קט״ו'
    """
    tail = ""
    rest = num
    if num % 100 in _AVOID:
        tail = _AVOID[num % 100]
        rest = num - num % 100

    letters = []
    for value, letter in _LETTERS:
        count, rest = divmod(rest, value)
        letters.append(letter * count)
    result = "".join(letters) + tail

    if len(result) > 1:
        return f"{result[:-1]}{GERSHAYIM}{result[-1]}"
    return f"{result}{GERESH}"


def hebrew_month_name(month: int, leap: bool) -> str:
    if month == ADAR_I and leap:
        return "אדר א׳"
    return MONTH_NAMES.get(month, "")


def hebrew_date_label(hdate: HebrewDate) -> str:
    """e.g. 'כ״ט אדר א׳'"""
    return f"{int_to_hebrew(hdate.day)} {hebrew_month_name(hdate.month, hdate.is_leap_year)}"
