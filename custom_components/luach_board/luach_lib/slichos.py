# custom_components/luach_board/luach_lib/slichos.py
"""
Is Slichos said tonight?

Sephardim start on 2 Elul. Ashkenazim start on the Motzaei Shabbos that is at
least four days before Rosh HaShanah, i.e. the Saturday on or before
(1 Tishrei − 4), and keep going through Erev Rosh HaShanah. Aseres Yemei
Teshuvah (2–8 Tishrei) is Slichos for everyone; otherwise an early-morning
grace window (before 09:00) covers the previous night's recitation.
"""

from __future__ import annotations

from .models import ELUL, NUSACH_ASHKENAZ, TISHREI, HebrewDate, SlichosContext
from .oracle import HebrewDateOracle, PyluachOracle

MORNING_CUTOFF_HOUR = 9
ASHKENAZ_WINDOW_DAYS = 11


def ashkenaz_slichos_start(hebrew_year: int, oracle: HebrewDateOracle) -> int:
    """Absolute day of the first Slichos Saturday before Rosh HaShanah of ``hebrew_year + 1``."""
    next_year = hebrew_year + 1
    rosh_hashana = HebrewDate(
        month=TISHREI,
        day=1,
        year=next_year,
        is_leap_year=oracle.is_leap_year(next_year),
    )
    return oracle.saturday_on_or_before(oracle.absolute_day_number(rosh_hashana) - 4)


def is_slichos_tonight(
    context: SlichosContext, oracle: HebrewDateOracle | None = None
) -> bool:
    month = context.hebrew_month
    day = context.hebrew_day

    if month not in (ELUL, TISHREI):
        return False

    if month == TISHREI:
        if 2 <= day <= 8:
            return True
        return context.hour < MORNING_CUTOFF_HOUR

    if day == 29:
        return context.hour < MORNING_CUTOFF_HOUR

    if context.nusach == NUSACH_ASHKENAZ:
        oracle = oracle or PyluachOracle()
        start = ashkenaz_slichos_start(context.hebrew_year, oracle)
        today_abs = oracle.absolute_day_number(
            HebrewDate(
                month=month,
                day=day,
                year=context.hebrew_year,
                is_leap_year=context.leap_year,
            )
        )
        return start <= today_abs <= start + ASHKENAZ_WINDOW_DAYS

    return day >= 2
