"""
Shared fixtures for the board logic tests.

FakeOracle answers from lookup tables so the filters can be driven with exact
Hebrew dates; tests that need real calendar arithmetic use PyluachOracle.
"""

import datetime

import pytest

from custom_components.luach_board.luach_lib.models import HebrewDate, MemorialRecord
from custom_components.luach_board.luach_lib.oracle import SATURDAY, day_on_or_before


class FakeOracle:
    """Deterministic HebrewDateOracle: ISO date string -> HebrewDate."""

    def __init__(self, dates=None, leap_years=(), absolute=None, today=None):
        self.dates = dict(dates or {})
        self.leap_years = set(leap_years)
        self.absolute = dict(absolute or {})
        self.today = today

    def to_hebrew(self, gdate: datetime.date) -> HebrewDate:
        return self.dates[gdate.isoformat()]

    def is_leap_year(self, hebrew_year: int) -> bool:
        return hebrew_year in self.leap_years

    def current_hebrew_date(self) -> HebrewDate:
        return self.today

    def saturday_on_or_before(self, abs_day: int) -> int:
        return day_on_or_before(SATURDAY, abs_day)

    def absolute_day_number(self, hdate: HebrewDate) -> int:
        return self.absolute[(hdate.year, hdate.month, hdate.day)]


def make_record(rec_id: str, date_of_death=None, **kwargs) -> MemorialRecord:
    return MemorialRecord(id=rec_id, name=f"Name {rec_id}", date_of_death=date_of_death, **kwargs)


@pytest.fixture
def fake_oracle() -> FakeOracle:
    return FakeOracle()
