"""Tests for the sunset-aware day rollover."""

import datetime
from datetime import timedelta
from zoneinfo import ZoneInfo

import pytest

from custom_components.luach_board import zman_helper
from custom_components.luach_board.zman_helper import (
    _create_geo,
    _round_ceil,
    halachic_date,
    sunset_on,
)

TZ = ZoneInfo("Asia/Jerusalem")
GEO = _create_geo({"latitude": 31.778, "longitude": 35.235, "tzname": "Asia/Jerusalem"})
DAY = datetime.date(2024, 6, 21)


def _switch_time(offset: int) -> datetime.datetime:
    return _round_ceil(sunset_on(GEO, DAY, TZ) + timedelta(minutes=offset))


def test_jerusalem_summer_sunset():
    sunset = sunset_on(GEO, DAY, TZ)
    assert sunset.date() == DAY
    assert 19 <= sunset.hour <= 20


def test_round_ceil_always_moves_to_next_minute():
    at = datetime.datetime(2024, 6, 21, 19, 47, 0, tzinfo=TZ)
    assert _round_ceil(at) == datetime.datetime(2024, 6, 21, 19, 48, tzinfo=TZ)
    assert _round_ceil(at.replace(second=30)) == datetime.datetime(2024, 6, 21, 19, 48, tzinfo=TZ)


def test_daytime_is_civil_date():
    morning = datetime.datetime(2024, 6, 21, 8, 0, tzinfo=TZ)
    assert halachic_date(morning, GEO, TZ, 72) == DAY


@pytest.mark.parametrize("offset", [0, 72])
def test_rolls_over_at_sunset_plus_offset(offset):
    switch = _switch_time(offset)
    assert halachic_date(switch - timedelta(minutes=1), GEO, TZ, offset) == DAY
    assert halachic_date(switch, GEO, TZ, offset) == DAY + timedelta(days=1)
    assert halachic_date(switch + timedelta(minutes=1), GEO, TZ, offset) == DAY + timedelta(days=1)


def test_offset_delays_the_rollover():
    between = _switch_time(0) + timedelta(minutes=30)
    assert halachic_date(between, GEO, TZ, 0) == DAY + timedelta(days=1)
    assert halachic_date(between, GEO, TZ, 72) == DAY


def test_utc_input_is_converted_to_local_day():
    late = datetime.datetime(2024, 6, 21, 23, 30, tzinfo=TZ).astimezone(datetime.timezone.utc)
    assert halachic_date(late, GEO, TZ, 72) == DAY + timedelta(days=1)


def test_no_sunset_stays_on_civil_date(monkeypatch):
    monkeypatch.setattr(zman_helper, "sunset_on", lambda geo, day, tz: None)
    late = datetime.datetime(2024, 6, 21, 23, 59, tzinfo=TZ)
    assert halachic_date(late, GEO, TZ, 72) == DAY
