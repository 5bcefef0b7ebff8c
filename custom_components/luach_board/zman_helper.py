# custom_components/luach_board/zman_helper.py
"""Sunset-aware ("halachic") day for the board, via the zmanim library."""

from __future__ import annotations

import datetime
from datetime import timedelta
from zoneinfo import ZoneInfo

from homeassistant.core import HomeAssistant
from zmanim.zmanim_calendar import ZmanimCalendar
from zmanim.util.geo_location import GeoLocation

from .const import DOMAIN


def _create_geo(config) -> GeoLocation:
    return GeoLocation(
        name="Luach Board",
        latitude=config["latitude"],
        longitude=config["longitude"],
        time_zone=config["tzname"],
        elevation=0,
    )


async def get_geo(hass: HomeAssistant) -> GeoLocation:
    config = hass.data[DOMAIN]["config"]
    return await hass.async_add_executor_job(_create_geo, config)


def _round_ceil(dt: datetime.datetime) -> datetime.datetime:
    """Always bump to the next full minute (Motzi-style)."""
    return (dt + timedelta(minutes=1)).replace(second=0, microsecond=0)


def sunset_on(geo: GeoLocation, day: datetime.date, tz: ZoneInfo) -> datetime.datetime | None:
    sunset = ZmanimCalendar(geo_location=geo, date=day).sunset()
    return sunset.astimezone(tz) if sunset is not None else None


def halachic_date(
    now: datetime.datetime,
    geo: GeoLocation,
    tz: ZoneInfo,
    havdalah_offset: int,
) -> datetime.date:
    """Civil date, rolled forward once sunset + havdalah offset has passed."""
    now = now.astimezone(tz)
    sunset = sunset_on(geo, now.date(), tz)
    if sunset is None:
        # No sunset (polar day/night): stay on the civil date
        return now.date()
    switch_time = _round_ceil(sunset + timedelta(minutes=havdalah_offset))
    return now.date() + timedelta(days=1) if now >= switch_time else now.date()
