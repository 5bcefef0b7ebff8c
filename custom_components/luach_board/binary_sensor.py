#/config/custom_components/luach_board/binary_sensor.py
from __future__ import annotations

import datetime
import logging
from zoneinfo import ZoneInfo

import homeassistant.util.dt as dt_util
from homeassistant.components.binary_sensor import BinarySensorEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.helpers.event import async_track_time_change
from homeassistant.helpers.restore_state import RestoreEntity

from .config_flow import (
    CONF_HAVDALAH_OFFSET,
    CONF_NUSACH,
    DEFAULT_HAVDALAH_OFFSET,
    DEFAULT_NUSACH,
)
from .device import LuachBoardPrayerDevice
from .luach_lib.helper import hebrew_date_label
from .luach_lib.models import ELUL, HebrewDate, SlichosContext
from .luach_lib.oracle import PyluachOracle
from .luach_lib.seasons import is_morid_hatal, is_vsen_bracha
from .luach_lib.slichos import ashkenaz_slichos_start, is_slichos_tonight
from .zman_helper import get_geo, halachic_date, sunset_on

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    async_add_entities(
        [
            SlichosTonightSensor(hass),
            MoridHatalSensor(hass),
            VsenBrachaSensor(hass),
        ],
        update_before_add=False,
    )


class _HalachicDayBinarySensor(LuachBoardPrayerDevice, RestoreEntity, BinarySensorEntity):
    """Shared plumbing: halachic Hebrew date, restored state, top-of-minute updates."""

    _attr_should_poll = False

    def __init__(self, hass: HomeAssistant, slug: str) -> None:
        super().__init__()
        self._attr_unique_id = f"luach_board_{slug}"
        self.entity_id = f"binary_sensor.luach_board_{slug}"
        self.hass = hass

        cfg = self._board_config()
        self._tz = ZoneInfo(cfg.get("tzname", hass.config.time_zone))
        self._havdalah_offset = cfg.get(CONF_HAVDALAH_OFFSET, DEFAULT_HAVDALAH_OFFSET)
        self._oracle = PyluachOracle()
        self._geo = None
        self._attr_is_on = False
        self._attr_extra_state_attributes = {}

    async def async_added_to_hass(self) -> None:
        await super().async_added_to_hass()
        last = await self.async_get_last_state()
        if last:
            self._attr_is_on = (last.state or "").lower() == "on"

        self._geo = await get_geo(self.hass)
        await self.async_update()

        self._register_listener(
            async_track_time_change(self.hass, self.async_update, second=0)
        )

    def _today(self, now: datetime.datetime) -> HebrewDate:
        return self._oracle.to_hebrew(
            halachic_date(now, self._geo, self._tz, self._havdalah_offset)
        )

    async def async_update(self, now: datetime.datetime | None = None) -> None:
        if self._geo is None:
            return
        now = (now or dt_util.now()).astimezone(self._tz)
        self._evaluate(now, self._today(now))
        self.async_write_ha_state()

    def _evaluate(self, now: datetime.datetime, today: HebrewDate) -> None:
        raise NotImplementedError


class SlichosTonightSensor(_HalachicDayBinarySensor):
    """On when Slichos is said tonight for the configured nusach."""

    _attr_name = "Slichos Tonight"
    _attr_icon = "mdi:book-open-variant"

    def __init__(self, hass: HomeAssistant) -> None:
        super().__init__(hass, "slichos_tonight")
        self._nusach = self._board_config().get(CONF_NUSACH, DEFAULT_NUSACH)

    def _evaluate(self, now: datetime.datetime, today: HebrewDate) -> None:
        context = SlichosContext(
            hebrew_month=today.month,
            hebrew_day=today.day,
            hour=now.hour,
            leap_year=today.is_leap_year,
            nusach=self._nusach,
            hebrew_year=today.year,
        )
        self._attr_is_on = is_slichos_tonight(context, self._oracle)

        attrs = {
            "Nusach": self._nusach,
            "Hebrew_Date": hebrew_date_label(today),
        }
        if today.month == ELUL:
            start_abs = ashkenaz_slichos_start(today.year, self._oracle)
            attrs["Ashkenaz_First_Slichos"] = datetime.date.fromordinal(start_abs).isoformat()
        self._attr_extra_state_attributes = attrs


class _SeasonalSensor(_HalachicDayBinarySensor):
    _check = None

    def _evaluate(self, now: datetime.datetime, today: HebrewDate) -> None:
        sunset = sunset_on(self._geo, now.date(), self._tz)
        sunset_hour = sunset.hour if sunset is not None else 18
        self._attr_is_on = type(self)._check(today.month, today.day, now.hour, sunset_hour)
        self._attr_extra_state_attributes = {"Hebrew_Date": hebrew_date_label(today)}


class MoridHatalSensor(_SeasonalSensor):
    """On from 15 Nisan (after Musaf) until 22 Tishrei (Musaf)."""

    _attr_name = "Morid HaTal"
    _attr_icon = "mdi:weather-fog"
    _check = staticmethod(is_morid_hatal)

    def __init__(self, hass: HomeAssistant) -> None:
        super().__init__(hass, "morid_hatal")


class VsenBrachaSensor(_SeasonalSensor):
    """On from 15 Nisan until 6 Cheshvan (V'sen Bracha instead of Tal U'Matar)."""

    _attr_name = "V'sen Bracha"
    _attr_icon = "mdi:weather-sunny"
    _check = staticmethod(is_vsen_bracha)

    def __init__(self, hass: HomeAssistant) -> None:
        super().__init__(hass, "vsen_bracha")
