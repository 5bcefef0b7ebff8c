# custom_components/luach_board/device.py
from __future__ import annotations

import logging
from datetime import timedelta
from collections.abc import Callable

from homeassistant.helpers.device_registry import DeviceEntryType, DeviceInfo
from homeassistant.helpers.event import async_track_time_interval
from homeassistant.helpers.entity import Entity

from .const import DOMAIN

_LOGGER = logging.getLogger(__name__)


class LuachBoardDevice(Entity):
    """Base mixin for ALL Luach Board entities: shared DeviceInfo + listener management."""

    _attr_device_info = DeviceInfo(
        identifiers={(DOMAIN, "luach_board_main")},
        name="Luach Board",
        manufacturer="Luach Board",
        model="Synagogue Lobby Display",
        entry_type=DeviceEntryType.SERVICE,
    )

    def __init__(self, *args, **kwargs) -> None:
        super().__init__()
        self._listener_unsubs: list[Callable[[], None]] = []

    def _board_config(self) -> dict:
        return self.hass.data.get(DOMAIN, {}).get("config", {})

    # --- Listener helpers (usable by any subclass) ---
    def _register_listener(self, unsub: Callable[[], None]) -> None:
        self._listener_unsubs.append(unsub)

    def _register_interval(self, hass, callback, interval: timedelta):
        """Register an interval callback and remember its unsubscribe."""
        unsub = async_track_time_interval(hass, callback, interval)
        self._register_listener(unsub)
        return unsub

    async def async_will_remove_from_hass(self) -> None:
        """On entity removal, clean up any registered listeners."""
        for unsub in self._listener_unsubs:
            try:
                unsub()
            except Exception:  # noqa: BLE001
                _LOGGER.debug("Listener already removed for %s", self.entity_id)
        self._listener_unsubs.clear()
        await super().async_will_remove_from_hass()


class LuachBoardDisplayDevice(LuachBoardDevice):
    _attr_device_info = DeviceInfo(
        identifiers={(DOMAIN, "luach_board_display")},
        name="Luach Board — Display",
        manufacturer="Luach Board",
        model="Memorial & Announcement Screens",
        entry_type=DeviceEntryType.SERVICE,
    )


class LuachBoardPrayerDevice(LuachBoardDevice):
    _attr_device_info = DeviceInfo(
        identifiers={(DOMAIN, "luach_board_prayer")},
        name="Luach Board — Prayer Flags",
        manufacturer="Luach Board",
        model="Slichos & Seasonal Flags",
        entry_type=DeviceEntryType.SERVICE,
    )
