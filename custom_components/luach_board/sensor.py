#/config/custom_components/luach_board/sensor.py
from __future__ import annotations

import logging
import time
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

import homeassistant.util.dt as dt_util
from homeassistant.components.sensor import SensorEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .board_data import async_load_classes, async_load_memorials, async_load_messages
from .config_flow import (
    CONF_DEFAULT_TEMPLATE,
    CONF_DISPLAY_MODE,
    CONF_GRID_COLUMNS,
    CONF_GRID_ROWS,
    CONF_HAVDALAH_OFFSET,
    CONF_SCREEN_DISPLAY_TIME,
    DEFAULT_DISPLAY_MODE,
    DEFAULT_GRID_COLUMNS,
    DEFAULT_GRID_ROWS,
    DEFAULT_HAVDALAH_OFFSET,
    DEFAULT_SCREEN_DISPLAY_TIME,
    DEFAULT_TEMPLATE,
)
from .device import LuachBoardDisplayDevice
from .luach_lib.classes import (
    CLASSES_PER_PAGE,
    calculate_sub_pages,
    current_page_classes,
    day_names,
    format_time_range,
    todays_classes,
)
from .luach_lib.helper import hebrew_date_label, hebrew_month_name
from .luach_lib.messages import (
    filter_active_messages,
    is_message_expired,
    is_message_scheduled,
)
from .luach_lib.models import DisplayModeConfig, HebrewDate, MemorialRecord, Message, Shiur
from .luach_lib.oracle import PyluachOracle
from .luach_lib.pagination import (
    calculate_sizes,
    cells_per_page,
    clamp_page,
    next_page,
    slice_for_page,
)
from .luach_lib.parsing import to_gregorian_date
from .luach_lib.yahrzeit import calculate_age_at_death, calculate_memorial_pages
from .zman_helper import get_geo, halachic_date

_LOGGER = logging.getLogger(__name__)

DATA_REFRESH_INTERVAL = timedelta(minutes=1)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    async_add_entities(
        [MemorialBoardSensor(hass), AnnouncementsSensor(hass), ClassesSensor(hass)],
        update_before_add=False,
    )


# ============================================================
# Memorial board
# ============================================================

class MemorialBoardSensor(LuachBoardDisplayDevice, SensorEntity):
    """Names due this Hebrew month, exposed one grid page at a time."""

    _attr_name = "Memorial Board"
    _attr_icon = "mdi:candle"
    _attr_should_poll = False

    def __init__(self, hass: HomeAssistant) -> None:
        super().__init__()
        slug = "memorial_board"
        self._attr_unique_id = f"luach_board_{slug}"
        self.entity_id = f"sensor.luach_board_{slug}"
        self.hass = hass

        cfg = self._board_config()
        self._tz = ZoneInfo(cfg.get("tzname", hass.config.time_zone))
        self._havdalah_offset = cfg.get(CONF_HAVDALAH_OFFSET, DEFAULT_HAVDALAH_OFFSET)
        self._rotate_every = timedelta(seconds=cfg.get(CONF_SCREEN_DISPLAY_TIME, DEFAULT_SCREEN_DISPLAY_TIME))
        self._display = DisplayModeConfig(
            mode=cfg.get(CONF_DISPLAY_MODE, DEFAULT_DISPLAY_MODE),
            grid_rows=cfg.get(CONF_GRID_ROWS, DEFAULT_GRID_ROWS),
            grid_columns=cfg.get(CONF_GRID_COLUMNS, DEFAULT_GRID_COLUMNS),
            default_template=cfg.get(CONF_DEFAULT_TEMPLATE, DEFAULT_TEMPLATE),
        )

        self._geo = None
        self._oracle = PyluachOracle()
        self._records: list[MemorialRecord] = []
        self._filtered: list[MemorialRecord] = []
        self._today: HebrewDate | None = None
        self._page = 0
        self._total_pages = 0

    @property
    def native_value(self) -> int:
        return len(self._filtered)

    async def async_added_to_hass(self) -> None:
        start_time = time.time()
        await super().async_added_to_hass()
        self._geo = await get_geo(self.hass)

        await self._refresh()

        self._register_interval(self.hass, self._refresh, DATA_REFRESH_INTERVAL)
        self._register_interval(self.hass, self._rotate, self._rotate_every)

        _LOGGER.debug("MemorialBoardSensor init in %.2fs", time.time() - start_time)

    async def _refresh(self, now: datetime | None = None) -> None:
        """Reload the data file and recompute today's names."""
        self._records = await async_load_memorials(
            self.hass, self._display.default_template
        )

        now = (now or dt_util.now()).astimezone(self._tz)
        today_g = halachic_date(now, self._geo, self._tz, self._havdalah_offset)
        self._today = self._oracle.to_hebrew(today_g)

        result = calculate_memorial_pages(
            self._records, self._display, self._today, self._oracle
        )
        self._filtered = result.filtered_records
        self._total_pages = result.total_pages
        self._page = clamp_page(self._page, self._total_pages)

        self._update_attributes()
        self.async_write_ha_state()

    async def _rotate(self, now: datetime | None = None) -> None:
        self._page = next_page(self._page, self._total_pages)
        self._update_attributes()
        self.async_write_ha_state()

    def _hebrew_death_label(self, record: MemorialRecord) -> str:
        if record.hebrew_date_of_death:
            return record.hebrew_date_of_death
        gdate = to_gregorian_date(record.date_of_death)
        if gdate is None:
            return ""
        death = self._oracle.to_hebrew(gdate)
        return f"{hebrew_date_label(death)} {death.year}"

    def _update_attributes(self) -> None:
        per_page = cells_per_page(self._display.grid_rows, self._display.grid_columns)
        page_items = slice_for_page(self._filtered, self._page, per_page)
        sizes = calculate_sizes(self._display.grid_rows, self._display.grid_columns)

        month = ""
        if self._today is not None:
            month = hebrew_month_name(self._today.month, self._today.is_leap_year)

        self._attr_extra_state_attributes = {
            "Display_Mode": self._display.mode,
            "Hebrew_Month": month,
            "Page": self._page + 1 if self._total_pages else 0,
            "Total_Pages": self._total_pages,
            "Grid_Rows": self._display.grid_rows,
            "Grid_Columns": self._display.grid_columns,
            "Total_Names": len(self._records),
            "Scale_Factor": sizes.scale_factor,
            "Font_Sizes": sizes.font_sizes,
            "Candle_Sizes": sizes.candle_sizes,
            "Names": [
                {
                    "id": r.id,
                    "name": r.name,
                    "is_male": r.is_male,
                    "template": r.template,
                    "date_of_death": r.date_of_death or "",
                    "hebrew_date_of_death": self._hebrew_death_label(r),
                    "date_of_birth": r.date_of_birth or "",
                    "hebrew_date_of_birth": r.hebrew_date_of_birth or "",
                    "age_at_death": calculate_age_at_death(r.date_of_birth, r.date_of_death),
                    "photo": r.photo_url or "",
                    "tribute": r.tribute or "",
                }
                for r in page_items
            ],
        }


# ============================================================
# Announcements
# ============================================================

class AnnouncementsSensor(LuachBoardDisplayDevice, SensorEntity):
    """Announcements that are enabled and inside their date window today."""

    _attr_name = "Announcements"
    _attr_icon = "mdi:bullhorn"
    _attr_should_poll = False

    def __init__(self, hass: HomeAssistant) -> None:
        super().__init__()
        slug = "announcements"
        self._attr_unique_id = f"luach_board_{slug}"
        self.entity_id = f"sensor.luach_board_{slug}"
        self.hass = hass

        cfg = self._board_config()
        self._tz = ZoneInfo(cfg.get("tzname", hass.config.time_zone))
        self._active: list[Message] = []

    @property
    def native_value(self) -> int:
        return len(self._active)

    async def async_added_to_hass(self) -> None:
        await super().async_added_to_hass()
        await self._refresh()
        self._register_interval(self.hass, self._refresh, DATA_REFRESH_INTERVAL)

    async def _refresh(self, now: datetime | None = None) -> None:
        messages = await async_load_messages(self.hass)
        # Announcement dates are civil dates, no sunset roll-over
        today = (now or dt_util.now()).astimezone(self._tz).date()

        self._active = filter_active_messages(messages, today)
        self._attr_extra_state_attributes = {
            "Messages": [m.text for m in self._active],
            "Scheduled": sum(1 for m in messages if is_message_scheduled(m, today)),
            "Expired": sum(1 for m in messages if is_message_expired(m, today)),
        }
        self.async_write_ha_state()


# ============================================================
# Class schedule
# ============================================================

class ClassesSensor(LuachBoardDisplayDevice, SensorEntity):
    """Today's classes in start-time order, a few per page."""

    _attr_name = "Classes"
    _attr_icon = "mdi:school"
    _attr_should_poll = False

    def __init__(self, hass: HomeAssistant) -> None:
        super().__init__()
        slug = "classes"
        self._attr_unique_id = f"luach_board_{slug}"
        self.entity_id = f"sensor.luach_board_{slug}"
        self.hass = hass

        cfg = self._board_config()
        self._tz = ZoneInfo(cfg.get("tzname", hass.config.time_zone))
        self._rotate_every = timedelta(seconds=cfg.get(CONF_SCREEN_DISPLAY_TIME, DEFAULT_SCREEN_DISPLAY_TIME))
        self._today: list[Shiur] = []
        self._page = 0
        self._total_pages = 0

    @property
    def native_value(self) -> int:
        return len(self._today)

    async def async_added_to_hass(self) -> None:
        await super().async_added_to_hass()
        await self._refresh()
        self._register_interval(self.hass, self._refresh, DATA_REFRESH_INTERVAL)
        self._register_interval(self.hass, self._rotate, self._rotate_every)

    async def _refresh(self, now: datetime | None = None) -> None:
        classes = await async_load_classes(self.hass)
        # Weekly schedule follows the civil weekday
        today = (now or dt_util.now()).astimezone(self._tz).date()

        self._today = todays_classes(classes, today)
        self._total_pages = calculate_sub_pages(len(self._today), CLASSES_PER_PAGE)
        self._page = clamp_page(self._page, self._total_pages)
        self._update_attributes()
        self.async_write_ha_state()

    async def _rotate(self, now: datetime | None = None) -> None:
        self._page = next_page(self._page, self._total_pages)
        self._update_attributes()
        self.async_write_ha_state()

    def _update_attributes(self) -> None:
        self._attr_extra_state_attributes = {
            "Page": self._page + 1 if self._total_pages else 0,
            "Total_Pages": self._total_pages,
            "Classes": [
                {
                    "id": s.id,
                    "title": s.title or s.subject,
                    "subject": s.subject,
                    "tutor": s.tutor,
                    "time": format_time_range(s.start, s.end),
                    "days": day_names(s.days),
                }
                for s in current_page_classes(self._today, self._page, CLASSES_PER_PAGE)
            ],
        }
