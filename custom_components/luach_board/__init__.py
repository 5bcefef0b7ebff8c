from __future__ import annotations

import logging
from pathlib import Path

from homeassistant.core import HomeAssistant
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import Platform
from homeassistant.helpers.event import async_call_later

from .const import ANNOUNCEMENTS_FILE, CLASSES_FILE, DATA_FOLDER, DOMAIN, MEMORIALS_FILE
from .config_flow import (
    CONF_NUSACH,
    DEFAULT_NUSACH,
    CONF_HAVDALAH_OFFSET,
    DEFAULT_HAVDALAH_OFFSET,
    CONF_SCREEN_DISPLAY_TIME,
    DEFAULT_SCREEN_DISPLAY_TIME,
    CONF_DISPLAY_MODE,
    DEFAULT_DISPLAY_MODE,
    CONF_GRID_ROWS,
    DEFAULT_GRID_ROWS,
    CONF_GRID_COLUMNS,
    DEFAULT_GRID_COLUMNS,
    CONF_DEFAULT_TEMPLATE,
    DEFAULT_TEMPLATE,
    # Legacy keys (version 1)
    LEGACY_TABLE_ROWS,
    LEGACY_TABLE_COLUMNS,
    LEGACY_DISPLAY_MODE,
)

_LOGGER = logging.getLogger(__name__)

PLATFORMS = [Platform.SENSOR, Platform.BINARY_SENSOR]

# Old key → new key, applied to both data and options
LEGACY_KEY_MAP = {
    LEGACY_TABLE_ROWS: CONF_GRID_ROWS,
    LEGACY_TABLE_COLUMNS: CONF_GRID_COLUMNS,
    LEGACY_DISPLAY_MODE: CONF_DISPLAY_MODE,
}


# ───────────────────────────────────────────────────────────────────────────────
# Sample data files (edited by hand or by the settings screen)
# ───────────────────────────────────────────────────────────────────────────────

MEMORIALS_SAMPLE = """[
  {
    "id": "sample-1",
    "name": "ר' פלוני בן אלמוני ז\\"ל",
    "isMale": true,
    "dateOfDeath": "2019-03-14",
    "template": "simple",
    "tribute": "Remove this sample entry and add your own"
  }
]
"""

ANNOUNCEMENTS_SAMPLE = """[
  {
    "id": "sample-1",
    "text": "Welcome! Edit announcements.json to change this message.",
    "enabled": false
  }
]
"""

CLASSES_SAMPLE = """[
  {
    "id": "sample-1",
    "day": [0, 1, 2, 3, 4],
    "start": "20:00",
    "end": "21:00",
    "tutor": "Rabbi",
    "subject": "Gemara"
  }
]
"""


async def create_sample_files(hass: HomeAssistant) -> None:
    """Create sample data files if they don't exist."""
    data_dir = Path(hass.config.path(DATA_FOLDER))

    if not data_dir.exists():
        await hass.async_add_executor_job(data_dir.mkdir, 0o755, True)
        _LOGGER.info("Created Luach Board data directory at %s", data_dir)

    for name, sample in (
        (MEMORIALS_FILE, MEMORIALS_SAMPLE),
        (ANNOUNCEMENTS_FILE, ANNOUNCEMENTS_SAMPLE),
        (CLASSES_FILE, CLASSES_SAMPLE),
    ):
        path = data_dir / name
        if not path.exists():
            await hass.async_add_executor_job(path.write_text, sample, "utf-8")
            _LOGGER.info("Created sample %s at %s", name, path)


def _migrate_legacy_keys(values: dict) -> dict:
    """Rename version-1 keys; a value already stored under the new key wins."""
    migrated = dict(values)
    for old, new in LEGACY_KEY_MAP.items():
        if old in migrated:
            value = migrated.pop(old)
            migrated.setdefault(new, value)
    return migrated


def resolve_options(entry: ConfigEntry) -> dict:
    """Merge entry data and options (options win) into the runtime config."""
    initial = entry.data or {}
    opts = entry.options or {}

    def get(key, default):
        return opts.get(key, initial.get(key, default))

    return {
        CONF_NUSACH: get(CONF_NUSACH, DEFAULT_NUSACH),
        CONF_HAVDALAH_OFFSET: int(get(CONF_HAVDALAH_OFFSET, DEFAULT_HAVDALAH_OFFSET)),
        CONF_SCREEN_DISPLAY_TIME: int(get(CONF_SCREEN_DISPLAY_TIME, DEFAULT_SCREEN_DISPLAY_TIME)),
        CONF_DISPLAY_MODE: get(CONF_DISPLAY_MODE, DEFAULT_DISPLAY_MODE),
        CONF_GRID_ROWS: int(get(CONF_GRID_ROWS, DEFAULT_GRID_ROWS)),
        CONF_GRID_COLUMNS: int(get(CONF_GRID_COLUMNS, DEFAULT_GRID_COLUMNS)),
        CONF_DEFAULT_TEMPLATE: get(CONF_DEFAULT_TEMPLATE, DEFAULT_TEMPLATE),
    }


# ───────────────────────────────────────────────────────────────────────────────
# Home Assistant integration lifecycle
# ───────────────────────────────────────────────────────────────────────────────

async def async_migrate_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Upgrade old config entries to the current key names."""
    if entry.version > 2:
        # Downgraded from a future version
        return False

    if entry.version == 1:
        _LOGGER.debug("Migrating Luach Board entry %s from version 1", entry.entry_id)
        hass.config_entries.async_update_entry(
            entry,
            data=_migrate_legacy_keys(entry.data or {}),
            options=_migrate_legacy_keys(entry.options or {}),
            version=2,
        )
    return True


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Set up Luach Board from a config entry."""
    await create_sample_files(hass)

    entry.async_on_unload(entry.add_update_listener(_async_update_options))

    config = resolve_options(entry)
    config["latitude"] = hass.config.latitude
    config["longitude"] = hass.config.longitude
    config["tzname"] = hass.config.time_zone

    hass.data.setdefault(DOMAIN, {})
    hass.data[DOMAIN][entry.entry_id] = config
    # Entities read the single instance's config from here
    hass.data[DOMAIN]["config"] = config

    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)
    return True


async def _async_update_options(hass: HomeAssistant, entry: ConfigEntry) -> None:
    """Called when the user hits Submit on the Options page."""
    async_call_later(
        hass,
        1,
        lambda now: _delayed_reload(hass, entry.entry_id),
    )


def _delayed_reload(hass: HomeAssistant, entry_id: str) -> None:
    """Helper for async_call_later: switch back to the event loop and reload."""
    _LOGGER.debug("Luach Board: scheduling reload of entry %s", entry_id)
    hass.loop.call_soon_threadsafe(
        lambda: hass.async_create_task(hass.config_entries.async_reload(entry_id))
    )


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload a config entry."""
    unloaded = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)
    if unloaded:
        domain_data = hass.data.get(DOMAIN, {})
        domain_data.pop(entry.entry_id, None)
        domain_data.pop("config", None)
    return unloaded
