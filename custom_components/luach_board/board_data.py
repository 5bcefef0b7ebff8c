# custom_components/luach_board/board_data.py
"""Load the board's JSON data files and normalize them at the boundary."""

from __future__ import annotations

import json
import logging
import os

from homeassistant.core import HomeAssistant

from .const import ANNOUNCEMENTS_FILE, CLASSES_FILE, DATA_FOLDER, MEMORIALS_FILE
from .luach_lib.classes import validate_day_numbers
from .luach_lib.models import TEMPLATE_SIMPLE, MemorialRecord, Message, Shiur

_LOGGER = logging.getLogger(__name__)


def _read_json_list(path: str) -> list:
    """Return the JSON list stored at ``path``; [] when missing or invalid."""
    if not os.path.exists(path):
        return []
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        _LOGGER.warning("Failed reading %s: %s", path, e)
        return []

    # Older settings exports wrapped the list: {"deceased": [...]}, {"classes": [...]}
    if isinstance(data, dict):
        for key in ("deceased", "memorials", "messages", "announcements", "classes"):
            if isinstance(data.get(key), list):
                return data[key]
    if not isinstance(data, list):
        _LOGGER.warning("Ignoring %s: expected a JSON list", path)
        return []
    return data


def parse_memorials(raw: list, default_template: str = TEMPLATE_SIMPLE) -> list[MemorialRecord]:
    """Normalize raw entries; drops invalid ones and duplicate ids (first wins)."""
    records: list[MemorialRecord] = []
    seen: set[str] = set()
    for item in raw:
        record = MemorialRecord.from_dict(item, default_template=default_template)
        if record is None:
            continue
        if record.id in seen:
            _LOGGER.debug("Duplicate memorial id %s ignored", record.id)
            continue
        seen.add(record.id)
        records.append(record)
    return records


def parse_messages(raw: list) -> list[Message]:
    return [m for m in (Message.from_dict(item) for item in raw) if m is not None]


def parse_classes(raw: list) -> list[Shiur]:
    """Normalize raw class entries; drops ones with weekday numbers outside 0-6."""
    classes: list[Shiur] = []
    for item in raw:
        shiur = Shiur.from_dict(item)
        if shiur is None:
            continue
        if not validate_day_numbers(shiur.days):
            _LOGGER.debug("Class %s has invalid day numbers %r", shiur.id, shiur.days)
            continue
        classes.append(shiur)
    return classes


async def async_load_memorials(
    hass: HomeAssistant, default_template: str = TEMPLATE_SIMPLE
) -> list[MemorialRecord]:
    path = hass.config.path(DATA_FOLDER, MEMORIALS_FILE)
    raw = await hass.async_add_executor_job(_read_json_list, path)
    return parse_memorials(raw, default_template)


async def async_load_messages(hass: HomeAssistant) -> list[Message]:
    path = hass.config.path(DATA_FOLDER, ANNOUNCEMENTS_FILE)
    raw = await hass.async_add_executor_job(_read_json_list, path)
    return parse_messages(raw)


async def async_load_classes(hass: HomeAssistant) -> list[Shiur]:
    path = hass.config.path(DATA_FOLDER, CLASSES_FILE)
    raw = await hass.async_add_executor_job(_read_json_list, path)
    return parse_classes(raw)
