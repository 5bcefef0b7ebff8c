"""Tests for data-file loading and settings migration at the integration boundary."""

import json
from types import SimpleNamespace

from custom_components.luach_board import _migrate_legacy_keys, resolve_options
from custom_components.luach_board.board_data import (
    _read_json_list,
    parse_classes,
    parse_memorials,
    parse_messages,
)
from custom_components.luach_board.config_flow import (
    CONF_DISPLAY_MODE,
    CONF_GRID_COLUMNS,
    CONF_GRID_ROWS,
    CONF_NUSACH,
    DEFAULT_HAVDALAH_OFFSET,
    DEFAULT_TEMPLATE,
)

# ============================================================================
# JSON files
# ============================================================================


def test_missing_file_reads_as_empty(tmp_path):
    assert _read_json_list(str(tmp_path / "nope.json")) == []


def test_invalid_json_reads_as_empty(tmp_path, caplog):
    path = tmp_path / "memorials.json"
    path.write_text("[{not json", encoding="utf-8")
    assert _read_json_list(str(path)) == []
    assert "Failed reading" in caplog.text


def test_wrapped_list_is_unwrapped(tmp_path):
    path = tmp_path / "memorials.json"
    path.write_text(json.dumps({"deceased": [{"id": "1"}]}), encoding="utf-8")
    assert _read_json_list(str(path)) == [{"id": "1"}]


def test_non_list_document_reads_as_empty(tmp_path):
    path = tmp_path / "announcements.json"
    path.write_text(json.dumps({"text": "hello"}), encoding="utf-8")
    assert _read_json_list(str(path)) == []


# ============================================================================
# Record normalization
# ============================================================================


def test_parse_memorials_accepts_settings_screen_shape():
    raw = [
        {
            "id": "a",
            "name": "Reb Moshe",
            "isMale": True,
            "dateOfDeath": "2019-03-14",
            "hebrewDateOfDeath": "ז׳ אדר ב׳ תשע״ט",
            "template": "card",
            "photo": "/local/luach-board/moshe.jpg",
        },
        {"id": "b", "name": "Sarah", "date_of_death": "2001-07-01", "template": "fancy"},
    ]
    first, second = parse_memorials(raw)

    assert first.is_male is True
    assert first.date_of_death == "2019-03-14"
    assert first.template == "card"
    assert first.photo_url == "/local/luach-board/moshe.jpg"
    assert second.date_of_death == "2001-07-01"
    assert second.template == DEFAULT_TEMPLATE
    assert second.is_male is None


def test_parse_memorials_uses_configured_default_template():
    (record,) = parse_memorials([{"id": "a", "name": "x"}], default_template="photo")
    assert record.template == "photo"


def test_parse_memorials_drops_invalid_and_duplicate_entries():
    raw = [
        {"id": "1", "name": "first"},
        {"name": "no id"},
        {"id": "2"},
        "not a dict",
        {"id": "1", "name": "second copy"},
        {"id": 3, "name": "numeric id"},
    ]
    records = parse_memorials(raw)
    assert [(r.id, r.name) for r in records] == [("1", "first"), ("3", "numeric id")]


def test_parse_messages_skips_entries_without_text():
    messages = parse_messages([{"id": "1", "text": "hi"}, {"id": "2", "text": ""}, {}])
    assert [m.id for m in messages] == ["1"]


# ============================================================================
# Config entry migration
# ============================================================================


def test_legacy_keys_are_renamed():
    migrated = _migrate_legacy_keys(
        {"table_rows": 4, "table_columns": 5, "deceased_display_mode": "all", CONF_NUSACH: "sephardic"}
    )
    assert migrated == {
        CONF_GRID_ROWS: 4,
        CONF_GRID_COLUMNS: 5,
        CONF_DISPLAY_MODE: "all",
        CONF_NUSACH: "sephardic",
    }


def test_new_key_wins_over_legacy_key():
    migrated = _migrate_legacy_keys({"table_rows": 4, CONF_GRID_ROWS: 2})
    assert migrated == {CONF_GRID_ROWS: 2}


def test_options_override_entry_data():
    entry = SimpleNamespace(
        data={CONF_NUSACH: "ashkenaz", CONF_GRID_ROWS: 2},
        options={CONF_NUSACH: "sephardic", CONF_GRID_COLUMNS: "4"},
    )
    config = resolve_options(entry)
    assert config[CONF_NUSACH] == "sephardic"
    assert config[CONF_GRID_ROWS] == 2
    assert config[CONF_GRID_COLUMNS] == 4
    assert config["havdalah_offset"] == DEFAULT_HAVDALAH_OFFSET


# ============================================================================
# Classes
# ============================================================================


def test_parse_classes_drops_bad_day_numbers():
    raw = [
        {"id": "1", "day": [0, 1], "start": "20:00", "end": "21:00"},
        {"id": "2", "day": [7], "start": "20:00", "end": "21:00"},
        {"id": "3", "day": 6, "start": "16:00"},
        {"text": "not a class"},
    ]
    classes = parse_classes(raw)
    assert [(s.id, s.days) for s in classes] == [("1", (0, 1)), ("3", (6,))]


def test_wrapped_classes_list_is_unwrapped(tmp_path):
    path = tmp_path / "classes.json"
    path.write_text(json.dumps({"classes": [{"id": "1"}]}), encoding="utf-8")
    assert _read_json_list(str(path)) == [{"id": "1"}]
