import voluptuous as vol
from homeassistant import config_entries
from homeassistant.core import callback
from homeassistant.helpers.selector import selector

from .const import DOMAIN

# ============ General keys ============
CONF_NUSACH = "nusach"
DEFAULT_NUSACH = "ashkenaz"
CONF_HAVDALAH_OFFSET = "havdalah_offset"
DEFAULT_HAVDALAH_OFFSET = 72
CONF_SCREEN_DISPLAY_TIME = "screen_display_time"
DEFAULT_SCREEN_DISPLAY_TIME = 20  # seconds per memorial page

# ============ Memorial board keys ============
CONF_DISPLAY_MODE = "display_mode"
DEFAULT_DISPLAY_MODE = "monthly"
CONF_GRID_ROWS = "grid_rows"
DEFAULT_GRID_ROWS = 3
CONF_GRID_COLUMNS = "grid_columns"
DEFAULT_GRID_COLUMNS = 3
CONF_DEFAULT_TEMPLATE = "default_template"
DEFAULT_TEMPLATE = "simple"

MAX_GRID_SIZE = 10

# ============ Legacy (version 1 entries, migrated in __init__.py) ============
LEGACY_TABLE_ROWS = "table_rows"
LEGACY_TABLE_COLUMNS = "table_columns"
LEGACY_DISPLAY_MODE = "deceased_display_mode"

NUSACH_SELECTOR = selector({
    "select": {
        "options": [
            {"value": "ashkenaz", "label": "אשכנז"},
            {"value": "sephardic", "label": "ספרד / עדות המזרח"},
        ]
    }
})

DISPLAY_MODE_SELECTOR = selector({
    "select": {
        "options": [
            {"value": "monthly", "label": "This Hebrew month only"},
            {"value": "all", "label": "All names"},
        ]
    }
})

TEMPLATE_SELECTOR = selector({
    "select": {
        "options": [
            {"value": "simple", "label": "Simple"},
            {"value": "card", "label": "Card"},
            {"value": "photo", "label": "Photo"},
        ]
    }
})

GRID_SIZE = vol.All(vol.Coerce(int), vol.Range(min=1, max=MAX_GRID_SIZE))


def _general_schema(get) -> vol.Schema:
    return vol.Schema(
        {
            vol.Optional(CONF_NUSACH, default=get(CONF_NUSACH, DEFAULT_NUSACH)): NUSACH_SELECTOR,
            vol.Optional(CONF_HAVDALAH_OFFSET, default=get(CONF_HAVDALAH_OFFSET, DEFAULT_HAVDALAH_OFFSET)): int,
            vol.Optional(
                CONF_SCREEN_DISPLAY_TIME,
                default=get(CONF_SCREEN_DISPLAY_TIME, DEFAULT_SCREEN_DISPLAY_TIME),
            ): selector({
                "number": {
                    "min": 5,
                    "max": 300,
                    "step": 5,
                    "mode": "slider",
                    "unit_of_measurement": "seconds",
                }
            }),
        }
    )


def _memorial_schema(get) -> vol.Schema:
    return vol.Schema(
        {
            vol.Optional(CONF_DISPLAY_MODE, default=get(CONF_DISPLAY_MODE, DEFAULT_DISPLAY_MODE)): DISPLAY_MODE_SELECTOR,
            vol.Optional(CONF_GRID_ROWS, default=get(CONF_GRID_ROWS, DEFAULT_GRID_ROWS)): GRID_SIZE,
            vol.Optional(CONF_GRID_COLUMNS, default=get(CONF_GRID_COLUMNS, DEFAULT_GRID_COLUMNS)): GRID_SIZE,
            vol.Optional(CONF_DEFAULT_TEMPLATE, default=get(CONF_DEFAULT_TEMPLATE, DEFAULT_TEMPLATE)): TEMPLATE_SELECTOR,
        }
    )


class LuachBoardConfigFlow(config_entries.ConfigFlow, domain=DOMAIN):
    """Handle a config flow for Luach Board."""
    VERSION = 2  # v1 used the table_* keys, see async_migrate_entry

    async def async_step_user(self, user_input=None):
        """Step 1: General settings."""
        if self._async_current_entries():
            return self.async_abort(reason="single_instance_allowed")

        if user_input is None:
            return self.async_show_form(
                step_id="user",
                data_schema=_general_schema(lambda k, default: default),
            )

        self._general_data = dict(user_input)
        return await self.async_step_memorial()

    async def async_step_memorial(self, user_input=None):
        """Step 2: Memorial board layout."""
        if user_input is None:
            return self.async_show_form(
                step_id="memorial",
                data_schema=_memorial_schema(lambda k, default: default),
            )

        data = {**getattr(self, "_general_data", {}), **user_input}
        return self.async_create_entry(title="Luach Board", data=data)

    @staticmethod
    @callback
    def async_get_options_flow(config_entry):
        return OptionsFlowHandler(config_entry)


class OptionsFlowHandler(config_entries.OptionsFlow):
    """Options flow with a menu for General vs. Memorial board."""

    def __init__(self, config_entry):
        self._config_entry = config_entry

    def _get(self, key, default):
        data = self._config_entry.data or {}
        opts = self._config_entry.options or {}
        return opts.get(key, data.get(key, default))

    async def async_step_init(self, user_input=None):
        return self.async_show_menu(
            step_id="init",
            menu_options=["general", "memorial"],
        )

    async def async_step_general(self, user_input=None):
        """Edit general settings."""
        if user_input is None:
            return self.async_show_form(step_id="general", data_schema=_general_schema(self._get))

        new_opts = {**self._config_entry.options, **user_input}
        return self.async_create_entry(title="", data=new_opts)

    async def async_step_memorial(self, user_input=None):
        """Edit memorial board layout."""
        if user_input is None:
            return self.async_show_form(step_id="memorial", data_schema=_memorial_schema(self._get))

        new_opts = {**self._config_entry.options, **user_input}
        return self.async_create_entry(title="", data=new_opts)
