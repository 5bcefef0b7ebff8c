"""Hebrew-calendar decision logic for the lobby board (no Home Assistant imports)."""

from .classes import sort_classes_by_time, todays_classes
from .messages import filter_active_messages, is_message_active
from .models import (
    DisplayModeConfig,
    HebrewDate,
    MemorialRecord,
    Message,
    PagingResult,
    SizingProfile,
    Shiur,
    SlichosContext,
)
from .oracle import HebrewDateOracle, PyluachOracle
from .pagination import (
    calculate_sizes,
    cells_per_page,
    clamp_page,
    next_page,
    paginate,
    scale_factor_for,
    slice_for_page,
)
from .parsing import CalendarDateParts, parse_calendar_date_string
from .slichos import ashkenaz_slichos_start, is_slichos_tonight
from .yahrzeit import calculate_age_at_death, calculate_memorial_pages, filter_by_month

__all__ = [
    "CalendarDateParts",
    "DisplayModeConfig",
    "HebrewDate",
    "HebrewDateOracle",
    "MemorialRecord",
    "Message",
    "PagingResult",
    "PyluachOracle",
    "Shiur",
    "SizingProfile",
    "SlichosContext",
    "ashkenaz_slichos_start",
    "calculate_age_at_death",
    "calculate_memorial_pages",
    "calculate_sizes",
    "cells_per_page",
    "clamp_page",
    "filter_active_messages",
    "filter_by_month",
    "is_message_active",
    "is_slichos_tonight",
    "next_page",
    "paginate",
    "parse_calendar_date_string",
    "scale_factor_for",
    "slice_for_page",
    "sort_classes_by_time",
    "todays_classes",
]
