# custom_components/luach_board/luach_lib/models.py
"""Plain data shapes shared by the board logic."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Final

_LOGGER = logging.getLogger(__name__)

# pyluach month numbers (1=Nisan … 13=Adar II)
NISAN: Final = 1
ELUL: Final = 6
TISHREI: Final = 7
CHESHVAN: Final = 8
ADAR_I: Final = 12  # plain Adar in a regular year
ADAR_II: Final = 13
ADAR_MONTHS: Final = frozenset({ADAR_I, ADAR_II})

DISPLAY_MODE_ALL: Final = "all"
DISPLAY_MODE_MONTHLY: Final = "monthly"
DISPLAY_MODES: Final = (DISPLAY_MODE_ALL, DISPLAY_MODE_MONTHLY)

TEMPLATE_SIMPLE: Final = "simple"
TEMPLATE_CARD: Final = "card"
TEMPLATE_PHOTO: Final = "photo"
TEMPLATES: Final = (TEMPLATE_SIMPLE, TEMPLATE_CARD, TEMPLATE_PHOTO)

NUSACH_ASHKENAZ: Final = "ashkenaz"
NUSACH_SEPHARDIC: Final = "sephardic"
NUSACHS: Final = (NUSACH_ASHKENAZ, NUSACH_SEPHARDIC)


@dataclass(frozen=True)
class HebrewDate:
    """A Hebrew calendar date as produced by the oracle.

    Month 13 only exists when ``is_leap_year`` is true; callers uphold that.
    """

    month: int
    day: int
    year: int
    is_leap_year: bool = False

    @property
    def is_adar(self) -> bool:
        return self.month in ADAR_MONTHS


@dataclass(frozen=True)
class MemorialRecord:
    """One name on the memorial board."""

    id: str
    name: str
    is_male: bool | None = None
    date_of_death: str | None = None  # YYYY-MM-DD
    hebrew_date_of_death: str | None = None
    template: str = TEMPLATE_SIMPLE
    photo_url: str | None = None
    tribute: str | None = None
    date_of_birth: str | None = None
    hebrew_date_of_birth: str | None = None

    @classmethod
    def from_dict(
        cls, raw: dict[str, Any], default_template: str = TEMPLATE_SIMPLE
    ) -> MemorialRecord | None:
        """Build a record from a stored dict.

        Accepts the camelCase shape written by the settings screen as well as
        snake_case keys. Returns None when there is no usable id or name.
        """
        if not isinstance(raw, dict):
            return None

        def pick(*keys: str) -> Any:
            for key in keys:
                value = raw.get(key)
                if value not in (None, ""):
                    return value
            return None

        rec_id = pick("id")
        name = pick("name")
        if rec_id is None or name is None:
            _LOGGER.debug("Skipping memorial entry without id/name: %r", raw)
            return None

        template = pick("template", "displayTemplate", "display_template")
        if template not in TEMPLATES:
            template = default_template

        is_male = pick("isMale", "is_male")
        return cls(
            id=str(rec_id),
            name=str(name),
            is_male=bool(is_male) if is_male is not None else None,
            date_of_death=pick("dateOfDeath", "date_of_death"),
            hebrew_date_of_death=pick("hebrewDateOfDeath", "hebrew_date_of_death"),
            template=template,
            photo_url=pick("photo", "photoUrl", "photo_url"),
            tribute=pick("tribute"),
            date_of_birth=pick("dateOfBirth", "date_of_birth"),
            hebrew_date_of_birth=pick("hebrewDateOfBirth", "hebrew_date_of_birth"),
        )


@dataclass(frozen=True)
class DisplayModeConfig:
    mode: str = DISPLAY_MODE_MONTHLY
    grid_rows: int = 3
    grid_columns: int = 3
    default_template: str = TEMPLATE_SIMPLE


@dataclass(frozen=True)
class PagingResult:
    filtered_records: list[MemorialRecord] = field(default_factory=list)
    total_pages: int = 0


@dataclass(frozen=True)
class SizingProfile:
    scale_factor: float
    font_sizes: dict[str, float]
    candle_sizes: dict[str, int]


@dataclass(frozen=True)
class SlichosContext:
    """Everything the Slichos rule needs about "now"."""

    hebrew_month: int
    hebrew_day: int
    hour: int
    leap_year: bool
    nusach: str
    hebrew_year: int


@dataclass(frozen=True)
class Message:
    """An announcement shown on the board, optionally bounded by dates."""

    id: str
    text: str
    enabled: bool = True
    start_date: str | None = None  # YYYY-MM-DD
    end_date: str | None = None  # YYYY-MM-DD

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Message | None:
        if not isinstance(raw, dict) or not raw.get("id") or not raw.get("text"):
            _LOGGER.debug("Skipping announcement without id/text: %r", raw)
            return None
        return cls(
            id=str(raw["id"]),
            text=str(raw["text"]),
            enabled=bool(raw.get("enabled", True)),
            start_date=raw.get("startDate", raw.get("start_date")) or None,
            end_date=raw.get("endDate", raw.get("end_date")) or None,
        )


@dataclass(frozen=True)
class Shiur:
    """A weekly class on the schedule screen.

    ``days`` holds weekday numbers, 0=Sunday … 6=Saturday.
    """

    id: str
    days: tuple[int, ...]
    start: str  # HH:MM
    end: str  # HH:MM
    tutor: str = ""
    subject: str = ""
    title: str | None = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Shiur | None:
        if not isinstance(raw, dict) or not raw.get("id") or not raw.get("start"):
            _LOGGER.debug("Skipping class without id/start: %r", raw)
            return None

        days = raw.get("day", raw.get("days", []))
        if isinstance(days, int) and not isinstance(days, bool):
            days = [days]
        if not isinstance(days, list) or not all(
            isinstance(d, int) and not isinstance(d, bool) for d in days
        ):
            _LOGGER.debug("Skipping class %s with bad day list: %r", raw.get("id"), days)
            return None

        return cls(
            id=str(raw["id"]),
            days=tuple(days),
            start=str(raw["start"]),
            end=str(raw.get("end") or ""),
            tutor=str(raw.get("tutor") or ""),
            subject=str(raw.get("subject") or ""),
            title=raw.get("title") or None,
        )
