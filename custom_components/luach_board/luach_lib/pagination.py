# custom_components/luach_board/luach_lib/pagination.py
"""Grid paging and the density-based sizing used by the memorial board."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeVar

from .models import PagingResult, SizingProfile

T = TypeVar("T")

# (max cells, scale) – inclusive upper bounds, checked in order
SCALE_BANDS: list[tuple[int, float]] = [
    (1, 2.5),
    (2, 2.0),
    (4, 1.8),
    (6, 1.6),
    (8, 1.5),
    (10, 1.4),
    (12, 1.3),
    (14, 1.2),
    (16, 1.1),
    (18, 1.0),
    (20, 0.9),
]
MIN_SCALE = 0.8

BASE_FONT_SIZES: dict[str, int] = {
    "name": 18,
    "name_card": 16,
    "name_photo": 20,
    "date": 12,
    "date_small": 11,
    "hebrew": 12,
    "tribute": 11,
    "footer": 12,
    "label": 11,
}

BASE_CANDLE_SIZES: dict[str, int] = {
    "simple": 40,
    "card": 35,
    "photo_placeholder": 60,
    "photo_footer": 30,
}


def cells_per_page(rows: int, columns: int) -> int:
    return max(1, rows * columns)


def paginate(records: Sequence[T], rows: int, columns: int) -> PagingResult:
    """Return the records with the number of ``rows × columns`` pages they fill."""
    items = list(records)
    if not items:
        return PagingResult([], 0)
    return PagingResult(items, math.ceil(len(items) / cells_per_page(rows, columns)))


def slice_for_page(records: Sequence[T], page_index: int, per_page: int) -> list[T]:
    """Items on page ``page_index`` (0-based); empty when the page does not exist."""
    if page_index < 0 or per_page < 1:
        return []
    start = page_index * per_page
    return list(records[start:start + per_page])


def next_page(current: int, total_pages: int) -> int:
    if total_pages <= 0:
        return 0
    return (current + 1) % total_pages


def scale_factor_for(total_cells: int) -> float:
    """More cells on screen → smaller content per cell."""
    for max_cells, scale in SCALE_BANDS:
        if total_cells <= max_cells:
            return scale
    return MIN_SCALE


def _round_half_up(value: float) -> int:
    """Pixel rounding: .5 always goes up (round() would go to even)."""
    return math.floor(value + 0.5)


def calculate_sizes(rows: int, columns: int) -> SizingProfile:
    scale = scale_factor_for(rows * columns)
    return SizingProfile(
        scale_factor=scale,
        font_sizes={key: base * scale for key, base in BASE_FONT_SIZES.items()},
        candle_sizes={
            key: _round_half_up(base * scale) for key, base in BASE_CANDLE_SIZES.items()
        },
    )


def clamp_page(current: int, total_pages: int) -> int:
    """Keep the shown page when it still exists, otherwise restart at the first."""
    if 0 <= current < total_pages:
        return current
    return 0
