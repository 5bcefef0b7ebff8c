"""Tests for grid paging and density sizing."""

import pytest

from custom_components.luach_board.luach_lib.pagination import (
    BASE_FONT_SIZES,
    calculate_sizes,
    cells_per_page,
    clamp_page,
    next_page,
    paginate,
    scale_factor_for,
    slice_for_page,
)


@pytest.mark.parametrize(
    "cells, expected",
    [
        (0, 2.5),
        (1, 2.5),
        (2, 2.0),
        (3, 1.8),
        (4, 1.8),
        (5, 1.6),
        (6, 1.6),
        (8, 1.5),
        (9, 1.4),
        (12, 1.3),
        (14, 1.2),
        (16, 1.1),
        (17, 1.0),
        (18, 1.0),
        (19, 0.9),
        (20, 0.9),
        (21, 0.8),
        (30, 0.8),
        (100, 0.8),
    ],
)
def test_scale_factor_breakpoints(cells, expected):
    assert scale_factor_for(cells) == expected


def test_scale_factor_never_increases():
    factors = [scale_factor_for(n) for n in range(0, 40)]
    assert factors == sorted(factors, reverse=True)


def test_font_sizes_are_unrounded():
    sizes = calculate_sizes(3, 3)
    assert sizes.scale_factor == 1.4
    assert sizes.font_sizes["name"] == pytest.approx(25.2)
    assert sizes.font_sizes["tribute"] == pytest.approx(15.4)
    assert set(sizes.font_sizes) == set(BASE_FONT_SIZES)


def test_candle_sizes_round_half_up():
    # 2 x 4 = 8 cells -> 1.5; card 35 * 1.5 = 52.5
    sizes = calculate_sizes(2, 4)
    assert sizes.candle_sizes == {
        "simple": 60,
        "card": 53,
        "photo_placeholder": 90,
        "photo_footer": 45,
    }


def test_single_cell_sizes():
    sizes = calculate_sizes(1, 1)
    assert sizes.scale_factor == 2.5
    assert sizes.candle_sizes["simple"] == 100
    assert sizes.font_sizes["name"] == pytest.approx(45.0)


def test_cells_per_page_is_at_least_one():
    assert cells_per_page(0, 5) == 1
    assert cells_per_page(3, 4) == 12


@pytest.mark.parametrize("count, expected", [(0, 0), (1, 1), (9, 1), (10, 2), (18, 2), (19, 3)])
def test_total_pages(count, expected):
    assert paginate(list(range(count)), 3, 3).total_pages == expected


def test_slice_for_page():
    items = list(range(10))
    assert slice_for_page(items, 0, 4) == [0, 1, 2, 3]
    assert slice_for_page(items, 2, 4) == [8, 9]
    assert slice_for_page(items, 3, 4) == []
    assert slice_for_page(items, -1, 4) == []
    assert slice_for_page(items, 0, 0) == []


@pytest.mark.parametrize("current, total, expected", [(0, 0, 0), (5, 0, 0), (0, 3, 1), (2, 3, 0), (0, 1, 0)])
def test_next_page_wraps(current, total, expected):
    assert next_page(current, total) == expected


@pytest.mark.parametrize(
    "current, total, expected",
    [
        (1, 3, 1),
        (2, 3, 2),
        # names dropped out after a refresh: page 3 of 3 no longer exists
        (2, 2, 0),
        (4, 1, 0),
        (0, 0, 0),
        (-1, 3, 0),
    ],
)
def test_clamp_page_after_refresh(current, total, expected):
    assert clamp_page(current, total) == expected
