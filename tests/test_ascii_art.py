from datetime import datetime

import pytest

from skyline.ascii_art import (
    EMPTY_BLOCK,
    FOUNDATION_HIGH,
    FOUNDATION_LOW,
    FOUNDATION_MED,
    FUTURE_BLOCK,
    GRID_WIDTH,
    HEADER_TEMPLATE,
    MIDDLE_HIGH,
    MIDDLE_LOW,
    MIDDLE_MED,
    TOP_HIGH,
    TOP_LOW,
    TOP_MED,
    center_text,
    generate_ascii,
    get_block,
    get_block_type,
    sort_contribution_days,
)
from skyline.types import ContributionDay


def make_test_grid(weeks, days):
    return [[ContributionDay(contribution_count=i * j) for j in range(days)] for i in range(weeks)]


def test_empty_grid_raises():
    with pytest.raises(ValueError, match="invalid contribution grid"):
        generate_ascii([], "testuser", 2023, False, False)


@pytest.mark.parametrize("name", ["valid grid", "no header"])
def test_without_header_excludes_user_and_header(name):
    result = generate_ascii(make_test_grid(3, 7), "testuser", 2023, False, False)
    assert "testuser" not in result
    assert "2023" not in result
    assert HEADER_TEMPLATE not in result


def test_with_header_includes_everything():
    result = generate_ascii(make_test_grid(3, 7), "testuser", 2023, True, True)
    assert "testuser" in result
    assert "2023" in result
    assert EMPTY_BLOCK in result
    assert HEADER_TEMPLATE in result
    assert result.startswith(HEADER_TEMPLATE + "\n\n")


def test_grid_layout_pinned():
    result = generate_ascii(make_test_grid(3, 7), "testuser", 2023, False, False)
    assert result == "   \n ┃╽\n ▒▓\n ▒▓\n ░▒\n ░▒\n ░░\n"


def test_user_info_is_centered_below_grid():
    result = generate_ascii(make_test_grid(3, 7), "testuser", 2023, False, True)
    grid = "   \n ┃╽\n ▒▓\n ▒▓\n ░▒\n ░▒\n ░░\n"
    assert result == grid + "\n" + center_text("testuser") + center_text("2023")


@pytest.mark.parametrize("with_header", [False, True])
def test_zero_contributions_are_empty(with_header):
    grid = [[ContributionDay(contribution_count=0) for _ in range(7)] for _ in range(3)]
    result = generate_ascii(grid, "testuser", 2023, with_header, with_header)
    lines = result.split("\n")
    start = HEADER_TEMPLATE.count("\n") + 2 if with_header else 0
    assert len(lines) >= start + 7
    assert lines[start : start + 7] == ["   "] * 7


def test_future_days_marked():
    week = [
        ContributionDay(contribution_count=5, date="2020-01-01"),
        ContributionDay(contribution_count=3, date="2999-01-01"),
    ]
    result = generate_ascii([week], "u", 2020, False, False)
    assert result.split("\n")[:7] == [" ", " ", " ", " ", " ", FUTURE_BLOCK, FOUNDATION_HIGH]


@pytest.mark.parametrize(
    "normalized, day_idx, non_zero, expected",
    [
        (0.0, 0, 1, EMPTY_BLOCK),
        (0.2, 0, 1, FOUNDATION_LOW),
        (0.5, 0, 1, FOUNDATION_MED),
        (0.8, 0, 1, FOUNDATION_HIGH),
        (0.2, 0, 2, FOUNDATION_LOW),
        (0.8, 1, 3, MIDDLE_HIGH),
        (0.5, 2, 3, TOP_MED),
        (0.1, 1, 2, TOP_LOW),
        (0.9, 3, 4, TOP_HIGH),
        (0.5, 1, 4, MIDDLE_MED),
        (0.1, 2, 5, MIDDLE_LOW),
    ],
)
def test_get_block(normalized, day_idx, non_zero, expected):
    assert get_block(normalized, day_idx, non_zero) == expected


@pytest.mark.parametrize(
    "normalized, expected",
    [(0.0, 0), (0.32, 0), (0.33, 1), (0.65, 1), (0.66, 2), (1.0, 2)],
)
def test_get_block_type(normalized, expected):
    assert get_block_type(normalized) == expected


def test_top_blocks_differ_from_foundation():
    tops = {get_block(v, 1, 2) for v in (0.1, 0.5, 0.9)}
    foundations = {get_block(v, 0, 2) for v in (0.1, 0.5, 0.9)}
    assert len(tops) == 3
    assert len(foundations) == 3
    assert tops.isdisjoint(foundations)


def test_sort_contribution_days_orders_and_pads():
    now = datetime(2024, 6, 1)
    week = [
        ContributionDay(0, "2024-05-01"),
        ContributionDay(4, "2024-05-02"),
        ContributionDay(7, "2024-07-01"),
        ContributionDay(2, "2024-05-03"),
    ]
    ordered, active = sort_contribution_days(week, now)
    assert active == 2
    assert len(ordered) == 7
    assert ordered[0] == ContributionDay(4, "2024-05-02")
    assert ordered[1] == ContributionDay(2, "2024-05-03")
    assert ordered[2] == ContributionDay(0, "2024-05-01")
    assert ordered[3] == ContributionDay(-1, "2024-07-01")
    assert ordered[4:] == [ContributionDay()] * 3


def test_sort_contribution_days_rejects_long_week():
    week = [ContributionDay(1, "2020-01-01")] * 8
    with pytest.raises(ValueError):
        sort_contribution_days(week, datetime(2024, 1, 1))


@pytest.mark.parametrize(
    "text, expected",
    [
        ("test", "                        test                         \n"),
        ("", "                                                     \n"),
        (
            "this is a very long text that exceeds the grid width",
            "this is a very long text that exceeds the grid width\n",
        ),
        ("x" * GRID_WIDTH, "x" * GRID_WIDTH + "\n"),
        ("y" * (GRID_WIDTH + 5), "y" * GRID_WIDTH + "\n"),
    ],
)
def test_center_text(text, expected):
    assert center_text(text) == expected