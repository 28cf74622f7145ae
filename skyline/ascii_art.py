"""Text previews of contribution grids drawn with block characters."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from skyline.types import ContributionDay

EMPTY_BLOCK = " "
FUTURE_BLOCK = "."

FOUNDATION_LOW = "░"
FOUNDATION_MED = "▒"
FOUNDATION_HIGH = "▓"

MIDDLE_LOW = "░"
MIDDLE_MED = "▒"
MIDDLE_HIGH = "▓"

TOP_LOW = "╻"
TOP_MED = "┃"
TOP_HIGH = "╽"

LOW_THRESHOLD = 0.33
MEDIUM_THRESHOLD = 0.66

GRID_WIDTH = 53
DAYS_PER_WEEK = 7

_HEADER_LINES = (
    "           ____ _ _   _   _       _     ",
    "          / ___(_) |_| | | |_   _| |__  ",
    "         | |  _| | __| |_| | | | | '_ \\ ",
    "         | |_| | | |_|  _  | |_| | |_) |",
    "          \\____|_|\\__|_| |_|\\__,_|_.__/ ",
    "",
    "          ____  _          _ _            ",
    "         / ___|| | ___   _| (_)_ __   ___ ",
    "         \\___ \\| |/ / | | | | | '_ \\ / _ \\",
    "          ___) |   <| |_| | | | | | | __/",
    "         |____/|_|\\_\\\\__, |_|_|_| |_|\\___|",
    "                    |___/",
)

HEADER_TEMPLATE = "\n" + "\n".join(_HEADER_LINES) + "\n"

_FOUNDATION = (FOUNDATION_LOW, FOUNDATION_MED, FOUNDATION_HIGH)
_MIDDLE = (MIDDLE_LOW, MIDDLE_MED, MIDDLE_HIGH)
_TOP = (TOP_LOW, TOP_MED, TOP_HIGH)

_FUTURE_COUNT = -1


def center_text(text: str) -> str:
    """Center ``text`` within GRID_WIDTH columns, truncating if too long; ends with a newline."""
    width = len(text)
    if width >= GRID_WIDTH:
        return text[:GRID_WIDTH] + "\n"
    total_padding = GRID_WIDTH - width
    if total_padding <= 1:
        return text + "\n"
    left = total_padding // 2
    right = total_padding - left
    return " " * left + text + " " * right + "\n"


def get_block_type(normalized: float) -> int:
    """Return 0, 1 or 2 for low, medium or high intensity."""
    if normalized < LOW_THRESHOLD:
        return 0
    if normalized < MEDIUM_THRESHOLD:
        return 1
    return 2


def get_block(normalized: float, day_idx: int, non_zero_count: int) -> str:
    """Pick the block character for a cell from its intensity and height in the column."""
    if normalized == 0:
        return EMPTY_BLOCK
    level = get_block_type(normalized)
    if non_zero_count == 1:
        return _FOUNDATION[level]
    if day_idx == non_zero_count - 1:
        return _TOP[level]
    if day_idx == 0:
        return _FOUNDATION[level]
    return _MIDDLE[level]


def sort_contribution_days(
    week: Sequence[ContributionDay], now: datetime
) -> tuple[list[ContributionDay], int]:
    """Reorder a week bottom to top: active days, then idle days, then future days.

    Future days are given a count of -1. The result is padded to seven days
    with empty entries; the second value is the number of active days.
    """
    active: list[ContributionDay] = []
    idle: list[ContributionDay] = []
    future: list[ContributionDay] = []
    for day in week:
        if day.is_after(now):
            future.append(ContributionDay(contribution_count=_FUTURE_COUNT, date=day.date))
        elif day.contribution_count > 0:
            active.append(day)
        else:
            idle.append(day)

    ordered = active + idle + future
    if len(ordered) > DAYS_PER_WEEK:
        raise ValueError(f"a week cannot hold more than {DAYS_PER_WEEK} days")
    ordered.extend(ContributionDay() for _ in range(DAYS_PER_WEEK - len(ordered)))
    return ordered, len(active)


def generate_ascii(
    contribution_grid: Sequence[Sequence[ContributionDay]],
    username: str,
    year: int,
    include_header: bool,
    include_user_info: bool,
) -> str:
    """Draw the grid as text, one column per week, tallest activity at the bottom.

    Raises ValueError for an empty grid.
    """
    if not contribution_grid:
        raise ValueError("invalid contribution grid")

    parts: list[str] = []
    if include_header:
        parts.extend(line + "\n" for line in HEADER_TEMPLATE.split("\n"))
        parts.append("\n")

    max_contributions = max(
        (day.contribution_count for week in contribution_grid for day in week),
        default=0,
    )
    max_contributions = max(max_contributions, 0)

    now = datetime.now()
    columns: list[list[str]] = []
    for week in contribution_grid:
        ordered, active_count = sort_contribution_days(week, now)
        column = []
        for day_idx, day in enumerate(ordered):
            if day.contribution_count == _FUTURE_COUNT:
                column.append(FUTURE_BLOCK)
                continue
            normalized = (
                day.contribution_count / max_contributions if max_contributions else 0.0
            )
            column.append(get_block(normalized, day_idx, active_count))
        columns.append(column)

    for row in reversed(range(DAYS_PER_WEEK)):
        parts.append("".join(column[row] for column in columns) + "\n")

    if include_user_info:
        parts.append("\n")
        parts.append(center_text(username))
        parts.append(center_text(str(year)))

    return "".join(parts)