"""Year range parsing and output file naming."""

from __future__ import annotations

import re
from datetime import datetime

GITHUB_LAUNCH_YEAR = 2008
_OUTPUT_FILE_FORMAT = "{user}-{years}-github-skyline.stl"
_INTEGER = re.compile(r"[+-]?\d+")


def _parse_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f'invalid year "{text}"')
    return int(text)


def parse_year_range(year_range: str) -> tuple[int, int]:
    """Parse ``"2024"`` or ``"2014-2024"`` into a validated (start, end) pair."""
    if "-" in year_range:
        parts = year_range.split("-")
        if len(parts) != 2:
            raise ValueError("invalid year range format")
        start_year = _parse_int(parts[0])
        end_year = _parse_int(parts[1])
    else:
        start_year = end_year = _parse_int(year_range)
    validate_year_range(start_year, end_year)
    return start_year, end_year


def validate_year_range(start_year: int, end_year: int) -> None:
    """Raise ValueError unless launch year <= start <= end <= current year."""
    current_year = datetime.now().year
    if start_year < GITHUB_LAUNCH_YEAR or end_year > current_year:
        raise ValueError(f"years must be between {GITHUB_LAUNCH_YEAR} and {current_year}")
    if start_year > end_year:
        raise ValueError("start year cannot be after end year")


def format_year_range(start_year: int, end_year: int) -> str:
    """Return ``"YYYY"`` for one year or ``"YYYY-YY"`` for a range."""
    if start_year == end_year:
        return str(start_year)
    return f"{start_year:04d}-{end_year % 100:02d}"


def generate_output_filename(user: str, start_year: int, end_year: int, output: str) -> str:
    """Return ``output`` (with an .stl suffix ensured) or a default name."""
    if output:
        if not output.lower().endswith(".stl"):
            return output + ".stl"
        return output
    return _OUTPUT_FILE_FORMAT.format(user=user, years=format_year_range(start_year, end_year))