"""Assembling skyline models from contribution data and writing them to STL."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from skyline import geometry
from skyline.errors import ErrorType, SkylineError, wrap
from skyline.logger import get_logger
from skyline.stl import write_stl_binary
from skyline.types import ContributionDay, Triangle

Grid = Sequence[Sequence[ContributionDay]]

_BASE_TRIANGLES = 12
_TRIANGLES_PER_COLUMN = 12
_TEXT_TRIANGLES_ESTIMATE = 1000


@dataclass(frozen=True)
class ModelDimensions:
    """Inner measurements of the model, in millimetres."""

    inner_width: float
    inner_depth: float


def generate_stl(contributions: Grid, output_path: str, username: str, year: int) -> None:
    """Build a model for a single year and write it to ``output_path``."""
    generate_stl_range([contributions], output_path, username, year, year)


def generate_stl_range(
    contributions: Sequence[Grid] | None,
    output_path: str,
    username: str,
    start_year: int,
    end_year: int,
) -> None:
    """Build a model from several years of contributions and write it as binary STL.

    ``contributions`` is indexed as ``[year][week][day]``. Raises SkylineError
    on invalid input or when the file cannot be written.
    """
    log = get_logger()
    log.debug(
        "Starting STL generation for user %s, years %d-%d", username, start_year, end_year
    )

    if not contributions:
        raise SkylineError(
            ErrorType.VALIDATION,
            "input validation failed: contributions data cannot be empty",
        )

    try:
        validate_input(contributions[0], output_path, username)
    except SkylineError as exc:
        raise wrap(exc, "input validation failed") from exc

    try:
        dims = calculate_dimensions(len(contributions))
    except SkylineError as exc:
        raise wrap(exc, "failed to calculate dimensions") from exc

    max_contribution = find_max_contributions_across_years(contributions)

    try:
        triangles = generate_model_geometry(
            contributions, dims, max_contribution, username, start_year, end_year
        )
    except SkylineError as exc:
        raise wrap(exc, "failed to generate geometry") from exc

    log.info("Model generation complete: %d total triangles", len(triangles))
    log.debug("Writing STL file to: %s", output_path)

    try:
        write_stl_binary(output_path, triangles)
    except SkylineError as exc:
        raise wrap(exc, "failed to write STL file") from exc

    log.info("STL file written successfully to: %s", output_path)


def validate_input(contributions: Grid | None, output_path: str, username: str) -> None:
    """Raise a validation SkylineError if any input is missing or too large."""
    if not contributions:
        raise SkylineError(ErrorType.VALIDATION, "contributions data cannot be empty")
    if len(contributions) > geometry.GRID_SIZE:
        raise SkylineError(
            ErrorType.VALIDATION, "contributions data exceeds maximum grid size"
        )
    if not output_path:
        raise SkylineError(ErrorType.VALIDATION, "output path cannot be empty")
    if not username:
        raise SkylineError(ErrorType.VALIDATION, "username cannot be empty")


def calculate_dimensions(year_count: int) -> ModelDimensions:
    """Return the model's inner dimensions for ``year_count`` years."""
    if year_count <= 0:
        raise SkylineError(ErrorType.VALIDATION, "year count must be positive")
    width, depth = geometry.calculate_multi_year_dimensions(year_count)
    if width <= 0 or depth <= 0:
        raise SkylineError(ErrorType.VALIDATION, "invalid model dimensions")
    return ModelDimensions(inner_width=width, inner_depth=depth)


def find_max_contributions(contributions: Grid) -> int:
    """Return the largest daily count in one year's grid, or 0."""
    return max(
        (day.contribution_count for week in contributions for day in week),
        default=0,
    )


def find_max_contributions_across_years(
    contributions_per_year: Sequence[Grid] | None,
) -> int:
    """Return the largest daily count across all years, or 0."""
    return max(
        (find_max_contributions(year) for year in contributions_per_year or []),
        default=0,
    )


def generate_model_geometry(
    contributions_per_year: Sequence[Grid] | None,
    dims: ModelDimensions,
    max_contrib: int,
    username: str,
    start_year: int,
    end_year: int,
) -> list[Triangle]:
    """Return the triangles of the base and of every year's contribution columns."""
    if not contributions_per_year:
        raise SkylineError(ErrorType.VALIDATION, "contributions data cannot be empty")

    get_logger().debug(
        "Generating geometry for %s, years %d-%d", username or "anonymous", start_year, end_year
    )

    triangles: list[Triangle] = []
    triangles.extend(generate_base(dims))
    triangles.extend(generate_columns_for_year_range(contributions_per_year, max_contrib))
    return triangles


def generate_base(dims: ModelDimensions) -> list[Triangle]:
    """Return the base slab; on failure log a warning and return no triangles."""
    try:
        return geometry.create_cuboid_base(dims.inner_width, dims.inner_depth)
    except SkylineError as exc:
        get_logger().warning(
            "Failed to generate base geometry: %s. Continuing without base.", exc
        )
        return []


def generate_columns_for_year_range(
    contributions_per_year: Sequence[Grid], max_contrib: int
) -> list[Triangle]:
    """Return the columns of every year, most recent year at the front.

    A year whose geometry fails is skipped with a warning.
    """
    triangles: list[Triangle] = []
    count = len(contributions_per_year)
    for index in reversed(range(count)):
        year_offset = count - 1 - index
        try:
            triangles.extend(
                geometry.create_contribution_geometry(
                    contributions_per_year[index], year_offset, max_contrib
                )
            )
        except SkylineError as exc:
            get_logger().warning(
                "Failed to generate column geometry for year %d: %s. Skipping year.",
                index,
                exc,
            )
    return triangles


def estimate_triangle_count(contributions: Grid) -> int:
    """Return a rough upper estimate of the triangles one year's model needs."""
    active_days = sum(
        1 for week in contributions for day in week if day.contribution_count > 0
    )
    return _BASE_TRIANGLES + active_days * _TRIANGLES_PER_COLUMN + _TEXT_TRIANGLES_ESTIMATE


def create_year_geometry(
    contributions: Grid, year_index: int, max_contrib: int
) -> list[Triangle]:
    """Return unpadded columns for one year, placed ``year_index`` years back.

    Columns that cannot be built are skipped with a warning.
    """
    base_y_offset = year_index * (geometry.YEAR_OFFSET + geometry.YEAR_SPACING)
    triangles: list[Triangle] = []
    for week_idx, week in enumerate(contributions):
        for day_idx, day in enumerate(week):
            if day.contribution_count <= 0:
                continue
            height = geometry.normalize_contribution(day.contribution_count, max_contrib)
            x = week_idx * geometry.CELL_SIZE
            y = base_y_offset + day_idx * geometry.CELL_SIZE
            try:
                triangles.extend(geometry.create_column(x, y, height, geometry.CELL_SIZE))
            except SkylineError as exc:
                get_logger().warning(
                    "Failed to generate column geometry: %s. Skipping column.", exc
                )
    return triangles