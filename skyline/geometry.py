"""Vector math and box-shaped mesh primitives for skyline models."""

from __future__ import annotations

import math
from collections.abc import Sequence

from skyline.errors import ErrorType, SkylineError, wrap
from skyline.types import ContributionDay, Point3D, Triangle

BASE_HEIGHT = 10.0
MAX_HEIGHT = 25.0
CELL_SIZE = 2.5
GRID_SIZE = 53
BASE_THICKNESS = 10.0
MIN_HEIGHT = CELL_SIZE

TEXT_PADDING = CELL_SIZE * 2
TEXT_WIDTH_PCT = 0.6
TEXT_DEPTH = 2.0 * CELL_SIZE

YEAR_SPACING = 0.0
YEAR_OFFSET = 7.0 * CELL_SIZE

_ZERO_EPSILON = 1e-10

# Vertex indices of each box face, wound so the normal points outward.
_BOX_FACES: tuple[tuple[int, int, int, int], ...] = (
    (0, 3, 2, 1),
    (5, 6, 7, 4),
    (4, 7, 3, 0),
    (1, 2, 6, 5),
    (3, 7, 6, 2),
    (4, 0, 1, 5),
)


def validate_vector(v: Point3D) -> None:
    """Raise a validation SkylineError if any component is NaN or infinite."""
    if not v.is_valid():
        raise SkylineError(ErrorType.VALIDATION, "vector contains invalid components")


def vector_subtract(a: Point3D, b: Point3D) -> Point3D:
    """Return the vector pointing from ``b`` to ``a``."""
    return Point3D(a.x - b.x, a.y - b.y, a.z - b.z)


def vector_cross(u: Point3D, v: Point3D) -> Point3D:
    """Return the cross product ``u x v``."""
    return Point3D(
        u.y * v.z - u.z * v.y,
        u.z * v.x - u.x * v.z,
        u.x * v.y - u.y * v.x,
    )


def is_zero_vector(v: Point3D) -> bool:
    """Return True if every component is within a tiny epsilon of zero."""
    return all(abs(c) < _ZERO_EPSILON for c in (v.x, v.y, v.z))


def normalize_vector(v: Point3D) -> Point3D:
    """Scale ``v`` to unit length; a zero-length vector is returned unchanged."""
    length = math.sqrt(v.x * v.x + v.y * v.y + v.z * v.z)
    if length > 0:
        return Point3D(v.x / length, v.y / length, v.z / length)
    return v


def calculate_normal(p1: Point3D, p2: Point3D, p3: Point3D) -> Point3D:
    """Return the unit normal of the triangle ``p1, p2, p3``.

    Raises a validation SkylineError for invalid points or a degenerate triangle.
    """
    for point in (p1, p2, p3):
        validate_vector(point)
    normal = vector_cross(vector_subtract(p2, p1), vector_subtract(p3, p1))
    if is_zero_vector(normal):
        raise SkylineError(ErrorType.VALIDATION, "degenerate triangle")
    return normalize_vector(normal)


def create_quad(v1: Point3D, v2: Point3D, v3: Point3D, v4: Point3D) -> list[Triangle]:
    """Split the quadrilateral ``v1..v4`` into two triangles sharing one normal."""
    try:
        normal = calculate_normal(v1, v2, v3)
    except SkylineError as exc:
        raise wrap(exc, "failed to calculate quad normal") from exc
    return [
        Triangle(normal=normal, v1=v1, v2=v2, v3=v3),
        Triangle(normal=normal, v1=v1, v2=v3, v3=v4),
    ]


def create_box(
    x: float, y: float, z: float, width: float, height: float, depth: float
) -> list[Triangle]:
    """Return the 12 triangles of a box.

    ``(x, y, z)`` is the front bottom left corner; ``width`` runs along X,
    ``height`` along Y and ``depth`` along Z. Normals point outward.
    """
    if width < 0 or height < 0 or depth < 0:
        raise SkylineError(ErrorType.VALIDATION, "negative dimensions not allowed")

    vertices = (
        Point3D(x, y, z),
        Point3D(x + width, y, z),
        Point3D(x + width, y + height, z),
        Point3D(x, y + height, z),
        Point3D(x, y, z + depth),
        Point3D(x + width, y, z + depth),
        Point3D(x + width, y + height, z + depth),
        Point3D(x, y + height, z + depth),
    )

    triangles: list[Triangle] = []
    for a, b, c, d in _BOX_FACES:
        try:
            triangles.extend(create_quad(vertices[a], vertices[b], vertices[c], vertices[d]))
        except SkylineError as exc:
            raise SkylineError(ErrorType.STL, "failed to create quad", exc) from exc
    return triangles


def create_cube(
    x: float, y: float, z: float, width: float, height: float, depth: float
) -> list[Triangle]:
    """Return the triangles of a box whose front bottom left corner is ``(x, y, z)``."""
    return create_box(x, y, z, width, height, depth)


def create_cuboid_base(width: float, depth: float) -> list[Triangle]:
    """Return the base slab, spanning Z from ``-BASE_HEIGHT`` up to 0."""
    return create_box(0.0, 0.0, -BASE_HEIGHT, width, depth, BASE_HEIGHT)


def create_column(x: float, y: float, height: float, size: float) -> list[Triangle]:
    """Return a square column of side ``size`` rising from Z = 0 to ``height``."""
    return create_box(x, y, 0.0, size, size, height)


def normalize_contribution(count: int, max_count: int) -> float:
    """Map a contribution count to a column height.

    Zero contributions give 0; otherwise the height lies between MIN_HEIGHT
    and MAX_HEIGHT on a square-root scale.
    """
    if count == 0:
        return 0.0
    if max_count <= 0:
        return MIN_HEIGHT
    normalized = math.sqrt(count) / math.sqrt(max_count)
    return MIN_HEIGHT + normalized * (MAX_HEIGHT - MIN_HEIGHT)


def create_contribution_geometry(
    contributions: Sequence[Sequence[ContributionDay]],
    year_index: int,
    max_contrib: int,
) -> list[Triangle]:
    """Return the columns for one year's grid of contributions, offset by ``year_index``."""
    base_y_offset = 2 * CELL_SIZE + year_index * 7 * CELL_SIZE
    triangles: list[Triangle] = []
    for week_idx, week in enumerate(contributions):
        for day_idx, day in enumerate(week):
            if day.contribution_count > 0:
                height = normalize_contribution(day.contribution_count, max_contrib)
                x = 2 * CELL_SIZE + week_idx * CELL_SIZE
                y = base_y_offset + day_idx * CELL_SIZE
                triangles.extend(create_column(x, y, height, CELL_SIZE))
    return triangles


def calculate_multi_year_dimensions(year_count: int) -> tuple[float, float]:
    """Return the (width, depth) of a model holding ``year_count`` years, with padding."""
    width = GRID_SIZE * CELL_SIZE + 4 * CELL_SIZE
    depth = 7 * year_count * CELL_SIZE + 4 * CELL_SIZE
    return width, depth