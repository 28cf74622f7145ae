"""Writing triangle meshes as binary STL files.

A binary STL file holds an 80-byte header, a little-endian uint32 triangle
count, and for each triangle a normal and three vertices as float32 values
followed by a uint16 attribute count.
"""

from __future__ import annotations

import struct
from collections.abc import Sequence

from skyline.errors import ErrorType, SkylineError
from skyline.logger import get_logger
from skyline.types import Triangle

HEADER_TEXT = b"Generated by GitHub Contributions Skyline Generator"
HEADER_SIZE = 80
TRIANGLE_SIZE = 12 * 4 + 2
MAX_TRIANGLE_COUNT = 0xFFFFFFFF

_BUFFER_SIZE = 1024 * 1024
_PROGRESS_INTERVAL = 10000
_TRIANGLE_STRUCT = struct.Struct("<12fH")
_COUNT_STRUCT = struct.Struct("<I")


def _pack_triangle(triangle: Triangle) -> bytes:
    t = triangle.to_float32()
    return _TRIANGLE_STRUCT.pack(
        t.normal.x, t.normal.y, t.normal.z,
        t.v1.x, t.v1.y, t.v1.z,
        t.v2.x, t.v2.y, t.v2.z,
        t.v3.x, t.v3.y, t.v3.z,
        0,
    )


def write_stl_binary(filename: str, triangles: Sequence[Triangle] | None) -> None:
    """Write ``triangles`` to ``filename`` in binary STL format.

    Raises SkylineError for an empty filename, too many triangles, or any
    I/O failure.
    """
    if not filename:
        raise SkylineError(ErrorType.VALIDATION, "STL filename cannot be empty")

    triangles = triangles or []
    log = get_logger()

    try:
        handle = open(filename, "wb", buffering=_BUFFER_SIZE)
    except OSError as exc:
        raise SkylineError(ErrorType.IO, "failed to create STL file", exc) from exc

    try:
        with handle:
            try:
                handle.write(HEADER_TEXT.ljust(HEADER_SIZE, b"\0"))
            except OSError as exc:
                raise SkylineError(ErrorType.IO, "failed to write STL header", exc) from exc

            count = len(triangles)
            if count > MAX_TRIANGLE_COUNT:
                raise SkylineError(
                    ErrorType.VALIDATION,
                    "triangle count exceeds valid range for STL format",
                )
            try:
                handle.write(_COUNT_STRUCT.pack(count))
            except OSError as exc:
                raise SkylineError(ErrorType.IO, "failed to write triangle count", exc) from exc

            for written, triangle in enumerate(triangles, start=1):
                try:
                    handle.write(_pack_triangle(triangle))
                except OSError as exc:
                    raise SkylineError(
                        ErrorType.IO, "failed to write triangle data", exc
                    ) from exc
                if written % _PROGRESS_INTERVAL == 0:
                    log.debug("Written %d/%d triangles", written, count)
    except OSError as exc:
        raise SkylineError(ErrorType.IO, "failed to close STL file", exc) from exc