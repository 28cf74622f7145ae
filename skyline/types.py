"""Contribution data and 3D geometry value types."""

from __future__ import annotations

import math
import re
import struct
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


def _parse_date(text: str) -> datetime:
    if not _DATE_PATTERN.fullmatch(text):
        raise ValueError(f"invalid date {text!r}")
    return datetime.strptime(text, "%Y-%m-%d").replace(tzinfo=timezone.utc)


@dataclass
class ContributionDay:
    """A single day of contributions."""

    contribution_count: int = 0
    date: str = ""

    def is_after(self, moment: datetime) -> bool:
        """Return True if this day starts after ``moment``; False if the date is unparsable."""
        try:
            day = _parse_date(self.date)
        except ValueError:
            return False
        if moment.tzinfo is None:
            day = day.replace(tzinfo=None)
        return day > moment

    def validate(self) -> None:
        """Raise ValueError if the date is malformed or the count is negative."""
        try:
            _parse_date(self.date)
        except ValueError:
            raise ValueError("invalid date format, expected YYYY-MM-DD") from None
        if self.contribution_count < 0:
            raise ValueError("contribution count cannot be negative")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ContributionDay:
        return cls(
            contribution_count=int(data.get("contributionCount", 0)),
            date=str(data.get("date", "")),
        )


@dataclass
class ContributionsResponse:
    """Contribution calendar data for one user, as returned by the API."""

    login: str = ""
    total_contributions: int = 0
    weeks: list[list[ContributionDay]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ContributionsResponse:
        """Build from the decoded response body (the object holding ``user``)."""
        user = data.get("user") or {}
        collection = user.get("contributionsCollection") or {}
        calendar = collection.get("contributionCalendar") or {}
        weeks = [
            [ContributionDay.from_dict(day) for day in week.get("contributionDays") or []]
            for week in calendar.get("weeks") or []
        ]
        return cls(
            login=str(user.get("login", "")),
            total_contributions=int(calendar.get("totalContributions", 0)),
            weeks=weeks,
        )


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


@dataclass(frozen=True)
class Point3DFloat32:
    """A point whose coordinates are single-precision values."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class Point3D:
    """A point in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def is_valid(self) -> bool:
        """Return True if no coordinate is NaN or infinite."""
        return all(math.isfinite(c) for c in (self.x, self.y, self.z))

    def to_float32(self) -> Point3DFloat32:
        return Point3DFloat32(_to_float32(self.x), _to_float32(self.y), _to_float32(self.z))


@dataclass(frozen=True)
class TriangleFloat32:
    """A triangle with single-precision coordinates, as stored in STL files."""

    normal: Point3DFloat32 = Point3DFloat32()
    v1: Point3DFloat32 = Point3DFloat32()
    v2: Point3DFloat32 = Point3DFloat32()
    v3: Point3DFloat32 = Point3DFloat32()


@dataclass(frozen=True)
class Triangle:
    """A triangle defined by a normal vector and three vertices."""

    normal: Point3D = Point3D()
    v1: Point3D = Point3D()
    v2: Point3D = Point3D()
    v3: Point3D = Point3D()

    def validate(self) -> None:
        """Raise ValueError for invalid coordinates or a non-unit normal."""
        if not all(p.is_valid() for p in (self.normal, self.v1, self.v2, self.v3)):
            raise ValueError("triangle contains invalid coordinates")
        n = self.normal
        length = math.sqrt(n.x * n.x + n.y * n.y + n.z * n.z)
        if abs(length - 1.0) > 1e-6:
            raise ValueError("normal vector is not normalized")

    def to_float32(self) -> TriangleFloat32:
        return TriangleFloat32(
            normal=self.normal.to_float32(),
            v1=self.v1.to_float32(),
            v2=self.v2.to_float32(),
            v3=self.v3.to_float32(),
        )