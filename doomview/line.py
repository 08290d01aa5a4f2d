"""Oriented lines in the plane."""

from __future__ import annotations

from dataclasses import dataclass

from doomview.vector import Vec2

_PARALLEL_EPSILON = 1e-16


@dataclass(frozen=True)
class Line2:
    """A line through `origin` along the unit direction `displace`."""

    origin: Vec2
    displace: Vec2

    @classmethod
    def from_origin_and_displace(cls, origin: Vec2, displace: Vec2) -> Line2:
        return cls(origin, displace.normalized())

    @classmethod
    def from_two_points(cls, origin: Vec2, towards: Vec2) -> Line2:
        return cls(origin, (towards - origin).normalized())

    def inverted_halfspaces(self) -> Line2:
        """The same line with its direction, and so its sides, reversed."""
        return Line2(self.origin, -self.displace)

    def signed_distance(self, point: Vec2) -> float:
        return point.cross(self.displace) + self.displace.cross(self.origin)

    def intersect_offset(self, other: Line2) -> float | None:
        """Offset along this line of its crossing with `other`, or None if parallel."""
        numerator = self.displace.cross(other.displace)
        if abs(numerator) < _PARALLEL_EPSILON:
            return None
        return (other.origin - self.origin).cross(other.displace) / numerator

    def intersect_point(self, other: Line2) -> Vec2 | None:
        offset = self.intersect_offset(other)
        return None if offset is None else self.at_offset(offset)

    def at_offset(self, offset: float) -> Vec2:
        return self.origin + self.displace * offset