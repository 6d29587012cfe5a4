"""Infinite lines and line segments in the plane.

Points are ``(x, y)`` pairs. A line stores a point it passes through and a
unit direction; positions along it are measured from that point.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

Point = tuple[float, float]

_PARALLEL_EPSILON = 0.00000001


@dataclass(frozen=True)
class Line:
    """A line through ``p`` with unit direction ``u``."""

    p: Point
    u: Point

    @classmethod
    def from_points(cls, p0: Sequence[float], p1: Sequence[float]) -> "Line":
        """Build the line through ``p0`` and ``p1``, directed from ``p0`` to ``p1``."""
        dx = p1[0] - p0[0]
        dy = p1[1] - p0[1]
        mag = math.sqrt(dx * dx + dy * dy)
        if mag == 0:
            raise ValueError("a line needs two distinct points")
        return cls((float(p0[0]), float(p0[1])), (dx / mag, dy / mag))

    def coordinate(self, q: Sequence[float]) -> float:
        """Return the position along the line of the point nearest ``q``."""
        return (q[0] - self.p[0]) * self.u[0] + (q[1] - self.p[1]) * self.u[1]

    def intersect(self, other: "Line") -> Point | None:
        """Return the crossing point of two lines, or None when they are parallel."""
        m00 = self.u[0]
        m01 = -other.u[0]
        m10 = self.u[1]
        m11 = -other.u[1]

        det = m00 * m11 - m01 * m10
        if abs(det) < _PARALLEL_EPSILON:
            return None

        i00 = m11 / det
        i01 = -m01 / det
        b00 = other.p[0] - self.p[0]
        b10 = other.p[1] - self.p[1]
        x00 = i00 * b00 + i01 * b10

        return (self.u[0] * x00 + self.p[0], self.u[1] * x00 + self.p[1])


def _within(line: Line, start: Sequence[float], end: Sequence[float], q: Sequence[float]) -> bool:
    a = line.coordinate(start)
    b = line.coordinate(end)
    c = line.coordinate(q)
    return not ((c < a and c < b) or (c > a and c > b))


@dataclass(frozen=True)
class LineSegment:
    """The segment from ``line.p`` to ``p1``."""

    line: Line
    p1: Point

    @classmethod
    def from_points(cls, p0: Sequence[float], p1: Sequence[float]) -> "LineSegment":
        return cls(Line.from_points(p0, p1), (float(p1[0]), float(p1[1])))

    @property
    def p0(self) -> Point:
        return self.line.p

    def closest_point(self, q: Sequence[float]) -> Point:
        """Return the point of the segment nearest ``q``."""
        a = self.line.coordinate(self.line.p)
        b = self.line.coordinate(self.p1)
        c = self.line.coordinate(q)
        lo, hi = (a, b) if a < b else (b, a)
        c = min(max(c, lo), hi)
        return (
            self.line.p[0] + c * self.line.u[0],
            self.line.p[1] + c * self.line.u[1],
        )

    def intersect_segment(self, other: "LineSegment") -> Point | None:
        """Return where two segments cross, or None if they do not."""
        hit = self.line.intersect(other.line)
        if hit is None:
            return None
        if not _within(self.line, self.line.p, self.p1, hit):
            return None
        if not _within(other.line, other.line.p, other.p1, hit):
            return None
        return hit

    def intersect_line(self, line: Line) -> Point | None:
        """Return where this segment crosses ``line``, or None if it does not."""
        hit = self.line.intersect(line)
        if hit is None:
            return None
        if not _within(self.line, self.line.p, self.p1, hit):
            return None
        return hit