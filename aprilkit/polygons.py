"""Polygon predicates: orientation, point containment and overlap.

A polygon is a sequence of ``(x, y)`` vertices, implicitly closed.
"""

from __future__ import annotations

import math
from typing import Sequence

from aprilkit.lines import LineSegment

Point = tuple[float, float]
Polygon = Sequence[Sequence[float]]


def _mod2pi(v: float) -> float:
    """Wrap an angle into ``[-pi, pi)``."""
    twopi = 2 * math.pi
    return v - twopi * math.floor((v + math.pi) / twopi)


def _require_vertices(poly: Polygon, count: int) -> None:
    if len(poly) < count:
        raise ValueError(f"polygon needs at least {count} vertices")


def distance(a: Sequence[float], b: Sequence[float]) -> float:
    return math.sqrt((a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2)


def polygon_make_ccw(poly: Polygon) -> list[Point]:
    """Return the vertices in counter-clockwise order, reversing if needed."""
    _require_vertices(poly, 1)
    sz = len(poly)
    total_theta = 0.0
    last_theta = 0.0
    for i in range(sz + 1):
        p0 = poly[i % sz]
        p1 = poly[(i + 1) % sz]
        this_theta = math.atan2(p1[1] - p0[1], p1[0] - p0[0])
        if i > 0:
            total_theta += _mod2pi(this_theta - last_theta)
        last_theta = this_theta

    points = [(float(p[0]), float(p[1])) for p in poly]
    if total_theta > 0:
        return points
    return points[::-1]


def polygon_contains_point_ref(poly: Polygon, q: Sequence[float]) -> bool:
    """Winding test by summing angles; slower reference for ``polygon_contains_point``."""
    _require_vertices(poly, 1)
    psz = len(poly)
    acc_theta = 0.0
    last_theta = 0.0
    for i in range(psz + 1):
        p = poly[i % psz]
        this_theta = math.atan2(q[1] - p[1], q[0] - p[0])
        if i != 0:
            acc_theta += _mod2pi(this_theta - last_theta)
        last_theta = this_theta
    return acc_theta > math.pi


def _quadrant(p: Sequence[float], q: Sequence[float]) -> int:
    if p[0] < q[0]:
        return 2 if p[1] < q[1] else 1
    return 3 if p[1] < q[1] else 0


def polygon_contains_point(poly: Polygon, q: Sequence[float]) -> bool:
    """Winding test counting quarter turns around ``q``."""
    _require_vertices(poly, 1)
    psz = len(poly)
    quad_acc = 0
    last_quadrant = 0
    for i in range(psz + 1):
        p = poly[i % psz]
        quadrant = _quadrant(p, q)
        if i > 0:
            dquadrant = quadrant - last_quadrant
            if dquadrant in (-3, 1):
                quad_acc += 1
            elif dquadrant in (-1, 3):
                quad_acc -= 1
            elif dquadrant in (-2, 2):
                # Diagonal jump: decide the direction of the half turn.
                p0 = poly[i - 1]
                nx = p[1] - q[1]
                ny = -p[0] + q[0]
                d = nx * (p0[0] - q[0]) + ny * (p0[1] - q[1])
                quad_acc += -2 if d < 0 else 2
        last_quadrant = quadrant
    return quad_acc >= 2 or quad_acc <= -2


def _edges(poly: Polygon):
    n = len(poly)
    for i in range(n):
        yield LineSegment.from_points(poly[i], poly[(i + 1) % n])


def polygon_intersects_polygon(polya: Polygon, polyb: Polygon) -> bool:
    """Do any edges of the two polygons cross? Containment is not tested."""
    edges_b = list(_edges(polyb))
    return any(
        sega.intersect_segment(segb) is not None
        for sega in _edges(polya)
        for segb in edges_b
    )


def polygon_contains_polygon(polya: Polygon, polyb: Polygon) -> bool:
    """Does ``polya`` completely contain ``polyb``?"""
    _require_vertices(polyb, 1)
    if polygon_intersects_polygon(polya, polyb):
        return False
    return polygon_contains_point(polya, polyb[0])


def polygon_interior_point(poly: Polygon) -> Point:
    """Return the centroid of the first three vertices, a point inside the polygon."""
    _require_vertices(poly, 3)
    a, b, c = poly[0], poly[1], poly[2]
    return ((a[0] + b[0] + c[0]) / 3, (a[1] + b[1] + c[1]) / 3)


def polygon_overlaps_polygon(polya: Polygon, polyb: Polygon) -> bool:
    """Is there some point inside both polygons?"""
    if polygon_intersects_polygon(polya, polyb):
        return True
    if polygon_contains_point(polya, polygon_interior_point(polyb)):
        return True
    return polygon_contains_point(polyb, polygon_interior_point(polya))