"""Convex hulls, closest boundary points and scan-line rasterization of polygons.

Points are ``(x, y)`` pairs; a polygon is a sequence of vertices, implicitly closed.
"""

from __future__ import annotations

import math
from typing import Sequence

from aprilkit.lines import Line, LineSegment
from aprilkit.polygons import distance

Point = tuple[float, float]
Polygon = Sequence[Sequence[float]]


def convex_hull(points: Polygon) -> list[Point]:
    """Return the convex hull of ``points`` in counter-clockwise order.

    Gift wrapping from the left-most point, using only additions and
    multiplications so integer coordinates give exact results. Colinear
    points along a hull edge are omitted.
    """
    insz = len(points)
    if insz < 2:
        raise ValueError("convex hull needs at least two points")

    pts = [(float(p[0]), float(p[1])) for p in points]

    left = 0
    for i, p in enumerate(pts):
        if p[0] < pts[left][0]:
            left = i

    hull = [left]
    p = left
    while True:
        q: int | None = None
        n0 = n1 = 0.0
        px, py = pts[p]
        for i, thisq in enumerate(pts):
            if i == p:
                continue
            if q is None:
                q = i
                n0 = thisq[1] - py
                n1 = -thisq[0] + px
                continue
            e0 = thisq[0] - px
            e1 = thisq[1] - py
            if e0 * n0 + e1 * n1 > 0:
                q = i
                n0 = thisq[1] - py
                n1 = -thisq[0] + px

        assert q is not None
        if q == left:
            break

        colinear = False
        if len(hull) > 1:
            o = pts[hull[-2]]
            if n0 * (o[0] - px) + n1 * (o[1] - py) == 0:
                colinear = True

        if colinear:
            hull[-1] = q
        else:
            hull.append(q)
            if len(hull) > insz:
                raise ValueError("degenerate point set: hull does not close")

        p = q

    return [pts[i] for i in hull]


def polygon_closest_boundary_point(poly: Polygon, q: Sequence[float]) -> Point:
    """Return the point on the boundary of ``poly`` nearest ``q``."""
    psz = len(poly)
    if psz == 0:
        raise ValueError("polygon has no vertices")

    best: Point | None = None
    min_dist = math.inf
    for i in range(psz):
        seg = LineSegment.from_points(poly[i], poly[(i + 1) % psz])
        candidate = seg.closest_point(q)
        d = distance(q, candidate)
        if d < min_dist:
            best = candidate
            min_dist = d

    if best is None:
        raise ValueError("no boundary point found")
    return best


def polygon_rasterize(poly: Polygon, y: float) -> list[float]:
    """Return the sorted x coordinates where the polygon's edges cross the line at ``y``."""
    sz = len(poly)
    scan = Line.from_points((0.0, y), (1.0, y))
    xs = []
    for i in range(sz):
        seg = LineSegment.from_points(poly[i], poly[(i + 1) % sz])
        hit = seg.intersect_line(scan)
        if hit is not None:
            xs.append(hit[0])
    xs.sort()
    return xs