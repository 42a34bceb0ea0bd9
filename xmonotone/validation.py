"""
Checks for polygon inputs and x-monotone outputs.

Used by the tests and by scripts/check_polygon.py.
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

from xmonotone.point import Point

EPS = 1e-12


def signed_area(pts: Sequence[Point]) -> float:
    """Shoelace area, positive for counter-clockwise vertex order."""
    n = len(pts)
    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += pts[i].x * pts[j].y - pts[j].x * pts[i].y
    return area / 2


def orient(a: Point, b: Point, c: Point) -> float:
    return (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)


def _sgn(v: float) -> int:
    if v > EPS:
        return 1
    if v < -EPS:
        return -1
    return 0


def segments_properly_intersect(a: Point, b: Point, c: Point, d: Point) -> bool:
    """True if segments ab and cd cross at a single interior point."""
    s1 = _sgn(orient(a, b, c))
    s2 = _sgn(orient(a, b, d))
    s3 = _sgn(orient(c, d, a))
    s4 = _sgn(orient(c, d, b))
    return s1 * s2 < 0 and s3 * s4 < 0


def self_intersections(pts: Sequence[Point]) -> List[Tuple[int, int]]:
    """Pairs of non-adjacent edges (i, j) that cross. O(n^2)."""
    n = len(pts)
    hits = []
    for i in range(n):
        for j in range(i + 2, n):
            if i == 0 and j == n - 1:
                continue
            if segments_properly_intersect(pts[i], pts[(i + 1) % n], pts[j], pts[(j + 1) % n]):
                hits.append((i, j))
    return hits


def is_monotone_chain(pts: Sequence[Point], decreasing: bool = False, tol: float = 0.0) -> bool:
    """True if x never decreases (or never increases) by more than tol along pts."""
    for a, b in zip(pts, pts[1:]):
        step = a.x - b.x if decreasing else b.x - a.x
        if step < -tol:
            return False
    return True


def is_closed_x_monotone(pts: Sequence[Point], tol: float = 0.0) -> bool:
    """
    True if the closed boundary is x-monotone: x is non-decreasing up to the
    first vertex of maximum x and non-increasing after it.
    """
    if len(pts) < 2:
        return True
    top = max(range(len(pts)), key=lambda i: (pts[i].x, -i))
    return (is_monotone_chain(pts[:top + 1], tol=tol)
            and is_monotone_chain(pts[top:], decreasing=True, tol=tol))


def consecutive_duplicates(pts: Sequence[Point]) -> List[int]:
    """Indices i with pts[i] == pts[i + 1]."""
    return [i for i in range(len(pts) - 1) if pts[i] == pts[i + 1]]


def edge_parameter(p: Point, a: Point, b: Point, tol: float = 1e-9) -> Optional[float]:
    """
    Parameter t in [0, 1] with p ~= a + t (b - a), or None if p is farther
    than tol from segment ab.
    """
    dx = b.x - a.x
    dy = b.y - a.y
    length2 = dx * dx + dy * dy
    if length2 == 0.0:
        return 0.0 if math.hypot(p.x - a.x, p.y - a.y) <= tol else None
    t = ((p.x - a.x) * dx + (p.y - a.y) * dy) / length2
    if t < -tol or t > 1 + tol:
        return None
    # distance from the supporting line
    if abs(orient(a, b, p)) / math.sqrt(length2) > tol:
        return None
    return min(1.0, max(0.0, t))


def locate_on_boundary(p: Point, polygon: Sequence[Point], tol: float = 1e-9) -> Optional[Tuple[int, float]]:
    """(edge index, t) of the first polygon edge that p lies on, or None."""
    n = len(polygon)
    for i in range(n):
        t = edge_parameter(p, polygon[i], polygon[(i + 1) % n], tol)
        if t is not None:
            return i, t
    return None


def interpolated_points(original: Sequence[Point], result: Sequence[Point]) -> List[Point]:
    """Points of result that are not vertices of original."""
    vertices = set(original)
    return [p for p in result if p not in vertices]
