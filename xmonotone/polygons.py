"""
Deterministic simple-polygon generators.

Families match the benchmark datasets: convex, random (star-shaped),
star, spiral band, dent, plus a few small hand-made shapes. Saved datasets
are rotated by ROT_ANGLE so that no two vertices share an x-coordinate.
"""

from __future__ import annotations

import math
import random
from typing import Dict, Callable, List, Tuple

from xmonotone.point import Point

ROT_ANGLE = 0.123456789  # radians


def rotate_points(points: List[Point], angle_rad: float) -> List[Point]:
    ca = math.cos(angle_rad)
    sa = math.sin(angle_rad)
    return [Point(ca * p.x - sa * p.y, sa * p.x + ca * p.y) for p in points]


def negate_points(points: List[Point]) -> List[Point]:
    return [-p for p in points]


def transpose_points(points: List[Point]) -> List[Point]:
    """Swap x and y (mirror about the diagonal); keeps the polygon simple."""
    return [Point(p.y, p.x) for p in points]


def convex_polygon(n: int, radius: float = 100.0) -> List[Point]:
    return [
        Point(
            radius * math.cos(2 * math.pi * i / n),
            radius * math.sin(2 * math.pi * i / n),
        )
        for i in range(n)
    ]


def random_polygon(n: int, radius: float = 100.0, seed: int = 42) -> List[Point]:
    """Star-shaped polygon: sorted random angles with random radii."""
    rng = random.Random(seed + n)
    angles = sorted(rng.random() * 2 * math.pi for _ in range(n))
    points = []
    for angle in angles:
        r = radius * (0.4 + 0.6 * rng.random())
        points.append(Point(r * math.cos(angle), r * math.sin(angle)))
    return points


def star_polygon(n_pairs: int, outer: float = 100.0, inner: float = 30.0) -> List[Point]:
    points = []
    for i in range(2 * n_pairs):
        angle = math.pi * i / n_pairs
        r = outer if i % 2 == 0 else inner
        points.append(Point(r * math.cos(angle), r * math.sin(angle)))
    return points


def spiral_polygon(n: int, turns: float = 3, start: float = 20.0, end: float = 100.0) -> List[Point]:
    """
    Spiral band: out along an Archimedean spiral, back along a copy shifted
    inwards by half the pitch. Heavily non-monotone in x.
    """
    m = max(2, n // 2)
    width = 0.5 * (end - start) / turns
    outer = []
    inner = []
    for i in range(m):
        t = i / (m - 1)
        angle = 2 * math.pi * turns * t
        r = start + (end - start) * t
        outer.append(Point(r * math.cos(angle), r * math.sin(angle)))
        inner.append(Point((r - width) * math.cos(angle), (r - width) * math.sin(angle)))
    return outer + inner[::-1]


def dent_polygon(n: int, dent_depth: float = 0.25) -> List[Point]:
    # nearly circular polygon with a single inward dent
    points = []
    outer = 100.0
    dent_i = max(0, n // 3)
    for i in range(n):
        a = 2 * math.pi * i / n
        r = outer * (dent_depth if i == dent_i else 1.0)
        points.append(Point(r * math.cos(a), r * math.sin(a)))
    return points


def comb_polygon(teeth: int = 3) -> List[Point]:
    """Comb with teeth pointing up; already x-monotone."""
    pts = [(0, 0), (teeth * 2, 0), (teeth * 2, 1)]
    for i in range(teeth - 1, -1, -1):
        x = i * 2 + 1
        pts.extend([(x + 0.5, 1), (x, 2), (x - 0.5, 1)])
    pts.append((0, 1))
    return [Point(float(x), float(y)) for x, y in pts]


def l_shape() -> List[Point]:
    return [Point(0.0, 0.0), Point(2.0, 0.0), Point(2.0, 1.0),
            Point(1.0, 1.0), Point(1.0, 2.0), Point(0.0, 2.0)]


def notch_polygon() -> List[Point]:
    """Pentagon whose right side folds back to (1, 1)."""
    return [Point(0.0, 0.0), Point(3.0, 0.0), Point(1.0, 1.0),
            Point(3.0, 2.0), Point(0.0, 3.0)]


def paper_example() -> List[Point]:
    pts = [
        (0.0, 2.5), (1.2, 5.5), (2.5, 3.8), (4.0, 6.5),
        (5.5, 4.8), (7.0, 7.0), (8.0, 5.5), (6.5, 3.5),
        (8.0, 1.5), (5.0, 2.5), (3.0, 0.0), (1.5, 1.5),
    ]
    return [Point(x, y) for x, y in pts]


FAMILIES: Dict[str, Callable[[int], List[Point]]] = {
    "convex": convex_polygon,
    "random": random_polygon,
    "star": lambda n: star_polygon(max(3, n // 2)),
    "spiral": spiral_polygon,
    "dent": dent_polygon,
}


def make_family(name: str, n: int, rotate: bool = True) -> List[Point]:
    """Build a polygon of the named family, rotated by ROT_ANGLE by default."""
    try:
        factory = FAMILIES[name]
    except KeyError:
        raise ValueError(f"unknown polygon family {name!r}, expected one of {sorted(FAMILIES)}") from None
    pts = factory(n)
    return rotate_points(pts, ROT_ANGLE) if rotate else pts


def bounding_box(points: List[Point]) -> Tuple[float, float, float, float]:
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return min(xs), min(ys), max(xs), max(ys)
