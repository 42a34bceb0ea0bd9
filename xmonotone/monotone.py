"""
X-monotone representation of a simple polygon boundary in O(n) time.

The vertex cycle is split at its lowest-left and highest-right vertices
into a lower and an upper chain. Each chain is swept left to right with a
monotone stack; for a vertex v that steps back behind the stack top:

1. Left turn (convex bulge): skip forward to the first edge that crosses
   the frontier x = top.x again and push the crossing point.
2. Right turn or straight: pop until the top edge straddles x = v.x,
   push the crossing point on that edge, then push v.

The upper chain runs through the same sweep on negated coordinates
(a 180 degree rotation), so a single implementation serves both chains.

Coordinates must be finite floats. Arithmetic is plain float64: there is
no exact predicate and no symbolic perturbation for degenerate inputs.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from xmonotone.errors import InvalidInputError
from xmonotone.point import Point, PointLike, as_point, as_points

log = logging.getLogger(__name__)


def _check_finite(points: Sequence[Point]) -> None:
    for i, p in enumerate(points):
        if not p.is_finite():
            raise InvalidInputError(f"vertex {i} has a non-finite coordinate: {p}")


# ── boundary splitting ─────────────────────────────────────────────


def extreme_indices(points: Sequence[Point]) -> Tuple[int, int]:
    """Return (lowest_left, highest_right) vertex indices; the first one wins exact ties."""
    lowest_left = highest_right = 0
    for i in range(1, len(points)):
        p = points[i]
        ll = points[lowest_left]
        if p.x < ll.x or (p.x == ll.x and p.y < ll.y):
            lowest_left = i
        hr = points[highest_right]
        if p.x > hr.x or (p.x == hr.x and p.y > hr.y):
            highest_right = i
    return lowest_left, highest_right


def split_boundary(points: Iterable[PointLike]) -> Tuple[List[Point], List[Point]]:
    """
    Split a vertex cycle into its (lower, upper) chains.

    `lower` runs forward from the lowest-left vertex up to, but not
    including, the highest-right vertex. `upper` runs forward from the
    highest-right vertex back to, but not including, the lowest-left one.
    Both wrap around the end of the list when needed, so together they
    hold every vertex exactly once.

    If one vertex is both extremes (all vertices coincide) `lower` is that
    vertex alone and `upper` is the whole cycle starting from it.
    """
    pts = as_points(points)
    if len(pts) < 2:
        raise InvalidInputError(f"need at least 2 vertices to split a boundary, got {len(pts)}")
    _check_finite(pts)

    lo, hi = extreme_indices(pts)
    if lo == hi:
        log.debug("degenerate boundary: vertex %d is both extremes", lo)
        return [pts[lo]], pts[lo:] + pts[:lo]

    if hi > lo:
        lower = pts[lo:hi]
        upper = pts[hi:] + pts[:lo]
    else:
        lower = pts[lo:] + pts[:hi]
        upper = pts[hi:lo]

    log.debug("split at lowest-left=%d highest-right=%d: |lower|=%d |upper|=%d",
              lo, hi, len(lower), len(upper))
    return lower, upper


# ── chain sweep primitives ─────────────────────────────────────────


def turns_left(chain: Sequence[Point], p: Point) -> bool:
    """True if chain[-2] -> chain[-1] -> p is a strict counter-clockwise turn."""
    first = chain[-2]
    middle = chain[-1]
    ax = middle.x - first.x
    ay = middle.y - first.y
    bx = p.x - first.x
    by = p.y - first.y
    return ax * by - ay * bx > 0


def next_edge_crossing(points: Sequence[Point], start: int, x: float) -> Optional[int]:
    """Index j >= start of the first edge (points[j], points[j+1]) with points[j].x <= x < points[j+1].x."""
    for j in range(start, len(points) - 1):
        if points[j].x <= x < points[j + 1].x:
            return j
    return None


def edge_point_at_x(first: Point, second: Point, x: float) -> Point:
    """
    Point on the line through first and second at abscissa x.

    A vertical edge has no single crossing, so its start point is returned
    instead. This is an approximation: the true crossing is the whole edge.
    """
    vx = second.x - first.x
    if vx == 0.0:
        log.debug("vertical edge %s -> %s: using its start for x=%r", first, second, x)
        return first
    vy = second.y - first.y
    t = (x - first.x) / vx
    return Point(first.x + vx * t, first.y + vy * t)


def _push(chain: List[Point], p: Point) -> None:
    # zero-length edges are dropped
    if p != chain[-1]:
        chain.append(p)


def _pop_edges_right_of(chain: List[Point], x: float) -> Point:
    """
    Pop the chain until its top edge straddles x (or one point is left).

    Returns the popped far end of that edge; its near end stays on top.
    """
    second = chain.pop()
    while len(chain) > 1:
        first = chain[-1]
        if first.x <= x < second.x:
            break
        second = chain.pop()
    return second


def _skip_points_to_the_left(points: Sequence[Point], i: int, closing_point: Point,
                             chain: List[Point]) -> int:
    """Case 1: jump to the edge that re-crosses x = top.x; return the index to resume after."""
    x = chain[-1].x
    j = next_edge_crossing(points, i, x)
    if j is None:
        # excursion only comes back on the closing edge
        _push(chain, edge_point_at_x(points[-1], closing_point, x))
        log.debug("left excursion from %d closes on the final edge at x=%r", i, x)
        return len(points)
    _push(chain, edge_point_at_x(points[j], points[j + 1], x))
    log.debug("left excursion %d..%d clipped at x=%r", i, j, x)
    return j


def _clip_points_to_the_right(chain: List[Point], p: Point) -> None:
    """Case 2: cut the chain back to x = p.x, then continue with p."""
    second = _pop_edges_right_of(chain, p.x)
    if p != chain[-1]:
        _push(chain, edge_point_at_x(chain[-1], second, p.x))
    _push(chain, p)


# ── chain monotonizer ──────────────────────────────────────────────


def make_x_monotone(points: Iterable[PointLike], closing_point: PointLike) -> List[Point]:
    """
    Return an x-monotone (non-decreasing x) version of a directed chain.

    `closing_point` is the vertex that follows the chain's last point on
    the polygon boundary; it is only used when an excursion comes back
    across the frontier on that closing edge. The first chain point must
    be the leftmost one.

    Runs in linear time: the scan index only moves forward and every
    popped point was pushed once.
    """
    pts = as_points(points)
    closing = as_point(closing_point)
    if not pts:
        raise InvalidInputError("cannot make an empty chain x-monotone")
    _check_finite(pts)
    _check_finite([closing])

    chain = [pts[0]]
    n = len(pts)
    i = 1
    while i < n:
        p = pts[i]
        if p.x >= chain[-1].x:
            _push(chain, p)
        elif len(chain) < 2:
            raise InvalidInputError(f"vertex {i} {p} lies left of the chain start {chain[0]}")
        elif turns_left(chain, p):
            i = _skip_points_to_the_left(pts, i, closing, chain)
        else:
            _clip_points_to_the_right(chain, p)
        i += 1
    return chain


# ── reflection and assembly ────────────────────────────────────────


def reflect(points: Iterable[Point]) -> List[Point]:
    """Rotate points by 180 degrees about the origin, (x, y) -> (-x, -y)."""
    return [-p for p in points]


def combine(lower: Sequence[Point], upper: Sequence[Point]) -> List[Point]:
    """Close the boundary: lower chain followed by upper chain, seam left as is."""
    return list(lower) + list(upper)


def monotone_chains(points: Iterable[PointLike]) -> Tuple[List[Point], List[Point]]:
    """
    Return the x-monotone (lower, upper) chains of a polygon boundary.

    The lower chain has non-decreasing x, the upper chain non-increasing x.
    """
    lower, upper = split_boundary(points)
    lower_mono = make_x_monotone(lower, upper[0])
    upper_mono = reflect(make_x_monotone(reflect(upper), -lower[0]))
    log.debug("monotone chains: %d -> %d lower, %d -> %d upper",
              len(lower), len(lower_mono), len(upper), len(upper_mono))
    return lower_mono, upper_mono


def x_monotone_from_polygon(points: Sequence[PointLike]) -> List[PointLike]:
    """
    Convert a polygon boundary into a closed x-monotone boundary.

    Fewer than 2 vertices cannot be monotonized and are returned as given.
    Otherwise the result is the lower chain followed by the upper chain;
    it may drop redundant vertices and add interpolated ones lying on the
    original edges. Non-finite coordinates raise InvalidInputError.
    """
    if len(points) < 2:
        _check_finite(as_points(points))
        return list(points)
    return combine(*monotone_chains(points))
