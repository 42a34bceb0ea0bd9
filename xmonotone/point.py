"""
2D point value type shared by the monotone decomposition and its tooling.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple, Union

from xmonotone.errors import InvalidInputError


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> "Point":
        return Point(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


PointLike = Union[Point, Sequence[float]]


def as_point(p: PointLike) -> Point:
    """Coerce a Point or an (x, y) pair into a Point."""
    if isinstance(p, Point):
        return p
    try:
        x, y = p
        return Point(float(x), float(y))
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"not a 2D point: {p!r}") from e


def as_points(points: Iterable[PointLike]) -> List[Point]:
    return [as_point(p) for p in points]
