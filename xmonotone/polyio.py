"""
Reader/writer for the `.poly` text format:

    N
    x0 y0
    x1 y1
    ...

Blank lines and lines starting with '#' are ignored on input.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Union

from xmonotone.errors import PolyFormatError
from xmonotone.point import Point, PointLike, as_points

PathLike = Union[str, Path]


def format_poly(points: Iterable[PointLike]) -> str:
    pts = as_points(points)
    lines = [f"{len(pts)}"]
    for p in pts:
        # %.17g round-trips float64 exactly
        lines.append(f"{p.x:.17g} {p.y:.17g}")
    return "\n".join(lines) + "\n"


def parse_poly(text: str) -> List[Point]:
    rows = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        rows.append((lineno, line))

    if not rows:
        raise PolyFormatError("empty polygon file")

    lineno, header = rows[0]
    try:
        n = int(header)
    except ValueError:
        raise PolyFormatError(f"expected vertex count, got {header!r}", lineno) from None
    if n < 0:
        raise PolyFormatError(f"negative vertex count {n}", lineno)

    body = rows[1:]
    if len(body) != n:
        raise PolyFormatError(f"header says {n} vertices but {len(body)} coordinate lines follow", lineno)

    points = []
    for lineno, line in body:
        parts = line.split()
        if len(parts) != 2:
            raise PolyFormatError(f"expected 'x y', got {line!r}", lineno)
        try:
            x, y = map(float, parts)
        except ValueError:
            raise PolyFormatError(f"non-numeric coordinate in {line!r}", lineno) from None
        points.append(Point(x, y))
    return points


def read_poly(path: PathLike) -> List[Point]:
    with open(path, "r", encoding="utf-8") as f:
        return parse_poly(f.read())


def write_poly(points: Iterable[PointLike], path: PathLike) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(format_poly(points))
