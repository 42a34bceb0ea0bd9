#!/usr/bin/env python3
"""
Report self-intersections of a .poly file and, with --monotone, whether it
is a closed x-monotone boundary.
"""

import argparse
import sys
from pathlib import Path

from xmonotone import MonotoneError, read_poly
from xmonotone.validation import (
    consecutive_duplicates,
    is_closed_x_monotone,
    self_intersections,
    signed_area,
)


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("path", type=Path)
    parser.add_argument("--monotone", action="store_true", help="also check x-monotonicity")
    parser.add_argument("--tol", type=float, default=1e-9)
    args = parser.parse_args()

    try:
        pts = read_poly(args.path)
    except (MonotoneError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    ok = True
    hits = self_intersections(pts)
    for i, j in hits[:5]:
        print(f'Intersection: edge {i}-{(i + 1) % len(pts)} with {j}-{(j + 1) % len(pts)}')
    print(f'Total intersections: {len(hits)}')
    print(f'Polygon vertices: {len(pts)}')
    print(f'Signed area: {signed_area(pts):.6g}')

    dups = consecutive_duplicates(pts)
    if dups:
        print(f'Duplicate consecutive vertices at: {dups[:10]}')

    if args.monotone:
        mono = is_closed_x_monotone(pts, tol=args.tol)
        print(f'x-monotone: {"yes" if mono else "no"}')
        ok = ok and mono

    return 0 if ok and not hits else 1


if __name__ == "__main__":
    sys.exit(main())
