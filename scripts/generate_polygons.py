#!/usr/bin/env python3
"""
Generate deterministic polygon datasets for x-monotone decomposition.
The format is:
N
x0 y0
x1 y1
...
"""

import argparse
from pathlib import Path

from xmonotone.polygons import FAMILIES, make_family
from xmonotone.polyio import write_poly


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--output", default="polygons/generated", type=Path)
    parser.add_argument(
        "--sizes",
        nargs="+",
        type=int,
        default=[10, 50, 100, 500, 1000, 5000, 10000, 50000, 100000],
    )
    parser.add_argument("--families", nargs="+", default=sorted(FAMILIES), choices=sorted(FAMILIES))
    args = parser.parse_args()

    count = 0
    for n in args.sizes:
        for family in args.families:
            write_poly(make_family(family, n), args.output / f"{family}_{n}.poly")
            count += 1

    print(f"Generated {count} polygons in {args.output}")


if __name__ == "__main__":
    main()
