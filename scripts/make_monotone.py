#!/usr/bin/env python3
"""
Convert a .poly polygon into its closed x-monotone boundary.

Prints one summary line:
  x_monotone,n=<input vertices>,m=<output vertices>,interpolated=<k>,time_ms=<t>
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from xmonotone import MonotoneError, read_poly, write_poly, x_monotone_from_polygon
from xmonotone.validation import interpolated_points

log = logging.getLogger("xmonotone.cli")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--input", required=True, type=Path)
    parser.add_argument("--output", type=Path, default=None, help="write the monotone boundary here")
    parser.add_argument("--verbose", action="store_true", help="log sweep events")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        pts = read_poly(args.input)
        t0 = time.perf_counter()
        out = x_monotone_from_polygon(pts)
        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        if args.output is not None:
            write_poly(out, args.output)
            log.info("wrote %d vertices to %s", len(out), args.output)
    except (MonotoneError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    added = len(interpolated_points(pts, out))
    print(f"x_monotone,n={len(pts)},m={len(out)},interpolated={added},time_ms={elapsed_ms:.4f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
