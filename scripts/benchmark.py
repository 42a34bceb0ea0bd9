#!/usr/bin/env python3
"""
Benchmark x_monotone_from_polygon over the generated polygon families.

Writes a CSV with one row per (family, n):
  family,n,m,interpolated,time_ms,std_ms,runs

time_ms is the median over --runs repetitions.
"""

from __future__ import annotations

import argparse
import csv
import statistics
import sys
import time
from pathlib import Path
from typing import List

from xmonotone import x_monotone_from_polygon
from xmonotone.polygons import FAMILIES, make_family
from xmonotone.validation import interpolated_points, is_closed_x_monotone

ROOT = Path(__file__).resolve().parent.parent
OUT_CSV = ROOT / "results" / "benchmark.csv"


def time_once(pts) -> float:
    t0 = time.perf_counter()
    x_monotone_from_polygon(pts)
    return (time.perf_counter() - t0) * 1000.0


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--sizes", nargs="+", type=int, default=[100, 500, 1000, 5000, 10000, 50000, 100000])
    parser.add_argument("--families", nargs="+", default=sorted(FAMILIES), choices=sorted(FAMILIES))
    parser.add_argument("--runs", type=int, default=5)
    parser.add_argument("--out-csv", type=Path, default=OUT_CSV)
    args = parser.parse_args()

    rows: List[dict] = []
    failures = 0
    for family in args.families:
        for n in args.sizes:
            pts = make_family(family, n)
            out = x_monotone_from_polygon(pts)
            if not is_closed_x_monotone(out, tol=1e-9):
                print(f"FAIL: {family}_{n} output is not x-monotone")
                failures += 1

            times = [time_once(pts) for _ in range(args.runs)]
            row = {
                "family": family,
                "n": len(pts),
                "m": len(out),
                "interpolated": len(interpolated_points(pts, out)),
                "time_ms": statistics.median(times),
                "std_ms": statistics.stdev(times) if len(times) > 1 else 0.0,
                "runs": args.runs,
            }
            rows.append(row)
            print(f"{family:>8} n={row['n']:>7} m={row['m']:>7} "
                  f"interp={row['interpolated']:>5} time={row['time_ms']:.3f} ms")

    args.out_csv.parent.mkdir(parents=True, exist_ok=True)
    with open(args.out_csv, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=["family", "n", "m", "interpolated", "time_ms", "std_ms", "runs"])
        writer.writeheader()
        writer.writerows(rows)

    print(f"Results saved to {args.out_csv}")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
