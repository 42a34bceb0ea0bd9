#!/usr/bin/env python3
"""
Visualization for x-monotone decomposition.

  visualize.py polygon --input P.poly --output fig.png
      input polygon next to its x-monotone boundary, interpolated points marked

  visualize.py benchmark --csv results/benchmark.csv --output-dir figures/
      time vs n per family (log-log) with fitted T = a * n^b
"""

import argparse
import sys
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from matplotlib.patches import Polygon as MplPolygon

from xmonotone import MonotoneError, read_poly
from xmonotone.monotone import monotone_chains
from xmonotone.validation import interpolated_points

plt.rcParams['font.size'] = 10
plt.rcParams['axes.labelsize'] = 12
plt.rcParams['axes.titlesize'] = 14
plt.rcParams['legend.fontsize'] = 10
plt.rcParams['figure.figsize'] = (10, 6)

COLORS = {
    'convex': '#4daf4a',
    'random': '#e41a1c',
    'star': '#377eb8',
    'spiral': '#984ea3',
    'dent': '#ff7f00',
}

LOWER_COLOR = '#377eb8'
UPPER_COLOR = '#e41a1c'


def to_array(points):
    return np.array([(p.x, p.y) for p in points], dtype=float)


def plot_polygon(vertices, ax, title, color='#cccccc'):
    """Plot the input polygon boundary"""
    ax.add_patch(MplPolygon(vertices, closed=True, facecolor=color, alpha=0.4, edgecolor='#333333'))
    closed = np.vstack([vertices, vertices[0]])
    ax.plot(closed[:, 0], closed[:, 1], 'k-', linewidth=1.2)
    ax.scatter(vertices[:, 0], vertices[:, 1], c='black', s=15, zorder=5)
    ax.set_aspect('equal')
    ax.set_title(title)


def plot_monotone(original, lower, upper, ax, title):
    """Plot lower/upper monotone chains; interpolated points drawn as red crosses"""
    lo = to_array(lower)
    up = to_array(upper)
    boundary = np.vstack([lo, up, lo[:1]])
    ax.fill(boundary[:, 0], boundary[:, 1], color='#dddddd', alpha=0.5)
    ax.plot(np.vstack([lo, up[:1]])[:, 0], np.vstack([lo, up[:1]])[:, 1], '-', color=LOWER_COLOR,
            linewidth=1.5, label=f'lower ({len(lower)})')
    ax.plot(np.vstack([up, lo[:1]])[:, 0], np.vstack([up, lo[:1]])[:, 1], '-', color=UPPER_COLOR,
            linewidth=1.5, label=f'upper ({len(upper)})')

    added = interpolated_points(original, lower + upper)
    if added:
        pts = to_array(added)
        ax.scatter(pts[:, 0], pts[:, 1], marker='x', c='red', s=40, zorder=6, label=f'interpolated ({len(added)})')

    ax.set_aspect('equal')
    ax.set_title(title)
    ax.legend(loc='best', fontsize=8)


def plot_polygon_figure(input_path, output_path):
    pts = read_poly(input_path)
    lower, upper = monotone_chains(pts)

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))
    plot_polygon(to_array(pts), axes[0], f'Input (n={len(pts)})')
    plot_monotone(pts, lower, upper, axes[1], f'x-monotone (m={len(lower) + len(upper)})')
    plt.suptitle(Path(input_path).stem, fontsize=14)
    plt.tight_layout()
    plt.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close()
    print(f"Figure saved to {output_path}")


def fit_scaling_law(n_values, time_values):
    """
    Fit scaling law T = a * n^b using log-log linear regression.
    Returns (a, b, r_squared).
    """
    log_n = np.log(n_values)
    log_t = np.log(time_values)

    coeffs = np.polyfit(log_n, log_t, 1)
    b = coeffs[0]
    a = np.exp(coeffs[1])

    log_t_pred = coeffs[0] * log_n + coeffs[1]
    ss_res = np.sum((log_t - log_t_pred) ** 2)
    ss_tot = np.sum((log_t - np.mean(log_t)) ** 2)
    r_squared = 1 - ss_res / ss_tot if ss_tot > 0 else 0

    return a, b, r_squared


def plot_benchmark(df, output_dir):
    """Time vs n per polygon family with fitted power laws"""
    fig, ax = plt.subplots(figsize=(10, 6))
    scaling = {}

    for family in sorted(df['family'].unique()):
        data = df[df['family'] == family].groupby('n')['time_ms'].mean().reset_index()
        data = data.sort_values('n')
        n_vals = data['n'].values
        t_vals = data['time_ms'].values

        mask = (n_vals > 0) & (t_vals > 0)
        n_vals = n_vals[mask]
        t_vals = t_vals[mask]

        color = COLORS.get(family, 'gray')
        ax.plot(n_vals, t_vals, 'o', color=color, markersize=6)

        if len(n_vals) < 3:
            ax.plot([], [], 'o-', color=color, label=family)
            continue

        a, b, r2 = fit_scaling_law(n_vals, t_vals)
        scaling[family] = (a, b, r2)
        n_fit = np.logspace(np.log10(n_vals.min()), np.log10(n_vals.max()), 100)
        ax.plot(n_fit, a * n_fit ** b, '-', color=color, linewidth=2,
                label=f'{family}: T ~ n^{b:.2f} (R²={r2:.3f})')

    ax.set_xlabel('Number of Vertices (N)')
    ax.set_ylabel('Time (ms)')
    ax.set_title('x-monotone decomposition time')
    ax.set_xscale('log')
    ax.set_yscale('log')
    ax.grid(True, alpha=0.3)
    ax.legend(loc='upper left')

    plt.tight_layout()
    plt.savefig(Path(output_dir) / 'benchmark_times.png', dpi=150, bbox_inches='tight')
    plt.close()

    print("\nScaling exponents (linear time expects b ~ 1):")
    for family, (a, b, r2) in scaling.items():
        print(f"  {family:>8}: b = {b:.3f}, a = {a:.3g}, R² = {r2:.4f}")
    return scaling


def main():
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    sub = parser.add_subparsers(dest='command', required=True)

    p_poly = sub.add_parser('polygon', help='plot a polygon and its x-monotone boundary')
    p_poly.add_argument('--input', required=True, type=Path)
    p_poly.add_argument('--output', type=Path, default=None)

    p_bench = sub.add_parser('benchmark', help='plot benchmark CSV')
    p_bench.add_argument('--csv', required=True, type=Path)
    p_bench.add_argument('--output-dir', type=Path, default=Path('figures'))

    args = parser.parse_args()

    if args.command == 'polygon':
        output = args.output or args.input.with_suffix('.png')
        try:
            plot_polygon_figure(args.input, output)
        except (MonotoneError, OSError) as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
    else:
        if not args.csv.exists():
            print(f"Results file not found: {args.csv}", file=sys.stderr)
            return 1
        args.output_dir.mkdir(parents=True, exist_ok=True)
        df = pd.read_csv(args.csv)
        plot_benchmark(df, args.output_dir)
    return 0


if __name__ == '__main__':
    sys.exit(main())
