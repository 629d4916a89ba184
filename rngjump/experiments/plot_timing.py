# rngjump/experiments/plot_timing.py
"""
Plot jump-ahead and stepping times against distance, one line per
(generator, method), log-log.

CSV expected columns: generator, distance, trial, method, time_s
 - generator: key of rngjump.GENERATORS
 - distance: int, steps advanced
 - trial: int (trial id)
 - method: 'jump' or 'step'
 - time_s: float seconds

Usage:
    python -m rngjump.experiments.plot_timing --csv results/timing_XXXX.csv --out timing.png
"""

import argparse
import os

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

REQUIRED = {'generator', 'distance', 'trial', 'method', 'time_s'}


def prepare_pivot(df):
    # mean time for each (generator, method, distance)
    agg = df.groupby(['generator', 'method', 'distance'], as_index=False)['time_s'].mean()
    # rows = (generator, method), cols = distance ascending
    pivot = agg.pivot_table(index=['generator', 'method'], columns='distance', values='time_s')
    pivot = pivot.sort_index(axis=1)
    return pivot


def plot_timing(pivot, title='Jump-ahead vs stepping', out_file=None, show=True):
    distances = np.array(pivot.columns.tolist(), dtype=float)

    fig, ax = plt.subplots(figsize=(8, 5))
    for (generator, method), row in pivot.iterrows():
        times = row.to_numpy(dtype=float)
        keep = ~np.isnan(times)
        if not keep.any():
            continue
        style = '-o' if method == 'jump' else '--x'
        ax.plot(distances[keep], times[keep], style, label=f"{generator} ({method})")

    ax.set_xscale('log')
    ax.set_yscale('log')
    ax.set_xlabel('Distance (steps)')
    ax.set_ylabel('Mean time (s)')
    ax.set_title(title)
    ax.legend(fontsize=7, ncol=2)

    plt.tight_layout()
    if out_file:
        os.makedirs(os.path.dirname(out_file) or '.', exist_ok=True)
        plt.savefig(out_file, dpi=150)
        print(f"Plot saved to {out_file}")
    if show:
        plt.show()
    return fig


def load_csv(path):
    df = pd.read_csv(path)
    # basic validation
    if not REQUIRED.issubset(set(df.columns)):
        raise SystemExit(f"CSV must contain columns: {REQUIRED}. Found: {df.columns.tolist()}")
    df['distance'] = df['distance'].astype('int64')
    df['time_s'] = df['time_s'].astype(float)
    return df


def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument('--csv', required=True, help='Path to timing CSV')
    parser.add_argument('--out', default='results/timing.png', help='Output PNG path')
    parser.add_argument('--title', default='Jump-ahead vs stepping', help='Plot title')
    parser.add_argument('--no-show', action='store_true', help='do not open a window')
    args = parser.parse_args(argv)

    pivot = prepare_pivot(load_csv(args.csv))
    plot_timing(pivot, title=args.title, out_file=args.out, show=not args.no_show)


if __name__ == '__main__':
    main()
