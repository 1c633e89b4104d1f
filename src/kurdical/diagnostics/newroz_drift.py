#!/usr/bin/env python3
"""
Drift of Newroz (1st of month 1) against the mean March equinox.

The four-year leap rule gives a mean year of 365.25 days, about 0.0078 day
longer than the tropical year, so Newroz slides later by roughly one day every
128 years. This tool quantifies that slide and can plot it.
"""
from __future__ import annotations

from typing import List, Optional, Tuple

import argparse

import kurdical
from kurdical.core.time import to_jdn


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "kurdical[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "kurdical[diagnostics]"') from e


def mean_march_equinox_jde(gyear: int) -> float:
    """Meeus (Astronomical Algorithms, ch. 27) mean March equinox, valid for years 1000..3000."""
    Y = (gyear - 2000) / 1000.0
    return 2451623.80984 + 365242.37404 * Y + 0.05169 * Y**2 - 0.00411 * Y**3 - 0.00057 * Y**4


def build_series(np, start_year: int, end_year: int, epoch: kurdical.Epoch) -> Tuple["np.ndarray", "np.ndarray"]:
    """Return (gregorian_years, newroz_minus_equinox_days) for Kurdish years start..end."""
    years = np.arange(start_year, end_year + 1, dtype=int)
    gyears = np.empty_like(years)
    offset = np.empty_like(years, dtype=float)

    for i, Y in enumerate(years):
        d = kurdical.new_year_day(int(Y), epoch=epoch)
        gyears[i] = d.year
        # JDN counts from noon; midnight starting the civil day is JDN - 0.5
        offset[i] = (to_jdn(d) - 0.5) - mean_march_equinox_jde(d.year)

    return gyears, offset


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Newroz drift against the mean March equinox.")
    p.add_argument("--start-year", type=int, default=2400, help="First Kurdish year.")
    p.add_argument("--end-year", type=int, default=3600, help="Last Kurdish year.")
    p.add_argument("--epoch", default="median", help="median|nineveh (default: median)")
    p.add_argument("--plot", action="store_true", help="Also write a PNG scatter plot.")
    p.add_argument("--outbase", default="newroz_drift", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    epoch = kurdical.parse_epoch(args.epoch)
    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np = _need_numpy()
    x, y = build_series(np, args.start_year, args.end_year, epoch)

    slope, intercept = np.polyfit(x.astype(float), y, 1)
    print(f"Kurdish years {args.start_year}..{args.end_year} ({epoch.name}), Gregorian {x[0]}..{x[-1]}")
    print(f"  Newroz - equinox (days): min={y.min():+.3f}  max={y.max():+.3f}  mean={y.mean():+.3f}")
    print(f"  Linear drift: {100.0 * slope:+.4f} days/century")
    if slope > 0:
        print(f"  One day of drift every {1.0 / slope:.1f} years")

    if not args.plot:
        return 0

    plt = _need_matplotlib()
    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.scatter(x, y, s=10, c="tab:green", alpha=0.5, linewidths=0.0, label="Newroz")
    ax.plot(x, slope * x + intercept, color="0.30", linewidth=1.5, label="linear fit")
    ax.set_xlabel("Gregorian year")
    ax.set_ylabel("Newroz midnight - mean equinox (days)")
    ax.set_title("Newroz drift under the four-year leap rule")
    ax.legend(frameon=False)

    fig.savefig(args.outbase + ".png", dpi=200)
    print(f"Saved: {args.outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
