#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import caljal
from caljal.engines.specs import BREAK_POINTS, HEGIRA_STARTING_YEAR


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "caljal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "caljal[diagnostics]"') from e


def nowruz_day_of_year(year: int) -> int:
    """Nowruz as a Gregorian day-of-year (Jan 1 = 1)."""
    jdn = caljal.jalali_to_julian_day(year, 1, 1)
    gy = caljal.julian_day_to_georgian(jdn)[0]
    return jdn - caljal.georgian_to_julian_day(gy, 1, 1) + 1


def build_series(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
    years = np.arange(start_year, end_year + 1, dtype=int)
    doy = np.empty_like(years, dtype=float)
    leap = np.zeros_like(years, dtype=bool)
    for i, Y in enumerate(years):
        doy[i] = float(nowruz_day_of_year(int(Y)))
        leap[i] = caljal.is_leap_year(int(Y))
    return years, doy, leap


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of Nowruz drift against the Gregorian calendar.")
    p.add_argument("--from-year", type=int, default=BREAK_POINTS[0] - 300)
    p.add_argument("--to-year", type=int, default=BREAK_POINTS[-1] + 300)
    p.add_argument("--outbase", default="nowruz_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    years, doy, leap = build_series(np, args.from_year, args.to_year)
    gyears = years + HEGIRA_STARTING_YEAR
    inside = (years >= BREAK_POINTS[0]) & (years < BREAK_POINTS[-1])

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    ax.scatter(gyears[inside], doy[inside], s=6, c="tab:blue", alpha=0.35, label="break-point table")
    ax.scatter(gyears[~inside], doy[~inside], s=6, c="tab:red", alpha=0.35, label="arithmetic rule")
    ax.scatter(gyears[leap], doy[leap], s=10, marker="|", c="0.30", alpha=0.5, label="leap year")

    ax.set_xlabel("Gregorian year")
    ax.set_ylabel("Nowruz day-of-year (Jan 1 = 1)")
    ax.set_title("Nowruz against the Gregorian calendar")
    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    fig.savefig(args.outbase + ".png", dpi=300)
    print(f"Saved: {args.outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
