#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional

import calconv

# mean tropical year (days), J2000
TROPICAL_YEAR = 365.24219


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "calconv[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "calconv[diagnostics]"') from e


def year_range(calendar: str, start_year: int, end_year: int) -> List[int]:
    years = list(range(start_year, end_year + 1))
    if calconv.calendar_info(calendar).get("year_zero") is False:
        years = [y for y in years if y != 0]
    return years


def build_lengths(np, calendar: str, years: List[int]):
    """(years, lengths) arrays; lengths[i] is the day count of years[i]."""
    starts = np.array([calconv.new_year(calendar, y) for y in years], dtype=float)
    last = years[-1] + 1
    if last == 0 and calconv.calendar_info(calendar).get("year_zero") is False:
        last = 1
    ends = np.append(starts[1:], calconv.new_year(calendar, last))
    return np.array(years, dtype=int), (ends - starts).astype(int)


def summarize(np, calendar: str, years, lengths) -> dict:
    values, counts = np.unique(lengths, return_counts=True)
    mean = float(lengths.mean())
    return {
        "calendar": calendar,
        "years": int(len(years)),
        "histogram": {int(v): int(c) for v, c in zip(values, counts)},
        "mean_length": mean,
        "total_days": int(lengths.sum()),
    }


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Year-length statistics per calendar (numpy), optional drift plot.")
    p.add_argument("--calendars", default="gregorian,julian,hebrew,islamic,persian,indian_civil")
    p.add_argument("--start-year", type=int, default=1)
    p.add_argument("--end-year", type=int, default=2820)
    p.add_argument("--out", default="", help="If given, save a drift plot (needs matplotlib) to this file.")
    args = p.parse_args(argv)

    np = _need_numpy()

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    names = [x.strip() for x in args.calendars.split(",") if x.strip()]
    series = []
    for cal in names:
        if not calconv.calendar_info(cal).get("leap_rule"):
            raise SystemExit(f"Calendar '{cal}' has no years to measure")
        years, lengths = build_lengths(np, cal, year_range(cal, args.start_year, args.end_year))
        s = summarize(np, cal, years, lengths)
        series.append((cal, years, lengths))

        hist = "  ".join(f"{v}:{c}" for v, c in s["histogram"].items())
        print(f"{cal:<13} years={s['years']:<6} mean={s['mean_length']:.6f}  [{hist}]")

    if args.out:
        plt = _need_matplotlib()
        fig, ax = plt.subplots(figsize=(12, 4.5))
        for cal, years, lengths in series:
            # solar years drift against the tropical year, lunar ones against their own mean
            per_year = lengths.mean()
            ref = TROPICAL_YEAR if per_year > 360 else per_year
            drift = np.cumsum(lengths - ref)
            ax.plot(years, drift, label=cal, lw=1.2)
        ax.set_xlabel("Calendar year")
        ax.set_ylabel("Accumulated drift (days)")
        ax.set_title("Year-length drift")
        ax.legend(loc="center left", bbox_to_anchor=(1.01, 0.5), frameon=False)
        fig.tight_layout()
        fig.savefig(args.out, dpi=200)
        print(f"Saved: {args.out}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
