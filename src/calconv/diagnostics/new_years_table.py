from __future__ import annotations

import argparse
from typing import List, Tuple

import calconv


DEFAULT_CALENDARS: List[Tuple[str, str]] = [
    ("Hebrew", "hebrew"),
    ("Islamic", "islamic"),
    ("Persian", "persian"),
    ("Saka", "indian_civil"),
]


def mmdd(jd: float) -> str:
    _, m, d = calconv.jdn_to_gregorian(jd)
    return f"{m:02d}-{d:02d}"


def parse_calendars(arg: str) -> List[Tuple[str, str]]:
    """
    Parse calendar list from CLI.
    Example:
      --calendars "Hebrew=hebrew,Saka=indian_civil"
    If you pass just registry names, labels will be capitalized names:
      --calendars "hebrew,persian"
    """
    items = [x.strip() for x in arg.split(",") if x.strip()]
    out: List[Tuple[str, str]] = []
    for it in items:
        if "=" in it:
            name, cal = it.split("=", 1)
            out.append((name.strip(), cal.strip()))
        else:
            out.append((it.capitalize(), it))
    return out


def new_years_in(calendar: str, gyear: int) -> List[Tuple[int, float]]:
    """(calendar year, JDN) of every new year falling in Gregorian year `gyear`."""
    lo = calconv.gregorian_to_jdn(gyear, 1, 1)
    hi = calconv.gregorian_to_jdn(gyear + 1, 1, 1)
    y = calconv.from_jdn(calendar, lo)[0]
    skip_zero = calconv.calendar_info(calendar).get("year_zero") is False

    # a lunar calendar can start two years within one Gregorian year
    candidates = [y]
    while len(candidates) < 3:
        nxt = candidates[-1] + 1
        if nxt == 0 and skip_zero:
            nxt = 1
        candidates.append(nxt)

    out = []
    for cy in candidates:
        jd = calconv.new_year(calendar, cy)
        if lo <= jd < hi:
            out.append((cy, jd))
    return out


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the Gregorian dates of each calendar's New Year."
    )
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--calendars",
        type=str,
        default="",
        help='Comma list like "Hebrew=hebrew,Saka=indian_civil" (default: hebrew, islamic, persian, indian_civil).',
    )
    p.add_argument(
        "--years",
        action="store_true",
        help="Show the calendar year next to each date.",
    )
    args = p.parse_args(argv)

    calendars = parse_calendars(args.calendars) if args.calendars else DEFAULT_CALENDARS

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    def fmt(cy: int, jd: float) -> str:
        return f"{mmdd(jd)} ({cy})" if args.years else mmdd(jd)

    # table header
    headers = ["Year"] + [name for name, _ in calendars]
    colw = [5] + [max(12 if args.years else 5, len(h)) * 2 + 1 for h in headers[1:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        row = [str(Y).ljust(colw[0])]
        for (_, cal), w in zip(calendars, colw[1:]):
            hits = new_years_in(cal, Y)
            row.append(" ".join(fmt(cy, jd) for cy, jd in hits).ljust(w))
        print("  ".join(row).rstrip())

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
