from __future__ import annotations

import argparse
import random
from typing import List

import calconv


def parse_calendars(s: str) -> List[str]:
    # "hebrew,persian" -> ["hebrew", "persian"]; "all" -> every calendar with a forward conversion
    if s == "all":
        return [c for c in calconv.list_calendars() if calconv.calendar_info(c)["forward"]]
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(
    calendar: str,
    N: int,
    start_jd: int,
    end_jd: int,
    seed: int,
    *,
    max_failures: int,
) -> int:
    """JDN -> calendar -> JDN for N random days in [start_jd, end_jd]."""
    random.seed(seed)
    failures = 0

    for _ in range(N):
        jd0 = random.randint(start_jd, end_jd) + 0.5

        fields = calconv.from_jdn(calendar, jd0)
        back = calconv.to_jdn(calendar, *fields)
        if back != jd0:
            failures += 1
            print("\nFAIL")
            print("calendar:", calendar)
            print("jd0:", jd0)
            print("fields:", fields)
            print("back:", back)
            print("gregorian:", calconv.jdn_to_gregorian(jd0))
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: JDN -> calendar date -> JDN.")
    p.add_argument("--calendars", type=str, default="all",
                   help="Comma-separated calendar list, or 'all'.")
    p.add_argument("--N", type=int, default=2000, help="Trials per calendar.")
    p.add_argument("--start-year", type=int, default=-1000, help="First Gregorian year of the range.")
    p.add_argument("--end-year", type=int, default=3000, help="Last Gregorian year of the range.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    calendars = parse_calendars(args.calendars)
    start_jd = int(calconv.gregorian_to_jdn(args.start_year, 1, 1))
    end_jd = int(calconv.gregorian_to_jdn(args.end_year, 12, 31))

    total_fail = 0
    for cal in calendars:
        print(f"Testing {cal} ...")
        f = roundtrip_test(cal, N=args.N, start_jd=start_jd, end_jd=end_jd, seed=args.seed,
                           max_failures=args.max_failures)
        total_fail += f

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
