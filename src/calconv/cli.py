from __future__ import annotations

import argparse
from datetime import date
import sys
import re
import importlib
import inspect

from .core.errors import CalconvError


_DATE_RE = re.compile(r"^-?\d{1,4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> tuple[int, int, int]:
    sign = -1 if s.startswith("-") else 1
    y, m, d = map(int, s.lstrip("-").split("-"))
    return sign * y, m, d


def _parse_num(s: str):
    """Integer if the text is one, else float (JDNs like 2451544.5)."""
    try:
        return int(s)
    except ValueError:
        pass
    try:
        return float(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {s!r}") from None


def _fmt(values) -> str:
    return " ".join(str(v) for v in values)


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _targets(spec: str) -> list[str]:
    import calconv

    if spec == "all":
        return calconv.list_calendars()
    return [x.strip() for x in spec.split(",") if x.strip()]


def cmd_list(argv: list[str]) -> int:
    import calconv

    p = argparse.ArgumentParser(prog="calconv list", description="List registered calendars")
    p.parse_args(argv)

    for name in calconv.list_calendars():
        info = calconv.calendar_info(name)
        direction = "<->" if info["forward"] else " ->"
        print(f"{name:<13} JDN {direction}  ({', '.join(info['fields'])})  epoch={info['epoch']}")
    return 0


def cmd_to_jdn(argv: list[str]) -> int:
    import calconv

    p = argparse.ArgumentParser(prog="calconv to-jdn", description="Calendar date -> Julian Day Number")
    p.add_argument("calendar")
    p.add_argument("fields", nargs="+", type=_parse_num, help="date fields, e.g. YEAR MONTH DAY")
    p.add_argument("--strict", action="store_true", help="reject out-of-range fields")
    args = p.parse_args(argv)

    print(calconv.to_jdn(args.calendar, *args.fields, strict=args.strict))
    return 0


def cmd_from_jdn(argv: list[str]) -> int:
    import calconv

    p = argparse.ArgumentParser(prog="calconv from-jdn", description="Julian Day Number -> calendar date")
    p.add_argument("calendar", help="calendar name, a comma list, or 'all'")
    p.add_argument("jd", type=_parse_num)
    args = p.parse_args(argv)

    names = _targets(args.calendar)
    if len(names) == 1:
        print(_fmt(calconv.from_jdn(names[0], args.jd)))
        return 0
    for name in names:
        print(f"{name:<13} {_fmt(calconv.from_jdn(name, args.jd))}")
    return 0


def cmd_convert(argv: list[str]) -> int:
    import calconv

    p = argparse.ArgumentParser(prog="calconv convert", description="Convert a date between calendars")
    p.add_argument("calendar", help="source calendar")
    p.add_argument("fields", nargs="+", type=_parse_num, help="date fields of the source calendar")
    p.add_argument("--to", default="all", help="target calendar, comma list or 'all' (default: all)")
    p.add_argument("--strict", action="store_true", help="reject out-of-range fields")
    args = p.parse_args(argv)

    jd = calconv.to_jdn(args.calendar, *args.fields, strict=args.strict)
    print(f"{'jdn':<13} {jd}")
    for name in _targets(args.to):
        print(f"{name:<13} {_fmt(calconv.from_jdn(name, jd))}")
    return 0


def cmd_date(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="calconv date", description="Gregorian date -> all calendars")
    p.add_argument("date", help="YYYY-MM-DD (proleptic Gregorian, astronomical years)")
    if argv and argv[0].startswith("-") and _DATE_RE.match(argv[0]):
        argv = ["--", *argv]  # negative year, not an option
    args = p.parse_args(argv)

    if not _DATE_RE.match(args.date):
        raise SystemExit(f"Bad date '{args.date}', expected YYYY-MM-DD")
    return cmd_convert(["gregorian", *map(str, _parse_ymd(args.date))])


def cmd_today(argv: list[str]) -> int:
    argparse.ArgumentParser(prog="calconv today", description="Today in all calendars").parse_args(argv)
    return cmd_date([date.today().isoformat()])


def _dispatch(argv: list[str]) -> int:
    # Backward compatibility: `calconv YYYY-MM-DD`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_date(argv)

    p = argparse.ArgumentParser(prog="calconv", description="Calendar conversion toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("list", help="List registered calendars")
    sub.add_parser("to-jdn", help="Calendar date -> Julian Day Number")
    sub.add_parser("from-jdn", help="Julian Day Number -> calendar date")
    sub.add_parser("convert", help="Convert a date between calendars")
    sub.add_parser("date", help="Gregorian YYYY-MM-DD -> all calendars")
    sub.add_parser("today", help="Today's date in all calendars")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "new-years", "year-lengths"],
        help="Which diagnostic to run",
    )

    # only the first token is ours; the rest belongs to the subcommand
    args = p.parse_args(argv[:1] if argv and argv[0] != "diag" else argv[:2])
    rest = argv[1:] if args.cmd != "diag" else argv[2:]

    if args.cmd == "list":
        return cmd_list(rest)

    if args.cmd == "to-jdn":
        return cmd_to_jdn(rest)

    if args.cmd == "from-jdn":
        return cmd_from_jdn(rest)

    if args.cmd == "convert":
        return cmd_convert(rest)

    if args.cmd == "date":
        return cmd_date(rest)

    if args.cmd == "today":
        return cmd_today(rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "calconv.diagnostics.round_trip",
            "new-years": "calconv.diagnostics.new_years_table",
            "year-lengths": "calconv.diagnostics.year_lengths",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    try:
        return _dispatch(argv)
    except CalconvError as e:
        raise SystemExit(f"calconv: {e}") from e


if __name__ == "__main__":
    raise SystemExit(main())
