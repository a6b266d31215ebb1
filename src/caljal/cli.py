from __future__ import annotations

import argparse
from datetime import date
import logging
import sys
import re
import importlib
import inspect

from caljal.core.types import format_ymd


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
# a negative Jalali year reads like an option to argparse
_NEG_DATE_RE = re.compile(r"^-\d{1,4}[-/]\d{1,2}[-/]\d{1,2}$")


def _parse_ymd(s: str) -> date:
    try:
        y, m, d = map(int, s.split("-"))
        return date(y, m, d)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid Gregorian date {s!r}: {e}") from e


def _jalali_date_argv(argv: list[str]) -> list[str]:
    """Move negative-year dates behind "--" so argparse takes them as positionals."""
    if "--" in argv:
        return argv
    dates = [a for a in argv if _NEG_DATE_RE.match(a)]
    if not dates:
        return argv
    return [a for a in argv if a not in dates] + ["--"] + dates


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


def _print_date_info(jd) -> None:
    import caljal

    jdn = caljal.jalali_to_julian_day(*jd)
    gy, gm, gd = caljal.julian_day_to_georgian(jdn)
    print(f"Jalali        : {jd.isoformat()}")
    print(f"Gregorian     : {format_ymd(gy, gm, gd)}")
    print(f"JDN           : {jdn}")
    print(f"Day of year   : {caljal.day_of_year(jd)}")
    print(f"Day of week   : {caljal.day_of_week(jd)}  (1=Saturday .. 7=Friday)")
    print(f"Week of month : {caljal.week_of_month(jd)}")
    print(f"Quarter       : {caljal.quarter(jd)}")
    print(f"Days in month : {caljal.days_in_month(jd)}")
    print(f"Leap year     : {caljal.is_leap_year(jd.year)}")


def cmd_to_jalali(argv: list[str]) -> int:
    import caljal

    p = argparse.ArgumentParser(prog="caljal to-jalali", description="Gregorian -> Jalali date")
    p.add_argument("date", type=_parse_ymd, help="Gregorian YYYY-MM-DD")
    p.add_argument("--info", action="store_true", help="print derived fields too")
    args = p.parse_args(argv)

    jd = caljal.from_gregorian(args.date)
    if args.info:
        _print_date_info(jd)
    else:
        print(jd.isoformat())
    return 0


def cmd_to_gregorian(argv: list[str]) -> int:
    import caljal

    p = argparse.ArgumentParser(prog="caljal to-gregorian", description="Jalali -> Gregorian date")
    p.add_argument("date", help="Jalali YYYY-MM-DD or YYYY/MM/DD (negative years allowed)")
    args = p.parse_args(_jalali_date_argv(argv))

    jd = caljal.parse_date(args.date)
    print(format_ymd(*caljal.jalali_to_gregorian(*jd)))
    return 0


def cmd_info(argv: list[str]) -> int:
    import caljal

    p = argparse.ArgumentParser(prog="caljal info", description="Derived fields of a Jalali date")
    p.add_argument("date", help="Jalali YYYY-MM-DD or YYYY/MM/DD (negative years allowed)")
    args = p.parse_args(_jalali_date_argv(argv))

    _print_date_info(caljal.parse_date(args.date))
    return 0


def cmd_leap(argv: list[str]) -> int:
    import caljal

    p = argparse.ArgumentParser(prog="caljal leap", description="Leap-year status of a year")
    p.add_argument("year", type=int)
    p.add_argument("--gregorian", action="store_true", help="year is given in the Gregorian calendar")
    p.add_argument("--debug", action="store_true", help="print the raw oracle result")
    args = p.parse_args(argv)

    r = caljal.leap_info(args.year, year_is_gregorian=args.gregorian)
    print("leap" if r.leap_offset == 0 else "common")
    if args.debug:
        print(r)
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `caljal YYYY-MM-DD ...` converts a Gregorian date
    if argv and _DATE_RE.match(argv[0]):
        return cmd_to_jalali(argv)

    p = argparse.ArgumentParser(prog="caljal", description="Jalali calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("to-jalali", help="Gregorian -> Jalali date")
    sub.add_parser("to-gregorian", help="Jalali -> Gregorian date")
    sub.add_parser("info", help="Derived fields of a Jalali date")
    sub.add_parser("leap", help="Leap-year status of a year")

    # diagnostics
    sub.add_parser("month", help="Print Jalali month grids (diagnostics)")
    sub.add_parser("nowruz", help="Print Nowruz table (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "leap-years", "nowruz-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    import caljal

    try:
        if args.cmd == "to-jalali":
            return cmd_to_jalali(rest)

        if args.cmd == "to-gregorian":
            return cmd_to_gregorian(rest)

        if args.cmd == "info":
            return cmd_info(rest)

        if args.cmd == "leap":
            return cmd_leap(rest)

        if args.cmd == "month":
            return _run_module_main("caljal.diagnostics.pretty_month", rest)

        if args.cmd == "nowruz":
            return _run_module_main("caljal.diagnostics.nowruz_table", rest)

        if args.cmd == "diag":
            tool_map = {
                "round-trip": "caljal.diagnostics.round_trip",
                "leap-years": "caljal.diagnostics.leap_years",
                "nowruz-scatter": "caljal.diagnostics.nowruz_scatter",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except caljal.CaljalError as e:
        print(f"caljal: error: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
