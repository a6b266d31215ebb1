from __future__ import annotations

import argparse

import caljal
from caljal.core.types import format_ymd


def dow_header() -> str:
    return "Sa     Su     Mo     Tu     We     Th     Fr"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def month_weeks(Y: int, M: int) -> list[list[tuple[str, str]]]:
    first = caljal.CalendarDate(Y, M, 1)
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    for _ in range(caljal.day_of_week(first) - 1):
        wk.append(cell("", ""))
    for d in range(1, caljal.month_length(M, Y) + 1):
        _, gm, gd = caljal.jalali_to_gregorian(Y, M, d)
        wk.append(cell(f"{d:2d}", f"{gm:02d}-{gd:02d}"))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def jalali_month_calendar(Y: int, M: int) -> None:
    first = caljal.CalendarDate(Y, M, 1)
    last = caljal.end_of_month(first)
    g0 = caljal.jalali_to_gregorian(*first)
    g1 = caljal.jalali_to_gregorian(*last)
    title = (
        f"Jalali month  Y={Y}  M={M}   "
        f"({format_ymd(*g0)} .. {format_ymd(*g1)})"
    )
    print_grid(title, month_weeks(Y, M))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print Jalali month grids with Gregorian dates underneath.")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int, nargs="?", default=None, help="1..12 (default: whole year)")
    args = p.parse_args(argv)

    months = [args.month] if args.month is not None else list(range(1, 13))
    for M in months:
        if not 1 <= M <= 12:
            raise SystemExit("month must be in 1..12")
        jalali_month_calendar(args.year, M)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
