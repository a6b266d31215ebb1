from __future__ import annotations

import argparse

import caljal
from caljal.core.types import format_ymd


def nowruz_row(year: int) -> dict:
    r = caljal.leap_info(year)
    g = caljal.jalali_to_gregorian(year, 1, 1)
    return {
        "year": year,
        "gregorian": g,
        "march_day": r.march_day,
        "leap": r.leap_offset == 0,
        "leap_offset": r.leap_offset,
    }


def fmt_gregorian(g: tuple[int, int, int]) -> str:
    return format_ymd(*g)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print the Nowruz (1 Farvardin) table for a range of Jalali years.")
    p.add_argument("--from-year", type=int, default=1390)
    p.add_argument("--to-year", type=int, default=1420)
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    header = f"{'Year':>6}  {'Nowruz':>11}  {'March':>5}  {'Leap':>4}  {'Offset':>6}"
    print(header)
    print("-" * len(header))
    for Y in range(Y0, Y1 + 1):
        row = nowruz_row(Y)
        leap = "*" if row["leap"] else ""
        print(
            f"{Y:>6}  {fmt_gregorian(row['gregorian']):>11}  {row['march_day']:>5}  "
            f"{leap:>4}  {row['leap_offset']:>6}"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
