from __future__ import annotations

import argparse
from typing import List

import caljal
from caljal.engines.arithmetic_leap import ArithmeticLeapEngine


def leap_years(start: int, end: int) -> List[int]:
    """Jalali leap years in [start, end]."""
    return [y for y in range(start, end + 1) if caljal.is_leap_year(y)]


def gap_histogram(years: List[int]) -> dict[int, int]:
    out: dict[int, int] = {}
    for a, b in zip(years, years[1:]):
        out[b - a] = out.get(b - a, 0) + 1
    return dict(sorted(out.items()))


def arithmetic_density(engine: ArithmeticLeapEngine | None = None) -> int:
    """Leap years of the arithmetic rule over one full grand cycle, counted year by year."""
    eng = engine if engine is not None else ArithmeticLeapEngine()
    begin = eng.p.grand_cycle_beginning
    return sum(
        1 for g in range(begin, begin + eng.p.grand_cycle_length)
        if eng.is_leap(g, year_is_gregorian=True)
    )


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="List Jalali leap years and summarize leap cadence.")
    p.add_argument("--from-year", type=int, default=1300)
    p.add_argument("--to-year", type=int, default=1500)
    p.add_argument("--density", action="store_true", help="Also count arithmetic leap years per grand cycle.")
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    years = leap_years(args.from_year, args.to_year)
    print(f"Leap years in {args.from_year}..{args.to_year} ({len(years)}):")
    for i in range(0, len(years), 10):
        print("  " + " ".join(f"{y:5d}" for y in years[i:i + 10]))

    print("\nGaps between consecutive leap years:")
    for gap, count in gap_histogram(years).items():
        print(f"  {gap}: {count}")

    if args.density:
        eng = ArithmeticLeapEngine()
        print(f"\nArithmetic leap years per grand cycle: {arithmetic_density(eng)} "
              f"(closed form: {eng.leaps_per_grand_cycle})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
