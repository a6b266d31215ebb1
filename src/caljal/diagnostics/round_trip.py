from __future__ import annotations

import argparse
import logging
import random

import caljal

logger = logging.getLogger(__name__)


def check_jdn(jdn: int) -> bool:
    """JDN -> Jalali -> JDN, and the Jalali date must be in range."""
    jd = caljal.julian_day_to_jalali(jdn)
    if not (1 <= jd.month <= 12 and 1 <= jd.day <= caljal.month_length(jd.month, jd.year)):
        return False
    return caljal.jalali_to_julian_day(*jd) == jdn


def check_year(year: int) -> int:
    """Walk every day of a Jalali year; returns the number of failures."""
    failures = 0
    start = caljal.jalali_to_julian_day(year, 1, 1)
    for month in range(1, 13):
        for day in range(1, caljal.month_length(month, year) + 1):
            jdn = caljal.jalali_to_julian_day(year, month, day)
            if caljal.julian_day_to_jalali(jdn) != (year, month, day):
                failures += 1
                print(f"FAIL {year}-{month:02d}-{day:02d} -> {jdn} -> {caljal.julian_day_to_jalali(jdn)}")
    nxt = caljal.jalali_to_julian_day(year + 1, 1, 1)
    if nxt - start != caljal.days_in_year(year):
        failures += 1
        print(f"FAIL year {year}: Nowruz spacing {nxt - start} != {caljal.days_in_year(year)}")
    return failures


def roundtrip_test(N: int, start_year: int, end_year: int, seed: int, *, max_failures: int) -> int:
    random.seed(seed)
    lo = caljal.jalali_to_julian_day(start_year, 1, 1)
    hi = caljal.jalali_to_julian_day(end_year + 1, 1, 1) - 1
    failures = 0
    for _ in range(N):
        jdn = random.randint(lo, hi)
        if not check_jdn(jdn):
            failures += 1
            print(f"FAIL jdn={jdn} -> {caljal.julian_day_to_jalali(jdn)}")
            if failures >= max_failures:
                return failures
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: JDN -> Jalali -> JDN.")
    p.add_argument("--N", type=int, default=20000, help="Random trials.")
    p.add_argument("--start", type=int, default=-3000, help="First Jalali year.")
    p.add_argument("--end", type=int, default=3000, help="Last Jalali year.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    p.add_argument("--full-years", type=str, default="", help="Comma list of years to sweep day by day.")
    args = p.parse_args(argv)

    if args.end < args.start:
        raise SystemExit("--end must be >= --start")

    logger.debug("round trip over %d..%d, N=%d", args.start, args.end, args.N)
    total = roundtrip_test(args.N, args.start, args.end, args.seed, max_failures=args.max_failures)
    for y in (int(x) for x in args.full_years.split(",") if x.strip()):
        total += check_year(y)

    if total == 0:
        print("All round-trip tests passed.")
        return 0
    print(f"Round-trip failures: {total}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
