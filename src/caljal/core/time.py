from __future__ import annotations
from datetime import date
from typing import Any, Tuple


def floor_div(a: int, b: int) -> int:
    """Integer division rounding toward negative infinity."""
    return a // b


def georgian_to_julian_day(year: int, month: int, day: int) -> int:
    """
    Proleptic Gregorian (year, month, day) -> Julian Day Number.

    Astronomical year numbering (1 BC = 0, 2 BC = -1). With floor division the
    formula holds for every integer year; month/day are not validated.
    """
    a = floor_div(14 - month, 12)
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return (
        day
        + floor_div(153 * m2 + 2, 5)
        + 365 * y2
        + floor_div(y2, 4)
        - floor_div(y2, 100)
        + floor_div(y2, 400)
        - 32045
    )


def julian_day_to_georgian(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of georgian_to_julian_day."""
    a = jdn + 32044
    b = floor_div(4 * a + 3, 146097)
    c = a - floor_div(146097 * b, 4)
    d = floor_div(4 * c + 3, 1461)
    e = c - floor_div(1461 * d, 4)
    m = floor_div(5 * e + 2, 153)
    day = e - floor_div(153 * m + 2, 5) + 1
    month = m + 3 - 12 * floor_div(m, 10)
    year = 100 * b + d - 4800 + floor_div(m, 10)
    return year, month, day


def to_jdn(d: Any) -> int:
    """JDN of any Gregorian value exposing year/month/day (date, datetime, ...)."""
    return georgian_to_julian_day(d.year, d.month, d.day)


def from_jdn(jdn: int) -> date:
    """JDN -> datetime.date (years 1..9999 only, a datetime limitation)."""
    return date(*julian_day_to_georgian(jdn))


def weekday(jdn: int) -> int:
    """Jalali week position: 1=Saturday .. 7=Friday."""
    # JDN 0 is a Monday
    return (jdn + 2) % 7 + 1
