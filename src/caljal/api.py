from __future__ import annotations

import re
from datetime import date
from typing import Any, Optional, Tuple

from .core.errors import ValidationError
from .core.time import (
    from_jdn,
    georgian_to_julian_day,
    julian_day_to_georgian,
    to_jdn,
    weekday,
)
from .core.types import CalendarDate, LeapYearResult
from .engines.normalizer import DateNormalizer
from .engines.specs import AstronomicalLeapParams, ArithmeticLeapParams

_normalizer: Optional[DateNormalizer] = None

def set_normalizer(n: DateNormalizer) -> None:
    global _normalizer
    _normalizer = n

def _norm() -> DateNormalizer:
    if _normalizer is None:
        raise RuntimeError("caljal engines not initialized")
    return _normalizer

def configure(
    *,
    astronomical: Optional[AstronomicalLeapParams] = None,
    arithmetic: Optional[ArithmeticLeapParams] = None,
) -> None:
    """Rebuild the process-wide engines with custom parameters."""
    from .bootstrap import build_normalizer
    kwargs = {}
    if astronomical is not None:
        kwargs["astronomical"] = astronomical
    if arithmetic is not None:
        kwargs["arithmetic"] = arithmetic
    set_normalizer(build_normalizer(**kwargs))

# ============================================================
# Leap years
# ============================================================

def leap_info(year: int, year_is_gregorian: bool = False) -> LeapYearResult:
    return _norm().converter.oracle.query(year, year_is_gregorian)

def is_leap_year(year: int, year_is_gregorian: bool = False) -> bool:
    return leap_info(year, year_is_gregorian).leap_offset == 0

def month_length(month: int, year: int) -> int:
    return _norm().converter.month_length(month, year)

def days_in_year(year: int) -> int:
    return _norm().converter.days_in_year(year)

# ============================================================
# Conversions
# ============================================================

def jalali_to_julian_day(year: int, month: int, day: int) -> int:
    return _norm().converter.to_jdn(year, month, day)

def julian_day_to_jalali(jdn: int) -> CalendarDate:
    return _norm().converter.from_jdn(jdn)

def normalize_date(year: int, month: int, day: int) -> CalendarDate:
    return _norm().normalize(year, month, day)

def jalali_to_gregorian(year: int, month: int, day: int) -> Tuple[int, int, int]:
    return julian_day_to_georgian(jalali_to_julian_day(year, month, day))

def gregorian_to_jalali(year: int, month: int, day: int) -> CalendarDate:
    return julian_day_to_jalali(georgian_to_julian_day(year, month, day))

def from_gregorian(d: Any) -> CalendarDate:
    """Jalali date of any Gregorian value exposing year/month/day."""
    return julian_day_to_jalali(to_jdn(d))

def to_gregorian(jd: CalendarDate) -> date:
    return from_jdn(jalali_to_julian_day(*jd))

def apply_to(clock: Any, jd: CalendarDate) -> Any:
    """
    Move a date/datetime-like value onto the Gregorian day of jd, keeping its
    time-of-day and tzinfo untouched.
    """
    y, m, d = jalali_to_gregorian(*jd)
    return clock.replace(year=y, month=m, day=d)

def today() -> CalendarDate:
    return from_gregorian(date.today())

# ============================================================
# Accessors
# ============================================================

def day_of_year(jd: CalendarDate) -> int:
    return _norm().converter.day_of_year(jd.month, jd.day)

def day_of_week(jd: CalendarDate) -> int:
    """1 = Saturday .. 7 = Friday."""
    return weekday(jalali_to_julian_day(*jd))

def week_of_month(jd: CalendarDate) -> int:
    return -(-jd.day // 7)

def quarter(jd: CalendarDate) -> int:
    return -(-jd.month // 3)

def days_in_month(jd: CalendarDate) -> int:
    return month_length(jd.month, jd.year)

# ============================================================
# Setters and arithmetic (all routed through the normalizer)
# ============================================================

def with_year(jd: CalendarDate, year: int) -> CalendarDate:
    """Same month/day in another year; Esfand 30 falls back to 29 in a common year."""
    return normalize_date(year, jd.month, min(jd.day, month_length(jd.month, year)))

def with_month(jd: CalendarDate, month: int) -> CalendarDate:
    return normalize_date(jd.year, month, jd.day)

def with_day(jd: CalendarDate, day: int) -> CalendarDate:
    return normalize_date(jd.year, jd.month, day)

def add_years(jd: CalendarDate, n: int) -> CalendarDate:
    return with_year(jd, jd.year + n)

def add_months(jd: CalendarDate, n: int) -> CalendarDate:
    return with_month(jd, jd.month + n)

def add_days(jd: CalendarDate, n: int) -> CalendarDate:
    return with_day(jd, jd.day + n)

def sub_years(jd: CalendarDate, n: int) -> CalendarDate:
    return add_years(jd, -n)

def sub_months(jd: CalendarDate, n: int) -> CalendarDate:
    return add_months(jd, -n)

def sub_days(jd: CalendarDate, n: int) -> CalendarDate:
    return add_days(jd, -n)

# ============================================================
# Boundaries
# ============================================================

def start_of_month(jd: CalendarDate) -> CalendarDate:
    return CalendarDate(jd.year, jd.month, 1)

def end_of_month(jd: CalendarDate) -> CalendarDate:
    return CalendarDate(jd.year, jd.month, month_length(jd.month, jd.year))

def start_of_year(jd: CalendarDate) -> CalendarDate:
    return CalendarDate(jd.year, 1, 1)

def end_of_year(jd: CalendarDate) -> CalendarDate:
    return CalendarDate(jd.year, 12, month_length(12, jd.year))

def start_of_decade(jd: CalendarDate) -> CalendarDate:
    return CalendarDate(jd.year - jd.year % 10, 1, 1)

def end_of_decade(jd: CalendarDate) -> CalendarDate:
    return end_of_year(CalendarDate(jd.year - jd.year % 10 + 9, 1, 1))

def start_of_century(jd: CalendarDate) -> CalendarDate:
    return CalendarDate(jd.year - jd.year % 100, 1, 1)

def end_of_century(jd: CalendarDate) -> CalendarDate:
    return end_of_year(CalendarDate(jd.year - jd.year % 100 + 99, 1, 1))

# ============================================================
# Parsing / validation (caller-level, never used by the engines)
# ============================================================

_DATE_RE = re.compile(r"^\s*(-?\d{1,4})[-/](\d{1,2})[-/](\d{1,2})\s*$")

def validate_date(year: int, month: int, day: int) -> CalendarDate:
    if not 1 <= month <= 12:
        raise ValidationError("month out of range", max=12)
    max_day = month_length(month, year)
    if not 1 <= day <= max_day:
        raise ValidationError("day out of range", max=max_day)
    return CalendarDate(year, month, day)

def parse_date(text: str, *, now: Optional[CalendarDate] = None) -> CalendarDate:
    """
    Parse "YYYY-MM-DD" or "YYYY/MM/DD" as a Jalali date.
    Two-digit years are placed in the current Jalali century.
    """
    m = _DATE_RE.match(text)
    if m is None:
        raise ValidationError(f"invalid date format: {text!r}")
    ys, ms, ds = m.groups()
    year = int(ys)
    if len(ys) == 2 and ys.isdigit():
        ref = now if now is not None else today()
        year += ref.year - ref.year % 100
    return validate_date(year, int(ms), int(ds))
