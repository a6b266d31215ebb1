from __future__ import annotations
from dataclasses import dataclass
from typing import NamedTuple, Tuple


def format_ymd(year: int, month: int, day: int) -> str:
    """YYYY-MM-DD with the year zero-padded to four digits after its sign."""
    sign = "-" if year < 0 else ""
    return f"{sign}{abs(year):04d}-{month:02d}-{day:02d}"


class CalendarDate(NamedTuple):
    """A Jalali calendar date. Values produced by caljal are always normalized."""
    year: int
    month: int
    day: int

    def isoformat(self) -> str:
        return format_ymd(self.year, self.month, self.day)

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __str__(self) -> str:
        return self.isoformat()


@dataclass(frozen=True)
class LeapYearResult:
    """
    leap_offset: 0 if the year is leap, else years since the last leap year (1..4)
    gregorian_year: Gregorian year in which the Jalali year begins
    march_day: day of March (Gregorian) of 1 Farvardin; may fall outside 1..31
               far from the astronomical table, the JDN formula accepts that
    """
    leap_offset: int
    gregorian_year: int
    march_day: int

    @property
    def is_leap(self) -> bool:
        return self.leap_offset == 0
