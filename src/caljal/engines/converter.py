"""
caljal.engines.converter
------------------------
Jalali (year, month, day) <-> Julian Day Number.

Months 1..6 have 31 days, 7..11 have 30 and Esfand (12) has 29, or 30 in a
leap year. Both directions are anchored on Nowruz as reported by the
LeapYearOracle and bridged to the Gregorian calendar through the JDN.
"""

from __future__ import annotations

from .leap_oracle import LeapYearOracle
from .specs import DAYS_IN_FIRST_HALF
from ..core.time import floor_div, georgian_to_julian_day, julian_day_to_georgian
from ..core.types import CalendarDate


class JalaliJulianConverter:
    def __init__(self, oracle: LeapYearOracle | None = None):
        self.oracle = oracle if oracle is not None else LeapYearOracle()

    @property
    def hegira_offset(self) -> int:
        return self.oracle.p.hegira_offset

    # ---------------------------------------------------------
    # Forward: Jalali -> JDN
    # ---------------------------------------------------------

    def to_jdn(self, year: int, month: int, day: int) -> int:
        """No range checks: month/day outside their range run on linearly."""
        r = self.oracle.query(year)
        anchor = georgian_to_julian_day(r.gregorian_year, 3, r.march_day)
        return anchor + (month - 1) * 31 - floor_div(month, 7) * (month - 7) + day - 1

    # ---------------------------------------------------------
    # Inverse: JDN -> Jalali
    # ---------------------------------------------------------

    def from_jdn(self, jdn: int) -> CalendarDate:
        gy = julian_day_to_georgian(jdn)[0]
        year = gy - self.hegira_offset
        nowruz = self.oracle.nowruz

        # outside the table Nowruz drifts away from March; settle on the
        # Jalali year whose [Nowruz, next Nowruz) holds jdn
        start = nowruz(year)
        while jdn < start:
            year -= 1
            start = nowruz(year)
        while jdn >= nowruz(year + 1):
            year += 1
            start = nowruz(year)

        # days since 1 Farvardin
        passed = jdn - start
        if passed < DAYS_IN_FIRST_HALF:
            return CalendarDate(year, 1 + floor_div(passed, 31), passed % 31 + 1)
        passed -= DAYS_IN_FIRST_HALF
        return CalendarDate(year, 7 + floor_div(passed, 30), passed % 30 + 1)

    # ---------------------------------------------------------
    # Month and year lengths
    # ---------------------------------------------------------

    def is_leap(self, year: int) -> bool:
        return self.oracle.is_leap(year)

    def month_length(self, month: int, year: int) -> int:
        if month <= 6:
            return 31
        if month <= 11:
            return 30
        return 30 if self.is_leap(year) else 29

    def days_in_year(self, year: int) -> int:
        return 366 if self.is_leap(year) else 365

    @staticmethod
    def day_of_year(month: int, day: int) -> int:
        if month > 6:
            return DAYS_IN_FIRST_HALF + (month - 7) * 30 + day
        return (month - 1) * 31 + day
