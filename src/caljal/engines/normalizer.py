"""
caljal.engines.normalizer
-------------------------
Carries and borrows out-of-range month/day values into a valid Jalali date.
Every mutation of a CalendarDate (setters, add/sub) goes through here.
"""

from __future__ import annotations

from typing import Tuple

from .converter import JalaliJulianConverter
from ..core.time import floor_div
from ..core.types import CalendarDate


class DateNormalizer:
    def __init__(self, converter: JalaliJulianConverter | None = None):
        self.converter = converter if converter is not None else JalaliJulianConverter()

    @staticmethod
    def normalize_month(year: int, month: int) -> Tuple[int, int]:
        if month < 1:
            m = abs(month)
            year -= 1
            year -= floor_div(m, 12)
            month = 12 - m % 12
        elif month > 12:
            year += floor_div(month, 12)
            month = month % 12
            if month == 0:
                month = 12
                year -= 1
        return year, month

    def normalize_day(self, year: int, month: int, day: int) -> Tuple[int, int, int]:
        """Expects (year, month) already normalized."""
        length = self.converter.month_length
        while day < 1:
            year, month = self.normalize_month(year, month - 1)
            day += length(month, year)
        while day > length(month, year):
            day -= length(month, year)
            year, month = self.normalize_month(year, month + 1)
        return year, month, day

    def normalize(self, year: int, month: int, day: int) -> CalendarDate:
        year, month = self.normalize_month(year, month)
        return CalendarDate(*self.normalize_day(year, month, day))
