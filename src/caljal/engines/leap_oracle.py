"""
caljal.engines.leap_oracle
--------------------------
Astronomical leap-year model (Borkowski's break-point walk).

For a Jalali year inside the break-point table the oracle returns the number
of years since the last leap year, the Gregorian year in which the Jalali
year starts, and the day of March of Nowruz (1 Farvardin). Outside the table
leap-ness comes from the arithmetic grand-cycle rule and Nowruz is chained
from the nearest table edge, one Jalali year length at a time, so that
consecutive Nowruz days are always exactly 365 or 366 days apart.

See: K. M. Borkowski, "The Persian calendar for 3000 years",
Earth, Moon, and Planets 74 (1996).
"""

from __future__ import annotations

import logging

from .arithmetic_leap import ArithmeticLeapEngine
from .specs import AstronomicalLeapParams, BORKOWSKI
from ..core.time import floor_div, georgian_to_julian_day
from ..core.types import LeapYearResult

logger = logging.getLogger(__name__)


class LeapYearOracle:
    def __init__(
        self,
        params: AstronomicalLeapParams = BORKOWSKI,
        arithmetic: ArithmeticLeapEngine | None = None,
    ):
        self.p = params
        self.arithmetic = arithmetic if arithmetic is not None else ArithmeticLeapEngine()

    # ---------------------------------------------------------
    # Public
    # ---------------------------------------------------------

    def query(self, year: int, year_is_gregorian: bool = False) -> LeapYearResult:
        jy = year - self.p.hegira_offset if year_is_gregorian else year
        if self.in_table(jy):
            return self._table_query(jy)
        return self._arithmetic_query(jy)

    def is_leap(self, year: int, year_is_gregorian: bool = False) -> bool:
        jy = year - self.p.hegira_offset if year_is_gregorian else year
        if self.in_table(jy):
            return self._table_query(jy).leap_offset == 0
        return self.arithmetic.is_leap(jy)

    def nowruz(self, year: int) -> int:
        """JDN of 1 Farvardin of the Jalali year."""
        r = self.query(year)
        return georgian_to_julian_day(r.gregorian_year, 3, r.march_day)

    def in_table(self, jy: int) -> bool:
        return self.p.first_year <= jy < self.p.end_year

    # ---------------------------------------------------------
    # Break-point walk
    # ---------------------------------------------------------

    def _table_query(self, jy: int) -> LeapYearResult:
        bp = self.p.break_points
        cycle = self.p.cycle
        per_cycle = self.p.leaps_per_cycle
        gy = jy + self.p.hegira_offset

        jleap = self.p.jleap_seed
        recent = bp[0]
        jump = 0
        for nxt in bp[1:]:
            jump = nxt - recent
            if jy < nxt:
                break
            jleap += floor_div(jump, cycle) * per_cycle + floor_div(jump % cycle, 4)
            recent = nxt

        passed = jy - recent
        jleap += floor_div(passed, cycle) * per_cycle + floor_div(passed % cycle + 3, 4)
        if jump % cycle == 4 and jump - passed == 4:
            jleap += 1

        gleap = floor_div(gy, 4) - floor_div((floor_div(gy, 100) + 1) * 3, 4) - self.p.gleap_seed
        march = self.p.march_base + jleap - gleap

        if jump - passed < 6:
            passed = passed - jump + floor_div(jump + 4, cycle) * cycle

        # -1 marks the year right before a leap year
        leap = (passed + 1) % cycle - 1
        leap = 4 if leap == -1 else leap % 4

        return LeapYearResult(leap_offset=leap, gregorian_year=gy, march_day=march)

    # ---------------------------------------------------------
    # Outside the table
    # ---------------------------------------------------------

    def _arithmetic_query(self, jy: int) -> LeapYearResult:
        logger.debug("Jalali year %d outside break-point table, using arithmetic rule", jy)
        hegira = self.p.hegira_offset
        gy = jy + hegira

        if jy < self.p.first_year:
            edge = self.p.first_year
            nowruz = (
                self._table_nowruz(edge)
                - 365 * (edge - jy)
                - self.arithmetic.leaps_between(gy, edge + hegira)
            )
        else:
            edge = self.p.end_year - 1
            after_edge = edge + 1
            nowruz = (
                self._table_nowruz(edge)
                + 365 + (1 if self.is_leap(edge) else 0)
                + 365 * (jy - after_edge)
                + self.arithmetic.leaps_between(after_edge + hegira, gy)
            )

        march = nowruz - georgian_to_julian_day(gy, 3, 1) + 1
        return LeapYearResult(leap_offset=self._years_since_leap(jy), gregorian_year=gy, march_day=march)

    def _table_nowruz(self, jy: int) -> int:
        r = self._table_query(jy)
        return georgian_to_julian_day(r.gregorian_year, 3, r.march_day)

    def _years_since_leap(self, jy: int) -> int:
        for k in range(4):
            if self.is_leap(jy - k):
                return k
        return 4
