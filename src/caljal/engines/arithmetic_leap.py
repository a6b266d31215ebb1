"""
caljal.engines.arithmetic_leap
------------------------------
Periodic (Birashk-style) leap rule used outside the astronomical table.

A grand cycle of 2820 years starts at Gregorian 1096 and is made of 21 quad
cycles of 128 years followed by one of 132. Each quad cycle is split into
sub-blocks at (29, 62, 95, 128); the first year of a sub-block is common and
every later year whose offset is divisible by 4 is leap.

All year arguments below are Gregorian unless a method says otherwise.
"""

from __future__ import annotations

from typing import Tuple

from .specs import ArithmeticLeapParams, BIRASHK
from ..core.time import floor_div


class ArithmeticLeapEngine:
    def __init__(self, params: ArithmeticLeapParams = BIRASHK):
        self.p = params

    # ---------------------------------------------------------
    # Cycle location
    # ---------------------------------------------------------

    def grand_cycle(self, g: int) -> int:
        """Signed index of the grand cycle containing g (0 = the one starting at 1096)."""
        begin = self.p.grand_cycle_beginning
        length = self.p.grand_cycle_length
        end_of_first = begin + length

        cycle = 0
        if g < begin:
            boundary = begin
            while g < boundary:
                boundary -= length
                cycle -= 1
        elif g >= end_of_first:
            boundary = end_of_first
            while g >= boundary:
                boundary += length
                cycle += 1
        return cycle

    def cycle_start(self, g: int) -> int:
        return self.p.grand_cycle_beginning + self.grand_cycle(g) * self.p.grand_cycle_length

    def year_in_grand_cycle(self, g: int) -> int:
        """1-based position of g inside its grand cycle (1..2820)."""
        return abs(g - self.cycle_start(g)) + 1

    def year_in_quad_cycle(self, g: int) -> int:
        """
        Position inside the quad cycle. The last year of every 128-year quad
        cycle comes out as 0, the trailing 132-year cycle counts 1..132.
        """
        yig = self.year_in_grand_cycle(g)
        if yig > self.p.head_length:
            return yig - self.p.head_length
        return yig % self.p.first_quad_cycle

    def sub_block_offset(self, g: int) -> int:
        pos = self.year_in_quad_cycle(g) - 1
        bp = self.p.break_points
        for brk, nxt in zip(bp, bp[1:]):
            if brk <= pos < nxt:
                return pos - brk
        return pos

    # ---------------------------------------------------------
    # Leap rule
    # ---------------------------------------------------------

    def is_leap(self, year: int, year_is_gregorian: bool = False) -> bool:
        g = year if year_is_gregorian else year + self.p.hegira_offset
        offset = self.sub_block_offset(g)
        return offset > 0 and offset % 4 == 0

    # ---------------------------------------------------------
    # Closed-form leap counting
    # ---------------------------------------------------------

    def _leaps_in_quad(self, k: int) -> int:
        """Leap years among quad positions [0, k) (positions as seen by sub_block_offset)."""
        edges: Tuple[int, ...] = (0,) + self.p.break_points
        count = 0
        for lo, hi in zip(edges, edges[1:]):
            top = min(k, hi)
            if top > lo:
                count += floor_div(top - lo - 1, 4)
        # positions past the last edge only exist in the trailing quad cycle
        tail = edges[-1]
        if k > tail:
            count += floor_div(k - 1, 4) - floor_div(tail - 1, 4)
        return count

    @property
    def leaps_per_first_quad(self) -> int:
        # its last year sits at position -1 and is never leap
        return self._leaps_in_quad(self.p.first_quad_cycle - 1)

    @property
    def leaps_per_grand_cycle(self) -> int:
        return (
            self.p.first_quad_repeats * self.leaps_per_first_quad
            + self._leaps_in_quad(self.p.second_quad_cycle)
        )

    def _leaps_in_grand_cycle(self, n: int) -> int:
        """Leap years among the first n years (positions 1..n) of a grand cycle."""
        head = self.p.head_length
        if n <= head:
            quads, rest = divmod(n, self.p.first_quad_cycle)
            return quads * self.leaps_per_first_quad + self._leaps_in_quad(rest)
        return self.p.first_quad_repeats * self.leaps_per_first_quad + self._leaps_in_quad(n - head)

    def leaps_before(self, g: int) -> int:
        """
        Signed count of leap years in [GRAND_CYCLE_BEGINNING, g).
        Negative for g below the beginning, so that
        leaps_between(a, b) = leaps_before(b) - leaps_before(a) for any a <= b.
        """
        start = self.cycle_start(g)
        cycles = floor_div(start - self.p.grand_cycle_beginning, self.p.grand_cycle_length)
        return cycles * self.leaps_per_grand_cycle + self._leaps_in_grand_cycle(g - start)

    def leaps_between(self, a: int, b: int) -> int:
        """Number of leap years g with a <= g < b (Gregorian years)."""
        return self.leaps_before(b) - self.leaps_before(a)
