from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


# ============================================================
# SHARED CONSTANTS
# ============================================================

# Gregorian year minus Jalali year (for dates after Nowruz)
HEGIRA_STARTING_YEAR = 621

# Months 1..6 have 31 days, 7..11 have 30, Esfand 29 or 30
DAYS_IN_FIRST_HALF = 6 * 31


# ============================================================
# ASTRONOMICAL (BREAK-POINT) MODEL
# ============================================================

# Jalali years at which the 33-year leap cadence shifts.
# Valid domain: BREAK_POINTS[0] <= year < BREAK_POINTS[-1].
BREAK_POINTS: Tuple[int, ...] = (
    -61, 9, 38, 199, 426, 686, 756, 818, 1111, 1181,
    1210, 1635, 2060, 2097, 2192, 2262, 2324, 2394, 2456, 3178,
)


@dataclass(frozen=True)
class AstronomicalLeapParams:
    break_points: Tuple[int, ...] = BREAK_POINTS
    hegira_offset: int = HEGIRA_STARTING_YEAR
    cycle: int = 33
    leaps_per_cycle: int = 8
    jleap_seed: int = -14
    gleap_seed: int = 150
    march_base: int = 20

    def __post_init__(self) -> None:
        if len(self.break_points) < 2:
            raise ValueError("break_points needs at least two entries")
        if any(b <= a for a, b in zip(self.break_points, self.break_points[1:])):
            raise ValueError("break_points must be strictly ascending")

    @property
    def first_year(self) -> int:
        return self.break_points[0]

    @property
    def end_year(self) -> int:
        """First Jalali year past the table domain."""
        return self.break_points[-1]


# ============================================================
# ARITHMETIC (GRAND CYCLE) MODEL
# ============================================================

GRAND_CYCLE_BEGINNING = 1096   # Gregorian
GRAND_CYCLE_LENGTH = 2820
FIRST_QUAD_CYCLE = 128         # repeats 21 times per grand cycle
SECOND_QUAD_CYCLE = 132        # closes every grand cycle

# Sub-block edges inside a quad cycle: 29 + 33 + 33 + 33
ARITHMETIC_BREAK_POINTS: Tuple[int, ...] = (29, 62, 95, 128)


@dataclass(frozen=True)
class ArithmeticLeapParams:
    grand_cycle_beginning: int = GRAND_CYCLE_BEGINNING
    grand_cycle_length: int = GRAND_CYCLE_LENGTH
    first_quad_cycle: int = FIRST_QUAD_CYCLE
    second_quad_cycle: int = SECOND_QUAD_CYCLE
    break_points: Tuple[int, ...] = ARITHMETIC_BREAK_POINTS
    hegira_offset: int = HEGIRA_STARTING_YEAR

    def __post_init__(self) -> None:
        if self.first_quad_cycle <= 0 or self.second_quad_cycle <= 0:
            raise ValueError("quad cycle lengths must be positive")
        if (self.grand_cycle_length - self.second_quad_cycle) % self.first_quad_cycle:
            raise ValueError("grand cycle must be whole first quad cycles plus one second quad cycle")
        if self.break_points[-1] != self.first_quad_cycle:
            raise ValueError("last sub-block edge must close the first quad cycle")
        if any(b <= a for a, b in zip(self.break_points, self.break_points[1:])):
            raise ValueError("break_points must be strictly ascending")

    @property
    def first_quad_repeats(self) -> int:
        return (self.grand_cycle_length - self.second_quad_cycle) // self.first_quad_cycle

    @property
    def head_length(self) -> int:
        """Years of a grand cycle covered by the repeated first quad cycles."""
        return self.first_quad_repeats * self.first_quad_cycle


BORKOWSKI = AstronomicalLeapParams()
BIRASHK = ArithmeticLeapParams()
