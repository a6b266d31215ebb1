# tests/test_time.py

import random
from datetime import date, datetime

import pytest

from caljal.core import time as t


def _is_gregorian_leap(y):
    return y % 4 == 0 and (y % 100 != 0 or y % 400 == 0)


def test_known_epochs():
    assert t.georgian_to_julian_day(2000, 1, 1) == 2451545
    assert t.georgian_to_julian_day(-4713, 11, 24) == 0
    assert t.julian_day_to_georgian(0) == (-4713, 11, 24)
    # Unix epoch
    assert t.georgian_to_julian_day(1970, 1, 1) == 2440588


@pytest.mark.parametrize("a,b,q", [
    (7, 2, 3),
    (-7, 2, -4),
    (7, -2, -4),
    (-1, 4, -1),
    (0, 5, 0),
])
def test_floor_div(a, b, q):
    assert t.floor_div(a, b) == q


def test_jdn_gregorian_roundtrip_including_negative_years():
    random.seed(42)
    lo = t.georgian_to_julian_day(-3000, 1, 1)
    hi = t.georgian_to_julian_day(3000, 12, 31)
    for _ in range(20000):
        jdn_in = random.randint(lo, hi)
        y, m, d = t.julian_day_to_georgian(jdn_in)
        assert t.georgian_to_julian_day(y, m, d) == jdn_in


def test_year_lengths_follow_proleptic_gregorian_rule():
    for y in range(-1000, 2500):
        n = t.georgian_to_julian_day(y + 1, 1, 1) - t.georgian_to_julian_day(y, 1, 1)
        assert n == (366 if _is_gregorian_leap(y) else 365), y


def test_date_helpers_match_datetime():
    random.seed(7)
    for _ in range(2000):
        jdn = random.randint(1721426, 5373484)
        d = t.from_jdn(jdn)
        assert t.to_jdn(d) == jdn
        assert d.toordinal() + 1721425 == jdn
    assert t.to_jdn(datetime(2000, 1, 1, 23, 59)) == 2451545


def test_weekday_saturday_first():
    # 2000-01-01 was a Saturday, 2024-03-20 a Wednesday
    assert t.weekday(2451545) == 1
    assert t.weekday(t.to_jdn(date(2024, 3, 20))) == 5
    assert t.weekday(t.to_jdn(date(2024, 3, 22))) == 7
