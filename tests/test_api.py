# tests/test_api.py

from datetime import date, datetime, timedelta, timezone

import pytest

import caljal
from caljal import CalendarDate, ValidationError
from caljal.engines.arithmetic_leap import ArithmeticLeapEngine
from caljal.engines.specs import ArithmeticLeapParams, AstronomicalLeapParams


J = CalendarDate


def test_calendar_date_value_semantics():
    d = J(1403, 1, 1)
    assert d == (1403, 1, 1)
    assert d.as_tuple() == (1403, 1, 1)
    assert d < J(1403, 1, 2) < J(1403, 2, 1)
    assert len({d, J(1403, 1, 1)}) == 1
    assert d.isoformat() == "1403-01-01"
    assert str(J(-5, 12, 3)) == "-0005-12-03"


def test_gregorian_objects():
    assert caljal.from_gregorian(date(2024, 3, 20)) == (1403, 1, 1)
    assert caljal.from_gregorian(datetime(2017, 1, 1, 12, 30)) == (1395, 10, 12)
    assert caljal.to_gregorian(J(1404, 1, 1)) == date(2025, 3, 21)


def test_apply_to_keeps_time_of_day():
    clock = datetime(2020, 5, 5, 13, 45, 10, tzinfo=timezone.utc)
    out = caljal.apply_to(clock, J(1403, 1, 1))
    assert out == datetime(2024, 3, 20, 13, 45, 10, tzinfo=timezone.utc)
    assert caljal.apply_to(date(1999, 1, 1), J(1367, 10, 1)) == date(1988, 12, 22)


def test_today_matches_date_today():
    t = caljal.today()
    g = caljal.to_gregorian(t)
    # tolerate a midnight rollover between the two calls
    assert date.today() - g in (timedelta(0), timedelta(days=1))


# ---------------------------------------------------------
# Accessors
# ---------------------------------------------------------

@pytest.mark.parametrize("jd,doy,dow,wom,q,dim", [
    (J(1403, 1, 1), 1, 5, 1, 1, 31),
    (J(1403, 1, 3), 3, 7, 1, 1, 31),
    (J(1403, 1, 4), 4, 1, 1, 1, 31),
    (J(1403, 4, 8), 101, 7, 2, 2, 31),
    (J(1403, 7, 1), 187, 2, 1, 3, 30),
    (J(1403, 12, 30), 366, 6, 5, 4, 30),
    (J(1404, 12, 29), 365, 7, 5, 4, 29),
])
def test_accessors(jd, doy, dow, wom, q, dim):
    assert caljal.day_of_year(jd) == doy
    assert caljal.day_of_week(jd) == dow
    assert caljal.week_of_month(jd) == wom
    assert caljal.quarter(jd) == q
    assert caljal.days_in_month(jd) == dim


def test_day_of_week_matches_datetime():
    # date.weekday(): Monday = 0; Jalali week: Saturday = 1
    for k in range(400):
        jd = caljal.add_days(J(1400, 1, 1), k)
        g = caljal.to_gregorian(jd)
        assert caljal.day_of_week(jd) == (g.weekday() + 2) % 7 + 1


# ---------------------------------------------------------
# Setters and arithmetic
# ---------------------------------------------------------

def test_with_year_clamps_esfand_30():
    assert caljal.with_year(J(1403, 12, 30), 1404) == (1404, 12, 29)
    assert caljal.with_year(J(1403, 12, 30), 1408) == (1408, 12, 30)
    assert caljal.add_years(J(1403, 12, 30), 1) == (1404, 12, 29)
    assert caljal.sub_years(J(1404, 6, 31), 4) == (1400, 6, 31)


def test_with_month_and_day_normalize():
    assert caljal.with_month(J(1403, 5, 10), 14) == (1404, 2, 10)
    assert caljal.with_day(J(1403, 1, 1), 0) == (1402, 12, 29)
    assert caljal.with_day(J(1403, 7, 1), 31) == (1403, 8, 1)


def test_add_and_sub():
    assert caljal.add_days(J(1402, 12, 29), 1) == (1403, 1, 1)
    assert caljal.sub_days(J(1403, 1, 1), 1) == (1402, 12, 29)
    assert caljal.add_days(J(1403, 1, 1), 366) == (1404, 1, 1)
    assert caljal.add_months(J(1403, 11, 15), 2) == (1404, 1, 15)
    assert caljal.sub_months(J(1403, 1, 15), 1) == (1402, 12, 15)
    assert caljal.sub_months(J(1403, 3, 15), 15) == (1401, 12, 15)


def test_add_days_matches_jdn():
    start = J(1399, 6, 20)
    base = caljal.jalali_to_julian_day(*start)
    for n in range(-800, 800, 13):
        assert caljal.jalali_to_julian_day(*caljal.add_days(start, n)) == base + n


# ---------------------------------------------------------
# Boundaries
# ---------------------------------------------------------

def test_boundaries():
    d = J(1403, 5, 17)
    assert caljal.start_of_month(d) == (1403, 5, 1)
    assert caljal.end_of_month(d) == (1403, 5, 31)
    assert caljal.end_of_month(J(1403, 12, 5)) == (1403, 12, 30)
    assert caljal.start_of_year(d) == (1403, 1, 1)
    assert caljal.end_of_year(d) == (1403, 12, 30)
    assert caljal.end_of_year(J(1404, 5, 5)) == (1404, 12, 29)
    assert caljal.start_of_decade(d) == (1400, 1, 1)
    assert caljal.end_of_decade(d) == (1409, 12, 29)
    assert caljal.start_of_century(d) == (1400, 1, 1)
    assert caljal.end_of_century(d) == (1499, 12, caljal.month_length(12, 1499))


# ---------------------------------------------------------
# Parsing / validation
# ---------------------------------------------------------

@pytest.mark.parametrize("text,expected", [
    ("1403-01-01", (1403, 1, 1)),
    ("1403/1/1", (1403, 1, 1)),
    ("  1395/12/30 ", (1395, 12, 30)),
    ("03-05-17", (1403, 5, 17)),
])
def test_parse_date(text, expected):
    assert caljal.parse_date(text, now=J(1403, 7, 7)) == expected


def test_parse_date_two_digit_year_uses_today():
    ref = caljal.today()
    assert caljal.parse_date("05-01-01").year == ref.year - ref.year % 100 + 5


@pytest.mark.parametrize("text,reason,max_", [
    ("1403-13-01", "month out of range", 12),
    ("1403-00-10", "month out of range", 12),
    ("1404-12-30", "day out of range", 29),
    ("1403-07-31", "day out of range", 30),
    ("1403-01-00", "day out of range", 31),
])
def test_parse_date_range_errors(text, reason, max_):
    with pytest.raises(ValidationError) as ei:
        caljal.parse_date(text)
    assert ei.value.reason == reason
    assert ei.value.max == max_
    assert str(ei.value) == f"{reason} (max {max_})"


@pytest.mark.parametrize("text", ["", "1403", "1403-01", "abc", "1403.01.01", "12345-01-01"])
def test_parse_date_bad_format(text):
    with pytest.raises(ValidationError) as ei:
        caljal.parse_date(text)
    assert ei.value.max is None
    # also usable as a plain ValueError
    assert isinstance(ei.value, ValueError)
    assert isinstance(ei.value, caljal.CaljalError)


def test_validate_date():
    assert caljal.validate_date(1403, 12, 30) == (1403, 12, 30)
    with pytest.raises(ValidationError):
        caljal.validate_date(1404, 12, 30)


# ---------------------------------------------------------
# Configuration
# ---------------------------------------------------------

@pytest.fixture
def restore_defaults():
    yield
    caljal.configure()


def test_configure_swaps_engines(restore_defaults):
    params = ArithmeticLeapParams(grand_cycle_beginning=1097)
    eng = ArithmeticLeapEngine(params)
    caljal.configure(arithmetic=params)
    # the break-point table is untouched, only years past it follow the new rule
    assert caljal.is_leap_year(1403)
    for y in range(3178, 3300):
        assert caljal.is_leap_year(y) == eng.is_leap(y)
    for y in range(3000, 3300, 37):
        assert caljal.normalize_date(y, 13, 1) == (y + 1, 1, 1)


def test_configure_with_explicit_params(restore_defaults):
    caljal.configure(astronomical=AstronomicalLeapParams(), arithmetic=ArithmeticLeapParams())
    assert caljal.jalali_to_gregorian(1403, 1, 1) == (2024, 3, 20)
