# tests/test_diagnostics.py

import pytest

from caljal.diagnostics import leap_years, nowruz_scatter, nowruz_table, pretty_month, round_trip


def test_nowruz_row():
    row = nowruz_table.nowruz_row(1403)
    assert row == {
        "year": 1403,
        "gregorian": (2024, 3, 20),
        "march_day": 20,
        "leap": True,
        "leap_offset": 0,
    }
    assert nowruz_table.fmt_gregorian((2024, 3, 20)) == "2024-03-20"
    assert nowruz_table.fmt_gregorian((-5, 3, 20)) == "-0005-03-20"


def test_leap_listing_and_gaps():
    years = leap_years.leap_years(1390, 1410)
    assert years == [1391, 1395, 1399, 1403, 1408]
    assert leap_years.gap_histogram(years) == {4: 3, 5: 1}
    assert leap_years.arithmetic_density() == 662


def test_month_weeks_layout():
    weeks = pretty_month.month_weeks(1403, 1)
    # 1 Farvardin 1403 is a Wednesday: four blank cells before it
    assert [c[0].strip() for c in weeks[0]] == ["", "", "", "", "1", "2", "3"]
    assert weeks[0][4][1].strip() == "03-20"
    assert all(len(wk) == 7 for wk in weeks)
    days = [c[0].strip() for wk in weeks for c in wk if c[0].strip()]
    assert days == [str(d) for d in range(1, 32)]


def test_round_trip_helpers():
    assert round_trip.check_year(-100) == 0
    assert round_trip.check_year(3200) == 0
    assert round_trip.roundtrip_test(300, -3000, 3000, 1, max_failures=1) == 0


def test_nowruz_day_of_year():
    # 2024 is a Gregorian leap year: March 20 is day 80
    assert nowruz_scatter.nowruz_day_of_year(1403) == 80
    assert nowruz_scatter.nowruz_day_of_year(1402) == 80


def test_build_series():
    np = pytest.importorskip("numpy")
    years, doy, leap = nowruz_scatter.build_series(np, 1399, 1404)
    assert list(years) == [1399, 1400, 1401, 1402, 1403, 1404]
    assert list(leap) == [True, False, False, False, True, False]
    assert doy[4] == 80.0
