# tests/test_diagnostics.py

import pytest

from calconv.calendars.gregorian import gregorian_to_jdn
from calconv.diagnostics import new_years_table, round_trip


def test_round_trip_all_calendars(capsys):
    assert round_trip.main(["--N", "300", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    for cal in ("gregorian", "julian", "hebrew", "islamic", "persian", "long_count", "indian_civil"):
        assert f"Testing {cal} ..." in out
    # no inverse, so not round-tripped
    assert "Testing haab" not in out

def test_round_trip_parse_calendars():
    assert round_trip.parse_calendars("hebrew, islamic") == ["hebrew", "islamic"]
    assert "tzolkin" not in round_trip.parse_calendars("all")

def test_roundtrip_test_counts_no_failures():
    lo = int(gregorian_to_jdn(-500, 1, 1))
    hi = int(gregorian_to_jdn(2500, 1, 1))
    assert round_trip.roundtrip_test("persian", 500, lo, hi, 9, max_failures=3) == 0

def test_new_years_in():
    assert new_years_table.new_years_in("hebrew", 2023) == [(5784, gregorian_to_jdn(2023, 9, 16))]
    # two Islamic new years in 2008
    assert new_years_table.new_years_in("islamic", 2008) == [
        (1429, gregorian_to_jdn(2008, 1, 10)),
        (1430, gregorian_to_jdn(2008, 12, 29)),
    ]
    assert new_years_table.new_years_in("persian", 2024) == [(1403, gregorian_to_jdn(2024, 3, 20))]

def test_new_years_parse_calendars():
    assert new_years_table.parse_calendars("Saka=indian_civil,hebrew") == [
        ("Saka", "indian_civil"),
        ("Hebrew", "hebrew"),
    ]

def test_new_years_main(capsys):
    assert new_years_table.main(["--from-year", "2023", "--to-year", "2024", "--years"]) == 0
    out = capsys.readouterr().out
    assert "09-16 (5784)" in out
    assert "03-20 (1403)" in out

def test_year_lengths_histogram(capsys):
    pytest.importorskip("numpy")
    from calconv.diagnostics import year_lengths

    np = year_lengths._need_numpy()
    years, lengths = year_lengths.build_lengths(np, "persian", year_lengths.year_range("persian", 1, 2820))
    s = year_lengths.summarize(np, "persian", years, lengths)
    assert s["histogram"] == {365: 2820 - 683, 366: 683}
    assert s["total_days"] == 1029983

    years, lengths = year_lengths.build_lengths(np, "hebrew", year_lengths.year_range("hebrew", 5760, 5784))
    assert set(lengths.tolist()) <= {353, 354, 355, 383, 384, 385}

def test_year_lengths_skips_year_zero():
    pytest.importorskip("numpy")
    from calconv.diagnostics import year_lengths

    assert 0 not in year_lengths.year_range("julian", -3, 3)
    assert 0 in year_lengths.year_range("gregorian", -3, 3)

    np = year_lengths._need_numpy()
    _, lengths = year_lengths.build_lengths(np, "julian", year_lengths.year_range("julian", -5, -1))
    # 5 BCE and 1 BCE are Julian leap years
    assert lengths.tolist() == [366, 365, 365, 365, 366]

def test_year_lengths_main(capsys):
    pytest.importorskip("numpy")
    from calconv.diagnostics import year_lengths

    assert year_lengths.main(["--calendars", "islamic", "--start-year", "1", "--end-year", "30"]) == 0
    out = capsys.readouterr().out
    assert "354:19" in out
    assert "355:11" in out

def test_year_lengths_rejects_cycle_only_calendars():
    pytest.importorskip("numpy")
    from calconv.diagnostics import year_lengths

    with pytest.raises(SystemExit):
        year_lengths.main(["--calendars", "tzolkin", "--start-year", "1", "--end-year", "2"])

def test_new_years_in_skips_missing_year_zero():
    # Persian -1 is followed by 1; year 0 would repeat the same day
    assert new_years_table.new_years_in("persian", 621) == [(-1, 1947954.5)]
    assert new_years_table.new_years_in("julian", 0) == [(1, 1721423.5)]
    assert new_years_table.new_years_in("gregorian", 0) == [(0, gregorian_to_jdn(0, 1, 1))]

def test_new_years_main_around_year_zero(capsys):
    assert new_years_table.main(["--from-year", "621", "--to-year", "621", "--calendars", "persian", "--years"]) == 0
    out = capsys.readouterr().out
    assert "(-1)" in out
    assert "(0)" not in out
