# tests/test_indian.py

import random

import pytest

from calconv.calendars.gregorian import gregorian_to_jdn, leap_gregorian
from calconv.calendars.indian import (
    indian_civil_month_days,
    indian_civil_to_jdn,
    jdn_to_indian_civil,
)


@pytest.mark.parametrize(
    "saka, gregorian",
    [
        ((1921, 10, 11), (2000, 1, 1)),
        ((1945, 10, 1), (2023, 12, 22)),    # 1 Pausa
        ((1945, 12, 30), (2024, 3, 20)),    # last day before a leap-year new year
        ((1946, 1, 1), (2024, 3, 21)),
        ((1944, 12, 30), (2023, 3, 21)),
        ((1945, 1, 1), (2023, 3, 22)),
    ],
)
def test_known_dates(saka, gregorian):
    jd = gregorian_to_jdn(*gregorian)
    assert indian_civil_to_jdn(*saka) == jd
    assert jdn_to_indian_civil(jd) == saka

def test_vaisakha_always_starts_on_21_april():
    for y in range(1900, 1960):
        assert indian_civil_to_jdn(y, 2, 1) == gregorian_to_jdn(y + 78, 4, 21)

def test_caitra_length():
    assert indian_civil_month_days(1946, 1) == 31   # 2024 is a Gregorian leap year
    assert indian_civil_month_days(1945, 1) == 30
    assert [indian_civil_month_days(1945, m) for m in range(2, 13)] == [31] * 5 + [30] * 6

def test_year_lengths():
    for y in range(1, 2500):
        n = indian_civil_to_jdn(y + 1, 1, 1) - indian_civil_to_jdn(y, 1, 1)
        assert n == (366 if leap_gregorian(y + 78) else 365)
        assert n == sum(indian_civil_month_days(y, m) for m in range(1, 13))

def test_every_day_across_gregorian_years():
    jd = indian_civil_to_jdn(1940, 1, 1)
    for y in range(1940, 1950):
        for m in range(1, 13):
            for d in range(1, indian_civil_month_days(y, m) + 1):
                assert jdn_to_indian_civil(jd) == (y, m, d)
                jd += 1

def test_roundtrip_random():
    random.seed(78)
    for _ in range(5000):
        y = random.randint(-1000, 3000)
        m = random.randint(1, 12)
        d = random.randint(1, indian_civil_month_days(y, m))
        assert jdn_to_indian_civil(indian_civil_to_jdn(y, m, d)) == (y, m, d)
