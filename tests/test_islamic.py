# tests/test_islamic.py

import random

from calconv.calendars.gregorian import gregorian_to_jdn
from calconv.calendars.islamic import (
    ISLAMIC_EPOCH,
    islamic_month_days,
    islamic_to_jdn,
    jdn_to_islamic,
    leap_islamic,
)


def test_epoch():
    """1 Muharram AH 1 is 16 July 622 CE (Julian)."""
    assert islamic_to_jdn(1, 1, 1) == ISLAMIC_EPOCH == 1948439.5
    assert jdn_to_islamic(ISLAMIC_EPOCH) == (1, 1, 1)

def test_known_dates():
    assert jdn_to_islamic(gregorian_to_jdn(2000, 1, 1)) == (1420, 9, 24)
    # two new years in Gregorian 2008
    assert islamic_to_jdn(1429, 1, 1) == gregorian_to_jdn(2008, 1, 10)
    assert islamic_to_jdn(1430, 1, 1) == gregorian_to_jdn(2008, 12, 29)

def test_leap_years_in_cycle():
    assert [y for y in range(1, 31) if leap_islamic(y)] == [2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29]
    # the pattern repeats every 30 years
    for y in range(1, 31):
        assert leap_islamic(y) == leap_islamic(y + 30 * 47)

def test_month_lengths():
    assert [islamic_month_days(1, m) for m in range(1, 13)] == [30, 29] * 6
    assert islamic_month_days(2, 12) == 30

def test_year_lengths_match_month_lengths():
    for y in range(1, 1500):
        n = islamic_to_jdn(y + 1, 1, 1) - islamic_to_jdn(y, 1, 1)
        assert n == (355 if leap_islamic(y) else 354)
        assert n == sum(islamic_month_days(y, m) for m in range(1, 13))

def test_last_day_of_leap_year():
    """The month estimate reaches 13 on 30 Dhu al-Hijja; it must stay in month 12."""
    for y in (2, 5, 1420, 1445):
        assert leap_islamic(y)
        jd = islamic_to_jdn(y, 12, 30)
        assert jdn_to_islamic(jd) == (y, 12, 30)
        assert jdn_to_islamic(jd + 1) == (y + 1, 1, 1)

def test_roundtrip_random():
    random.seed(30)
    for _ in range(5000):
        y = random.randint(1, 3000)
        m = random.randint(1, 12)
        d = random.randint(1, islamic_month_days(y, m))
        assert jdn_to_islamic(islamic_to_jdn(y, m, d)) == (y, m, d)

def test_every_day_of_a_cycle():
    jd = islamic_to_jdn(1411, 1, 1)
    for y in range(1411, 1441):
        for m in range(1, 13):
            for d in range(1, islamic_month_days(y, m) + 1):
                assert jdn_to_islamic(jd) == (y, m, d)
                jd += 1
