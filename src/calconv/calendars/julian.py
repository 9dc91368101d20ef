"""
calconv.calendars.julian
------------------------
Proleptic Julian calendar with historical year numbering: there is no year 0,
year -1 (1 BCE) is followed by year 1 (1 CE).

Algorithm as given in Meeus, Astronomical Algorithms, chapter 7.
"""

from __future__ import annotations

import math

from ..core.errors import DateRangeError
from ..core.time import day_start
from ..core.types import CalendarDate

JULIAN_EPOCH = 1721423.5

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def leap_julian(year) -> bool:
    # 1 BCE, 5 BCE, ... are leap years
    return year % 4 == (0 if year > 0 else 3)


def julian_month_days(year, month) -> int:
    if not 1 <= month <= 12:
        raise DateRangeError(f"julian: month={month} must be in 1..12")
    if month == 2 and leap_julian(year):
        return 29
    return _MONTH_DAYS[int(month) - 1]


def julian_to_jdn(year, month, day) -> float:
    # BCE years to the zero-based notation used below
    if year < 1:
        year += 1

    if month <= 2:
        year -= 1
        month += 12

    return (
        math.floor(365.25 * (year + 4716))
        + math.floor(30.6001 * (month + 1))
        + day
        - 1524.5
    )


def jdn_to_julian(jd: float) -> CalendarDate:
    z = math.floor(day_start(jd) + 0.5)

    b = z + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)

    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715
    day = b - d - math.floor(30.6001 * e)

    # zero-based years back to 1 BCE / 1 CE numbering
    if year < 1:
        year -= 1

    return CalendarDate(int(year), int(month), int(day))
