"""
calconv.calendars.islamic
-------------------------
Arithmetic (tabular) Islamic calendar: 30-year cycle with 11 leap years,
odd months of 30 days, even months of 29, Dhu al-Hijja 30 days in leap years.
"""

from __future__ import annotations

import math

from ..core.errors import DateRangeError
from ..core.time import day_start
from ..core.types import CalendarDate

ISLAMIC_EPOCH = 1948439.5


def leap_islamic(year) -> bool:
    return (year * 11 + 14) % 30 < 11


def islamic_month_days(year, month) -> int:
    if not 1 <= month <= 12:
        raise DateRangeError(f"islamic: month={month} must be in 1..12")
    if month == 12 and leap_islamic(year):
        return 30
    return 30 if month % 2 == 1 else 29


def islamic_to_jdn(year, month, day) -> float:
    return (
        day
        + math.ceil((month - 1) * 29.5)
        + (year - 1) * 354
        + (year * 11 + 3) // 30
        + ISLAMIC_EPOCH
        - 1
    )


def jdn_to_islamic(jd: float) -> CalendarDate:
    jd = day_start(jd)
    year = math.floor(((jd - ISLAMIC_EPOCH) * 30 + 10646) / 10631)
    # the estimate overshoots to 13 on the last day of a leap year
    month = min(12, math.ceil((jd - (islamic_to_jdn(year, 1, 1) + 29)) / 29.5) + 1)
    day = jd - islamic_to_jdn(year, month, 1) + 1
    return CalendarDate(int(year), int(month), int(day))
