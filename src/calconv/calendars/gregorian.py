"""
calconv.calendars.gregorian
---------------------------
Proleptic Gregorian calendar. Years are astronomical (year 0 exists).

JDN values are the half-integer Julian Day of local midnight, e.g.
2000-01-01 -> 2451544.5.
"""

from __future__ import annotations

import math

from ..core.errors import DateRangeError
from ..core.time import day_start
from ..core.types import CalendarDate

GREGORIAN_EPOCH = 1721425.5

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def leap_gregorian(year) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def gregorian_month_days(year, month) -> int:
    if not 1 <= month <= 12:
        raise DateRangeError(f"gregorian: month={month} must be in 1..12")
    if month == 2 and leap_gregorian(year):
        return 29
    return _MONTH_DAYS[int(month) - 1]


def gregorian_to_jdn(year, month, day) -> float:
    y = year - 1
    if month <= 2:
        c = 0
    else:
        c = -1 if leap_gregorian(year) else -2
    return (
        (GREGORIAN_EPOCH - 1)
        + 365 * y + y // 4 - y // 100 + y // 400
        + math.floor((367 * month - 362) / 12 + c + day)
    )


def jdn_to_gregorian(jd: float) -> CalendarDate:
    wjd = day_start(jd)
    depoch = wjd - GREGORIAN_EPOCH

    quadricent, dqc = divmod(depoch, 146097)
    cent, dcent = divmod(dqc, 36524)
    quad, dquad = divmod(dcent, 1461)
    yindex = dquad // 365

    year = quadricent * 400 + cent * 100 + quad * 4 + yindex
    # cent == 4 / yindex == 4 only on 31 December of a 400- or 4-year cycle's leap year
    if not (cent == 4 or yindex == 4):
        year += 1

    yearday = wjd - gregorian_to_jdn(year, 1, 1)
    if wjd < gregorian_to_jdn(year, 3, 1):
        leapadj = 0
    else:
        leapadj = 1 if leap_gregorian(year) else 2
    month = ((yearday + leapadj) * 12 + 373) // 367
    day = wjd - gregorian_to_jdn(year, month, 1) + 1
    return CalendarDate(int(year), int(month), int(day))
