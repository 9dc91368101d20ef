"""
calconv.calendars.indian
------------------------
Indian Civil (Saka era) calendar, defined against the Gregorian calendar:
1 Caitra falls on 22 March, or 21 March in Gregorian leap years, and Saka
year Y starts in Gregorian year Y + 78.

Month lengths: Caitra 30 (31 in Gregorian leap years), then five months of
31 days and six of 30. Month numbers outside 1..12 are not rejected.
"""

from __future__ import annotations

from ..core.errors import DateRangeError
from ..core.time import day_start
from ..core.types import CalendarDate
from .gregorian import gregorian_to_jdn, jdn_to_gregorian, leap_gregorian

SAKA_OFFSET = 78
# day of the Gregorian year (0-based, leap or not) on which 1 Caitra falls
_NEW_YEAR_YDAY = 80


def indian_civil_month_days(year, month) -> int:
    if not 1 <= month <= 12:
        raise DateRangeError(f"indian_civil: month={month} must be in 1..12")
    if month == 1:
        return 31 if leap_gregorian(year + SAKA_OFFSET) else 30
    return 31 if month <= 6 else 30


def indian_civil_to_jdn(year, month, day) -> float:
    gyear = year + SAKA_OFFSET
    leap = leap_gregorian(gyear)
    start = gregorian_to_jdn(gyear, 3, 21 if leap else 22)
    caitra = 31 if leap else 30

    if month == 1:
        return start + (day - 1)

    jd = start + caitra
    jd += min(month - 2, 5) * 31
    if month >= 8:
        jd += (month - 7) * 30
    return jd + (day - 1)


def jdn_to_indian_civil(jd: float) -> CalendarDate:
    jd = day_start(jd)
    gyear = jdn_to_gregorian(jd).year
    leap = leap_gregorian(gyear)
    year = gyear - SAKA_OFFSET
    yday = jd - gregorian_to_jdn(gyear, 1, 1)
    caitra = 31 if leap else 30

    if yday < _NEW_YEAR_YDAY:
        # tail of the preceding Saka year
        year -= 1
        yday += caitra + 31 * 5 + 30 * 3 + 10 + _NEW_YEAR_YDAY

    yday -= _NEW_YEAR_YDAY
    if yday < caitra:
        month = 1
        day = yday + 1
    else:
        mday = yday - caitra
        if mday < 31 * 5:
            month = mday // 31 + 2
            day = mday % 31 + 1
        else:
            mday -= 31 * 5
            month = mday // 30 + 7
            day = mday % 30 + 1

    return CalendarDate(int(year), int(month), int(day))
