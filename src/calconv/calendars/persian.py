"""
calconv.calendars.persian
-------------------------
Arithmetic Solar Hijri calendar on the 2820-year grand cycle
(683 leap years per cycle, 1029983 days). Months 1..6 have 31 days,
7..11 have 30, Esfand has 29 or 30. There is no year 0.

Years are counted inside the cycle from year 475, the first year of the
cycle that contains the epoch.
"""

from __future__ import annotations

import math

from ..core.errors import DateRangeError
from ..core.time import day_start
from ..core.types import CalendarDate

PERSIAN_EPOCH = 1948320.5

CYCLE_YEARS = 2820
CYCLE_DAYS = 1029983


def leap_persian(year) -> bool:
    return ((((year - (474 if year > 0 else 473)) % 2820) + 474 + 38) * 682) % 2816 < 682


def persian_month_days(year, month) -> int:
    if not 1 <= month <= 12:
        raise DateRangeError(f"persian: month={month} must be in 1..12")
    if month <= 6:
        return 31
    if month <= 11:
        return 30
    return 30 if leap_persian(year) else 29


def persian_to_jdn(year, month, day) -> float:
    epbase = year - (474 if year >= 0 else 473)
    epyear = epbase % 2820 + 474

    return (
        day
        + ((month - 1) * 31 if month <= 7 else (month - 1) * 30 + 6)
        + (epyear * 682 - 110) // 2816
        + (epyear - 1) * 365
        + (epbase // 2820) * CYCLE_DAYS
        + (PERSIAN_EPOCH - 1)
    )


def persian_cycle_year(cyear) -> int:
    """1-based year within the grand cycle holding day `cyear` (0-based) of the cycle."""
    # the formula below is off by one on the very last day of the cycle
    if cyear == CYCLE_DAYS - 1:
        return CYCLE_YEARS
    aux1, aux2 = divmod(cyear, 366)
    return int((aux1 * 2134 + aux2 * 2816 + 2815) // 1028522 + aux1 + 1)


def jdn_to_persian(jd: float) -> CalendarDate:
    jd = day_start(jd)

    depoch = jd - persian_to_jdn(475, 1, 1)
    cycle, cyear = divmod(depoch, CYCLE_DAYS)
    ycycle = persian_cycle_year(cyear)

    year = ycycle + cycle * CYCLE_YEARS + 474
    if year <= 0:
        year -= 1

    yday = jd - persian_to_jdn(year, 1, 1) + 1
    month = math.ceil(yday / 31) if yday <= 186 else math.ceil((yday - 6) / 30)
    day = jd - persian_to_jdn(year, month, 1) + 1
    return CalendarDate(int(year), int(month), int(day))
