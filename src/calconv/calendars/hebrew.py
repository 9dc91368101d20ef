"""
calconv.calendars.hebrew
------------------------
Arithmetic Hebrew calendar.

Months are numbered from Nisan: Nisan=1 ... Elul=6, Tishri=7 ... Adar=12
(Adar I in leap years), Adar II=13. The year number changes on 1 Tishri.

Dates are located through a month-count day function rather than by summing
month lengths. For a month m, m1 = m - 7 is its offset from Tishri of year
a1 = year - floor(m1 / 10); Nisan..Elul (m1 = -6..-1) are counted backwards
from Tishri of the following year, so every m1 lies in -6..6 around the
Tishri it is anchored to.

All arithmetic is integer with floor semantics (// and %), which matters for
the years before the epoch.
"""

from __future__ import annotations

import math

from ..core.errors import DateRangeError
from ..core.time import day_start
from ..core.types import CalendarDate

HEBREW_EPOCH = 347995.5

# JDN of 1 Tishri AM 1 is _FORWARD_OFFSET + 1 (Monday, 7 October 3761 BCE Julian)
_FORWARD_OFFSET = 347996.5

_PARTS_PER_DAY = 25920
_MONTH_EXCESS_PARTS = 13753   # 29d 12h 793p minus 29 whole days, in parts
_MOLAD_OFFSET_PARTS = 12084   # molad BaHaRaD shifted by 18h for the noon rule
_MEAN_MONTH_PARTS = 765433


# ============================================================
# Month-count helpers (day indices, 1 Tishri AM 1 is day 0)
# ============================================================

def _molad_day(year: int) -> int:
    """Day of the molad of Tishri: elapsed months scaled to days and parts."""
    months = (235 * year - 234) // 19
    w, u = divmod(months, _PARTS_PER_DAY)
    return (
        29 * months
        + _MONTH_EXCESS_PARTS * w
        + (_MONTH_EXCESS_PARTS * u + _MOLAD_OFFSET_PARTS) // _PARTS_PER_DAY
    )


def _postponed_molad_day(year: int) -> int:
    """Molad day pushed by one when it falls on a disallowed weekday."""
    d = _molad_day(year)
    return d + ((d % 7) * 6 // 7) % 2


def _provisional_length(year: int) -> int:
    return _postponed_molad_day(year + 1) - _postponed_molad_day(year)


def _new_year_day(year: int) -> int:
    """Day of 1 Tishri, with the 356-day and 382-day year deferrals applied.

    A 356-day year moves two days (Tuesday to Thursday), since one day would
    land on a Wednesday. A year following a 382-day year moves one day
    (Monday to Tuesday).
    """
    return (
        _postponed_molad_day(year)
        + 2 * (((_provisional_length(year) + 19) // 15) % 2)
        + ((_provisional_length(year - 1) + 7) // 15) % 2
    )


def _month_start_day(year: int, m1: int) -> int:
    """Day index of the first of month offset m1 around 1 Tishri of `year`.

    Month lengths alternate 30/29 from Tishri; Heshvan gains a day in complete
    years (355/385 days) and Kislev loses one in deficient years (353/383).
    """
    length = _new_year_day(year + 1) - _new_year_day(year)
    complete = ((length + 1) // 2) % 3
    deficient = ((385 - length) // 2) % 3
    return (
        _new_year_day(year)
        + (384 * m1 + 10) // 13
        + complete * ((m1 + 10) // 12)
        - deficient * ((m1 + 9) // 12)
    )


def _label_from_month_count(u: int):
    """(anchor year, m1) of the u-th month since the epoch."""
    a, e = divmod(19 * u + 366, 235)
    return a, e // 19 - 6


# ============================================================
# Leap years and month lengths
# ============================================================

def hebrew_leap(year) -> bool:
    return (7 * year + 1) % 19 < 7


def hebrew_year_months(year) -> int:
    return 13 if hebrew_leap(year) else 12


def hebrew_year_days(year) -> int:
    return int(hebrew_to_jdn(year + 1, 7, 1) - hebrew_to_jdn(year, 7, 1))


def hebrew_month_days(year, month) -> int:
    n = hebrew_year_months(year)
    if not 1 <= month <= n:
        raise DateRangeError(f"hebrew: month={month} must be in 1..{n} for year {year}")
    if month in (2, 4, 6, 10, 13):
        return 29
    if month == 12 and not hebrew_leap(year):
        return 29
    # Heshvan is long only in complete years, Kislev short only in deficient ones
    if month == 8 and hebrew_year_days(year) % 10 != 5:
        return 29
    if month == 9 and hebrew_year_days(year) % 10 == 3:
        return 29
    return 30


# ============================================================
# Conversions
# ============================================================

def hebrew_to_jdn(year, month, day) -> float:
    m1 = int(month) - 7
    a1 = int(year) - m1 // 10
    return _month_start_day(a1, m1) + day + _FORWARD_OFFSET


def jdn_to_hebrew(jd: float) -> CalendarDate:
    s = int(math.floor(day_start(jd))) - 347997

    # first estimate of the month count: 1144 months ~ 33783 days
    w, e = divmod(s, 33783)
    u3 = 1144 * w + (8 * w + _PARTS_PER_DAY * e + 13835) // _MEAN_MONTH_PARTS + 1

    # two correction passes; one is not enough near 19-year cycle boundaries
    a, m1 = _label_from_month_count(u3)
    d14 = s - _month_start_day(a, m1)
    u5 = u3 + d14 // 64

    a, m1 = _label_from_month_count(u5)
    d15 = s - _month_start_day(a, m1)
    u7 = u5 + d15 // 64

    a, m1 = _label_from_month_count(u7)
    d0 = s - _month_start_day(a, m1)

    return CalendarDate(a + m1 // 10, m1 + 7, d0 + 1)
