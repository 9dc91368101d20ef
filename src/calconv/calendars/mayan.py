"""
calconv.calendars.mayan
-----------------------
Three views of the same day count since the Long Count epoch
13.0.0.0.0 4 Ahau 8 Cumku (GMT correlation, JDN 584282.5):

- Long Count: mixed-radix 144000 / 7200 / 360 / 20 / 1 day numeral.
- Haab: 18 months of 20 days (day 0..19) and the five-day Wayeb as month 19.
- Tzolkin: independent 13-number and 20-name cycles.

Only the Long Count has a forward conversion; Haab and Tzolkin dates repeat
and do not identify a day on their own.
"""

from __future__ import annotations

from ..core.time import amod, day_start
from ..core.types import HaabDate, LongCount, TzolkinDate

MAYAN_COUNT_EPOCH = 584282.5

# Haab position of the epoch: 8 Cumku, Cumku being the 18th month
_HAAB_EPOCH_DAY = 8 + (18 - 1) * 20
# Tzolkin position of the epoch: 4 Ahau, Ahau being the 20th name
_TZOLKIN_EPOCH_NUMBER = 4
_TZOLKIN_EPOCH_NAME = 20


def _lcount(jd: float) -> float:
    return day_start(jd) - MAYAN_COUNT_EPOCH


def long_count_to_jdn(baktun, katun, tun, uinal, kin) -> float:
    return (
        MAYAN_COUNT_EPOCH
        + baktun * 144000
        + katun * 7200
        + tun * 360
        + uinal * 20
        + kin
    )


def jdn_to_long_count(jd: float) -> LongCount:
    d = _lcount(jd)
    baktun, d = divmod(d, 144000)
    katun, d = divmod(d, 7200)
    tun, d = divmod(d, 360)
    uinal, kin = divmod(d, 20)
    return LongCount(int(baktun), int(katun), int(tun), int(uinal), int(kin))


def jdn_to_haab(jd: float) -> HaabDate:
    day = (_lcount(jd) + _HAAB_EPOCH_DAY) % 365
    return HaabDate(int(day // 20 + 1), int(day % 20))


def jdn_to_tzolkin(jd: float) -> TzolkinDate:
    lcount = _lcount(jd)
    return TzolkinDate(
        int(amod(lcount + _TZOLKIN_EPOCH_NUMBER, 13)),
        int(amod(lcount + _TZOLKIN_EPOCH_NAME, 20)),
    )
