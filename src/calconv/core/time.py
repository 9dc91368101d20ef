from __future__ import annotations
from datetime import date
import math


# JDN of 0001-01-01 (proleptic Gregorian) at noon; date.toordinal() is 1 there.
_ORDINAL_OFFSET = 1721425


def day_start(jd: float) -> float:
    """Midnight JDN (x.5) of the civil day containing the instant jd."""
    return math.floor(jd - 0.5) + 0.5


def amod(a, b):
    """Adjusted modulus: like a % b but in 1..b instead of 0..b-1."""
    return (a - 1) % b + 1


def weekday(jd: float) -> int:
    """Day of week of the civil day containing jd, 0 = Sunday."""
    return int(math.floor(jd + 1.5) % 7)


def date_to_jdn(d: date) -> float:
    """JDN at the midnight starting a (proleptic Gregorian) datetime.date."""
    return d.toordinal() + _ORDINAL_OFFSET - 0.5


def jdn_to_date(jd: float) -> date:
    """Inverse of date_to_jdn; limited to the years datetime.date supports (1..9999)."""
    return date.fromordinal(int(day_start(jd) + 0.5) - _ORDINAL_OFFSET)
