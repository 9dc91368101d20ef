"""
calconv.calendars.specs
-----------------------
Registry payloads: one CalendarSpec per supported calendar, keyed by the
name used throughout the API and the CLI.
"""

from __future__ import annotations

from typing import Dict

from ..core.types import CalendarSpec
from .gregorian import (
    GREGORIAN_EPOCH,
    gregorian_month_days,
    gregorian_to_jdn,
    jdn_to_gregorian,
    leap_gregorian,
)
from .hebrew import (
    HEBREW_EPOCH,
    hebrew_leap,
    hebrew_month_days,
    hebrew_to_jdn,
    hebrew_year_months,
    jdn_to_hebrew,
)
from .indian import indian_civil_month_days, indian_civil_to_jdn, jdn_to_indian_civil
from .islamic import ISLAMIC_EPOCH, islamic_month_days, islamic_to_jdn, jdn_to_islamic, leap_islamic
from .julian import JULIAN_EPOCH, jdn_to_julian, julian_month_days, julian_to_jdn, leap_julian
from .mayan import MAYAN_COUNT_EPOCH, jdn_to_haab, jdn_to_long_count, jdn_to_tzolkin, long_count_to_jdn
from .persian import PERSIAN_EPOCH, jdn_to_persian, leap_persian, persian_month_days, persian_to_jdn

YMD = ("year", "month", "day")


def _twelve(year: int) -> int:
    return 12


ALL_SPECS: Dict[str, CalendarSpec] = {
    "gregorian": CalendarSpec(
        name="gregorian",
        fields=YMD,
        epoch=GREGORIAN_EPOCH,
        to_jdn=gregorian_to_jdn,
        from_jdn=jdn_to_gregorian,
        is_leap=leap_gregorian,
        month_days=gregorian_month_days,
        months_in_year=_twelve,
        meta={"year_zero": True},
    ),
    "julian": CalendarSpec(
        name="julian",
        fields=YMD,
        epoch=JULIAN_EPOCH,
        to_jdn=julian_to_jdn,
        from_jdn=jdn_to_julian,
        is_leap=leap_julian,
        month_days=julian_month_days,
        months_in_year=_twelve,
        meta={"year_zero": False},
    ),
    "hebrew": CalendarSpec(
        name="hebrew",
        fields=YMD,
        epoch=HEBREW_EPOCH,
        to_jdn=hebrew_to_jdn,
        from_jdn=jdn_to_hebrew,
        is_leap=hebrew_leap,
        month_days=hebrew_month_days,
        months_in_year=hebrew_year_months,
        new_year_month=7,
        meta={"year_zero": True, "leap_cycle_years": 19},
    ),
    "islamic": CalendarSpec(
        name="islamic",
        fields=YMD,
        epoch=ISLAMIC_EPOCH,
        to_jdn=islamic_to_jdn,
        from_jdn=jdn_to_islamic,
        is_leap=leap_islamic,
        month_days=islamic_month_days,
        months_in_year=_twelve,
        meta={"year_zero": True, "leap_cycle_years": 30},
    ),
    "persian": CalendarSpec(
        name="persian",
        fields=YMD,
        epoch=PERSIAN_EPOCH,
        to_jdn=persian_to_jdn,
        from_jdn=jdn_to_persian,
        is_leap=leap_persian,
        month_days=persian_month_days,
        months_in_year=_twelve,
        meta={"year_zero": False, "leap_cycle_years": 2820},
    ),
    "long_count": CalendarSpec(
        name="long_count",
        fields=("baktun", "katun", "tun", "uinal", "kin"),
        epoch=MAYAN_COUNT_EPOCH,
        to_jdn=long_count_to_jdn,
        from_jdn=jdn_to_long_count,
    ),
    "haab": CalendarSpec(
        name="haab",
        fields=("month", "day"),
        epoch=MAYAN_COUNT_EPOCH,
        from_jdn=jdn_to_haab,
        meta={"cycle_days": 365},
    ),
    "tzolkin": CalendarSpec(
        name="tzolkin",
        fields=("number", "name"),
        epoch=MAYAN_COUNT_EPOCH,
        from_jdn=jdn_to_tzolkin,
        meta={"cycle_days": 260},
    ),
    "indian_civil": CalendarSpec(
        name="indian_civil",
        fields=YMD,
        # 1 Caitra, Saka 1 (22 March 79 CE)
        epoch=indian_civil_to_jdn(1, 1, 1),
        to_jdn=indian_civil_to_jdn,
        from_jdn=jdn_to_indian_civil,
        is_leap=lambda year: leap_gregorian(year + 78),
        month_days=indian_civil_month_days,
        months_in_year=_twelve,
        meta={"year_zero": True, "anchored_on": "gregorian"},
    ),
}
