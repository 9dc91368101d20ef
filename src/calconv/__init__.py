"""calconv public API.

Keep this surface small: the per-calendar conversion functions plus the
name-keyed registry API re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_calendars,
    calendar_info,
    register_calendar,
    to_jdn,
    from_jdn,
    convert,
    from_date,
    to_date,
    is_leap_year,
    months_in_year,
    days_in_month,
    new_year,
    year_days,
)
from .calendars.gregorian import leap_gregorian, gregorian_to_jdn, jdn_to_gregorian
from .calendars.julian import leap_julian, julian_to_jdn, jdn_to_julian
from .calendars.hebrew import hebrew_leap, hebrew_to_jdn, jdn_to_hebrew
from .calendars.islamic import leap_islamic, islamic_to_jdn, jdn_to_islamic
from .calendars.persian import leap_persian, persian_to_jdn, jdn_to_persian
from .calendars.mayan import long_count_to_jdn, jdn_to_long_count, jdn_to_haab, jdn_to_tzolkin
from .calendars.indian import indian_civil_to_jdn, jdn_to_indian_civil
from .core.errors import CalconvError, ConversionUnavailableError, DateRangeError, UnknownCalendarError
from .core.time import weekday
from .core.types import CalendarDate, CalendarSpec, HaabDate, LongCount, TzolkinDate

__all__ = [
    "list_calendars",
    "calendar_info",
    "register_calendar",
    "to_jdn",
    "from_jdn",
    "convert",
    "from_date",
    "to_date",
    "is_leap_year",
    "months_in_year",
    "days_in_month",
    "new_year",
    "year_days",
    "weekday",
    "leap_gregorian",
    "gregorian_to_jdn",
    "jdn_to_gregorian",
    "leap_julian",
    "julian_to_jdn",
    "jdn_to_julian",
    "hebrew_leap",
    "hebrew_to_jdn",
    "jdn_to_hebrew",
    "leap_islamic",
    "islamic_to_jdn",
    "jdn_to_islamic",
    "leap_persian",
    "persian_to_jdn",
    "jdn_to_persian",
    "long_count_to_jdn",
    "jdn_to_long_count",
    "jdn_to_haab",
    "jdn_to_tzolkin",
    "indian_civil_to_jdn",
    "jdn_to_indian_civil",
    "CalendarDate",
    "LongCount",
    "HaabDate",
    "TzolkinDate",
    "CalendarSpec",
    "CalconvError",
    "UnknownCalendarError",
    "ConversionUnavailableError",
    "DateRangeError",
]
