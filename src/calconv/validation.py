"""
calconv.validation
------------------
Optional range checks used by the API in strict mode. The conversion
functions themselves never validate; these checks only decide whether to
raise, they never change a converted value.
"""

from __future__ import annotations

from typing import Sequence

from .core.errors import DateRangeError
from .core.types import CalendarSpec

# digit ranges of the Long Count below the baktun (kin, uinal, tun, katun)
_LONG_COUNT_LIMITS = {"katun": 20, "tun": 20, "uinal": 18, "kin": 20}


def _is_integral(x) -> bool:
    if isinstance(x, bool):
        return False
    if isinstance(x, int):
        return True
    return isinstance(x, float) and x.is_integer()


def check_arity(spec: CalendarSpec, fields: Sequence) -> None:
    if len(fields) != len(spec.fields):
        raise DateRangeError(
            f"{spec.name} takes {len(spec.fields)} fields {spec.fields}, got {len(fields)}"
        )


def validate(spec: CalendarSpec, fields: Sequence) -> None:
    """Raise DateRangeError unless `fields` name an existing day of `spec`."""
    check_arity(spec, fields)
    for name, value in zip(spec.fields, fields):
        if not _is_integral(value):
            raise DateRangeError(f"{spec.name}: {name}={value!r} is not an integer")

    if spec.name == "long_count":
        for name, value in zip(spec.fields, fields):
            lim = _LONG_COUNT_LIMITS.get(name)
            if lim is not None and not (0 <= value < lim):
                raise DateRangeError(f"long_count: {name}={value} must be in 0..{lim - 1}")
        return

    if spec.months_in_year is None or spec.month_days is None:
        return

    year, month, day = fields
    if spec.meta.get("year_zero") is False and year == 0:
        raise DateRangeError(f"{spec.name}: there is no year 0")

    n_months = spec.months_in_year(year)
    if not (1 <= month <= n_months):
        raise DateRangeError(f"{spec.name}: month={month} must be in 1..{n_months} for year {year}")

    n_days = spec.month_days(year, month)
    if not (1 <= day <= n_days):
        raise DateRangeError(f"{spec.name}: day={day} must be in 1..{n_days} for {year}-{month}")
