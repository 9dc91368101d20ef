from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .core.engine import CalendarRegistry
from .core.errors import ConversionUnavailableError
from .core.time import date_to_jdn, jdn_to_date
from .core.types import CalendarSpec
from .validation import check_arity, validate

_registry: Optional[CalendarRegistry] = None

def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def _spec(calendar: str) -> CalendarSpec:
    return _reg().get(calendar)

def list_calendars() -> List[str]:
    return _reg().list()

def calendar_info(calendar: str) -> Dict[str, Any]:
    return _spec(calendar).info()

def register_calendar(name: str, spec: CalendarSpec, *, overwrite: bool = False) -> None:
    _reg().register(name, spec, overwrite=overwrite)

# ============================================================
# Conversions
# ============================================================

def to_jdn(calendar: str, *fields, strict: bool = False) -> float:
    """Julian Day Number (midnight, x.5) of a date given as calendar fields."""
    spec = _spec(calendar)
    if spec.to_jdn is None:
        raise ConversionUnavailableError(f"Calendar '{calendar}' has no conversion to JDN")
    if strict:
        validate(spec, fields)
    else:
        check_arity(spec, fields)
    return spec.to_jdn(*fields)

def from_jdn(calendar: str, jd: float) -> Tuple[int, ...]:
    return _spec(calendar).from_jdn(jd)

def convert(src: str, fields: Sequence, dst: str, *, strict: bool = False) -> Tuple[int, ...]:
    return from_jdn(dst, to_jdn(src, *fields, strict=strict))

def from_date(d: date, calendar: str = "gregorian") -> Tuple[int, ...]:
    return from_jdn(calendar, date_to_jdn(d))

def to_date(calendar: str, *fields, strict: bool = False) -> date:
    return jdn_to_date(to_jdn(calendar, *fields, strict=strict))

# ============================================================
# Calendar structure
# ============================================================

def is_leap_year(calendar: str, year: int) -> bool:
    spec = _spec(calendar)
    if spec.is_leap is None:
        raise ConversionUnavailableError(f"Calendar '{calendar}' has no leap-year rule")
    return bool(spec.is_leap(year))

def months_in_year(calendar: str, year: int) -> int:
    spec = _spec(calendar)
    if spec.months_in_year is None:
        raise ConversionUnavailableError(f"Calendar '{calendar}' has no months")
    return spec.months_in_year(year)

def days_in_month(calendar: str, year: int, month: int) -> int:
    spec = _spec(calendar)
    if spec.month_days is None:
        raise ConversionUnavailableError(f"Calendar '{calendar}' has no month lengths")
    validate(spec, (year, month, 1))
    return spec.month_days(year, month)

def new_year(calendar: str, year: int) -> float:
    """JDN of the first day of `year` (1 Tishri for the Hebrew calendar)."""
    spec = _spec(calendar)
    if spec.to_jdn is None or spec.months_in_year is None:
        raise ConversionUnavailableError(f"Calendar '{calendar}' has no years")
    return spec.to_jdn(year, spec.new_year_month, 1)

def year_days(calendar: str, year: int) -> int:
    nxt = year + 1
    if nxt == 0 and _spec(calendar).meta.get("year_zero") is False:
        nxt = 1
    return int(new_year(calendar, nxt) - new_year(calendar, year))
