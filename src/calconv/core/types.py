from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, NamedTuple, Optional, Tuple


class CalendarDate(NamedTuple):
    year: int
    month: int
    day: int

class LongCount(NamedTuple):
    baktun: int
    katun: int
    tun: int
    uinal: int
    kin: int

class HaabDate(NamedTuple):
    month: int  # 1..19, 19 is the five-day Wayeb
    day: int    # 0..19

class TzolkinDate(NamedTuple):
    number: int  # 1..13
    name: int    # 1..20


@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload describing one calendar for the registry."""
    name: str
    fields: Tuple[str, ...]
    epoch: float
    from_jdn: Callable[[float], Tuple[int, ...]]
    to_jdn: Optional[Callable[..., float]] = None
    is_leap: Optional[Callable[[int], bool]] = None
    month_days: Optional[Callable[[int, int], int]] = None
    months_in_year: Optional[Callable[[int], int]] = None
    new_year_month: int = 1
    meta: Dict[str, Any] = field(default_factory=dict)

    def info(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "fields": list(self.fields),
            "epoch": self.epoch,
            "forward": self.to_jdn is not None,
            "leap_rule": self.is_leap is not None,
            **self.meta,
        }
