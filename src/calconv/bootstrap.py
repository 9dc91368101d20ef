from __future__ import annotations
from calconv.core.engine import CalendarRegistry
from calconv.calendars.specs import ALL_SPECS

def build_registry() -> CalendarRegistry:
    return CalendarRegistry(dict(ALL_SPECS))
