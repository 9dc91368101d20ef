class CalconvError(Exception):
    """Base error."""

class UnknownCalendarError(CalconvError, KeyError):
    """Raised for a calendar name the registry does not know (or already knows)."""

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0]) if self.args else ""

class ConversionUnavailableError(CalconvError):
    """Raised when a calendar does not define the requested operation (e.g. Haab -> JDN)."""

class DateRangeError(CalconvError, ValueError):
    """Raised for a wrong number of date fields, or out-of-range fields in strict mode."""
