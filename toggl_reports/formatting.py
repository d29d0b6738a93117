"""Shared formatting helpers for dates, durations and decimal hours."""

from datetime import date

DATE_FORMAT = "%Y-%m-%d"

UNDEFINED = "Undefined"
START_DATE_UNDEFINED = "Start date undefined"
END_DATE_UNDEFINED = "End date undefined"


def format_date(value: date | None, undefined: str = UNDEFINED) -> str:
    """Format a calendar date as YYYY-MM-DD, or the sentinel when absent."""
    if value is None:
        return undefined
    return value.strftime(DATE_FORMAT)


def split_seconds(total_seconds: int) -> tuple[int, int, int]:
    """Split a second count into (hours, minutes, seconds)."""
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return hours, minutes, seconds


def format_duration(total_seconds: int | None) -> str:
    """
    Format elapsed seconds as H:MM:SS.

    Hours are not zero-padded and may exceed 24, e.g. "2:30:00" or "161:05:09".
    """
    if total_seconds is None:
        return UNDEFINED
    hours, minutes, seconds = split_seconds(total_seconds)
    return f"{hours}:{minutes:02d}:{seconds:02d}"


def decimal_hours(total_seconds: int) -> float:
    """Convert seconds to decimal hours."""
    return total_seconds / 3600.0


def format_decimal_hours(value: float, decimal_places: int | None = None) -> str:
    """
    Render decimal hours for CSV output.

    Without decimal_places the shortest round-trip representation is used
    (2.5 -> "2.5", 8.0 -> "8.0"); otherwise fixed precision.
    """
    if decimal_places is None:
        return repr(float(value))
    return f"{value:.{decimal_places}f}"
