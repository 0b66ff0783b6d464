"""Timezone-aware calendar helpers."""

from datetime import date, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


class InvalidTimezoneError(ValueError):
    """Raised when a timezone name cannot be resolved."""


def resolve_timezone(timezone_name: str) -> ZoneInfo:
    """Return the ZoneInfo for a name or raise InvalidTimezoneError."""
    try:
        return ZoneInfo(timezone_name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise InvalidTimezoneError(f"Unknown timezone: {timezone_name}") from exc


def local_today(timezone_name: str) -> date:
    """Return today's date in the given timezone."""
    return datetime.now(tz=resolve_timezone(timezone_name)).date()
