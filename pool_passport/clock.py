"""Clocks that supply "today" as an en-AU formatted date (DD/MM/YYYY)."""

from datetime import datetime, timezone
from functools import lru_cache
from typing import Optional

import pytz
from timezonefinder import TimezoneFinder

from . import config
from .models import Location

DISPLAY_FORMAT = "%d/%m/%Y"


@lru_cache(maxsize=1)
def _get_timezone_finder() -> TimezoneFinder:
    """Return a shared TimezoneFinder; loading its boundary data is slow."""
    return TimezoneFinder()


class Clock:
    def today(self) -> str:
        raise NotImplementedError


class FixedClock(Clock):
    """Always returns the same date string. Useful in tests."""

    def __init__(self, today: str):
        self.value = today

    def today(self) -> str:
        return self.value


class LocaleClock(Clock):
    """Today's date in a given IANA timezone, formatted for display."""

    def __init__(self, tz_name: Optional[str] = None, now=None):
        self.tz = pytz.timezone(tz_name or config.timezone)
        self._now = now or (lambda: datetime.now(timezone.utc))

    def today(self) -> str:
        return self._now().astimezone(self.tz).strftime(DISPLAY_FORMAT)


def timezone_for(location: Location) -> Optional[str]:
    """IANA timezone name at the pool's coordinates, if one can be found."""
    try:
        return _get_timezone_finder().timezone_at(lat=location.lat, lng=location.lng)
    except ValueError as e:
        print(f"Failed to find timezone for ({location.lat}, {location.lng}): {e}")
        return None


def clock_for_location(location: Optional[Location], fallback: Optional[str] = None) -> LocaleClock:
    """Clock in the pool's local timezone, or ``fallback`` when unknown."""
    tz_name = timezone_for(location) if location is not None else None
    return LocaleClock(tz_name or fallback or config.timezone)
