from datetime import datetime, timezone

from pool_passport import clock as clock_module
from pool_passport.clock import FixedClock, LocaleClock, clock_for_location
from pool_passport.models import Location


def at(*args):
    return lambda: datetime(*args, tzinfo=timezone.utc)


def test_fixed_clock():
    assert FixedClock("16/12/2025").today() == "16/12/2025"


def test_locale_clock_uses_timezone():
    # 14:00 UTC on 1 Jan is already 2 Jan in Sydney
    assert LocaleClock("Australia/Sydney", now=at(2025, 1, 1, 14, 0)).today() == "02/01/2025"
    assert LocaleClock("UTC", now=at(2025, 1, 1, 14, 0)).today() == "01/01/2025"


def test_clock_for_location_finds_zone():
    sydney = Location(id="woolwich", name="Woolwich Baths", lat=-33.8394, lng=151.1711)
    assert clock_for_location(sydney).tz.zone == "Australia/Sydney"


def test_clock_for_location_falls_back(monkeypatch):
    monkeypatch.setattr(clock_module, "timezone_for", lambda location: None)
    somewhere = Location(id="x", name="X", lat=0.0, lng=0.0)
    assert clock_for_location(somewhere, fallback="UTC").tz.zone == "UTC"
    assert clock_for_location(None, fallback="Europe/London").tz.zone == "Europe/London"
