from pool_passport.models import Location, VisitRecord
from pool_passport.projection import (
    CLAIM_CAPTION,
    LocationDisplay,
    completion_badge,
    navigation,
    overview_text,
    page_label,
)


def test_labels():
    assert completion_badge(2, 5) == "2 / 5"
    assert page_label(0, 3) == "Page 1 of 3"
    assert page_label(2, 3) == "Page 3 of 3"


def test_navigation_enablement():
    assert navigation(0, 1) == (False, False)
    assert navigation(0, 3) == (False, True)
    assert navigation(1, 3) == (True, True)
    assert navigation(2, 3) == (True, False)


def test_overview_text():
    assert overview_text(0, 0) == "No locations charted yet."
    assert overview_text(2, 5) == "Treasure found at 2 of 5 locations."


def test_location_display_unstamped():
    location = Location(id="a", name="Pool A", lat=1.0, lng=2.0)
    display = LocationDisplay.build(location, None)
    assert not display.stamped
    assert display.caption == CLAIM_CAPTION
    assert display.date == ""
    assert display.stamp_src == "stamps/a.png"


def test_location_display_converts_iso_date():
    location = Location(id="a", name="Pool A", lat=1.0, lng=2.0, suburb="Balmain")
    display = LocationDisplay.build(location, VisitRecord(done=True, date="2025-12-16"))
    assert display.stamped
    assert display.date == "16/12/2025"
    assert display.caption == "✓ Treasure claimed • 16/12/2025"
    assert display.suburb == "Balmain"
