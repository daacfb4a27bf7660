from pool_passport.maps import native_maps_url
from pool_passport.models import Location

POOL = Location(id="maccallum", name="MacCallum Pool", lat=-33.8452, lng=151.2285)


def test_google_maps_by_default():
    assert native_maps_url(POOL) == "https://www.google.com/maps/search/?api=1&query=-33.8452,151.2285"


def test_apple_maps_on_ios():
    assert native_maps_url(POOL, "iPhone") == "https://maps.apple.com/?q=-33.8452,151.2285"
