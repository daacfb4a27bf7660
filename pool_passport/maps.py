"""Links that open a pool in the device's native maps app."""

from .models import Location


def native_maps_url(location: Location, platform: str = "") -> str:
    """Google Maps search link, or an Apple Maps link on iOS devices."""
    if platform.lower() in {"ios", "ipad", "iphone", "ipod"}:
        return f"https://maps.apple.com/?q={location.lat},{location.lng}"
    return f"https://www.google.com/maps/search/?api=1&query={location.lat},{location.lng}"
