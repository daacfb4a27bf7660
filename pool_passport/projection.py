"""Read-only values derived from passport state for presentation."""

from typing import List, Optional, Sequence, Tuple

from pydantic import BaseModel

from .dates import display_date
from .models import Location, VisitRecord

CLAIM_CAPTION = "🏴‍☠️ Claim Treasure"
EMPTY_OVERVIEW = "No locations charted yet."


def completion_badge(visited_count: int, catalog_length: int) -> str:
    return f"{visited_count} / {catalog_length}"


def page_label(page: int, total_pages: int) -> str:
    return f"Page {page + 1} of {total_pages}"


def navigation(page: int, total_pages: int) -> Tuple[bool, bool]:
    """Return ``(can_retreat, can_advance)`` for the stamps pager."""
    return page > 0, page < total_pages - 1


def overview_text(visited_count: int, catalog_length: int) -> str:
    if catalog_length == 0:
        return EMPTY_OVERVIEW
    return f"Treasure found at {visited_count} of {catalog_length} locations."


class LocationDisplay(BaseModel):
    """How one pool should look: stamped or waiting to be claimed."""

    id: str
    name: str
    suburb: Optional[str] = None
    lat: float
    lng: float
    stamped: bool = False
    date: str = ""
    caption: str = CLAIM_CAPTION
    stamp_src: str = ""

    @classmethod
    def build(cls, location: Location, record: Optional[VisitRecord]) -> "LocationDisplay":
        stamped = record is not None and record.done
        date = display_date(record.date) if stamped else ""
        caption = f"✓ Treasure claimed • {date}" if stamped else CLAIM_CAPTION
        return cls(
            id=location.id,
            name=location.name,
            suburb=location.suburb,
            lat=location.lat,
            lng=location.lng,
            stamped=stamped,
            date=date,
            caption=caption,
            stamp_src=location.stamp_src,
        )


class ViewProjection(BaseModel):
    """Everything both views need, computed in one pass after each operation."""

    badge: str
    overview: str
    visited_count: int
    catalog_length: int
    selected_index: int
    selected: Optional[LocationDisplay] = None
    page: int
    page_count: int
    page_label: str
    can_retreat: bool
    can_advance: bool
    stamps: List[LocationDisplay] = []
    complete: bool = False

    @classmethod
    def build(
        cls,
        catalog: Sequence[Location],
        selected_index: int,
        selected_record: Optional[VisitRecord],
        visited_count: int,
        page: int,
        total_pages: int,
        page_items: Sequence[Tuple[Location, VisitRecord]],
        complete: bool,
    ) -> "ViewProjection":
        can_retreat, can_advance = navigation(page, total_pages)
        selected = None
        if catalog:
            selected = LocationDisplay.build(catalog[selected_index], selected_record)
        return cls(
            badge=completion_badge(visited_count, len(catalog)),
            overview=overview_text(visited_count, len(catalog)),
            visited_count=visited_count,
            catalog_length=len(catalog),
            selected_index=selected_index,
            selected=selected,
            page=page,
            page_count=total_pages,
            page_label=page_label(page, total_pages),
            can_retreat=can_retreat,
            can_advance=can_advance,
            stamps=[LocationDisplay.build(location, record) for location, record in page_items],
            complete=complete,
        )

    def list_summary(self) -> str:
        """Plain-text rendering of the list view."""
        lines = [f"Treasure: {self.badge}"]
        if self.selected is None:
            lines.append("No pools loaded.")
            return "\n".join(lines)
        lines.append(f"[{self.selected_index + 1}/{self.catalog_length}] {self.selected.name}")
        if self.selected.suburb:
            lines.append(f"    {self.selected.suburb}")
        lines.append(f"    {self.selected.caption}")
        return "\n".join(lines)

    def stamps_summary(self) -> str:
        """Plain-text rendering of the current stamps page."""
        lines = [f"{'='*40}", f"MY TREASURE  {self.badge}", f"{'='*40}"]
        if not self.stamps:
            lines.append("No treasure claimed yet.")
        for stamp in self.stamps:
            suburb = f" ({stamp.suburb})" if stamp.suburb else ""
            lines.append(f"{stamp.date:>10}  {stamp.name}{suburb}")
        prev_hint = "< prev" if self.can_retreat else "      "
        next_hint = "next >" if self.can_advance else ""
        lines.append(f"{'='*40}")
        lines.append(f"{prev_hint}  {self.page_label}  {next_hint}".rstrip())
        return "\n".join(lines)
