"""Passport session: the state object the UI talks to."""

from typing import Callable, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict

from . import config
from .clock import Clock, LocaleClock, clock_for_location
from .codec import StateCodec
from .ledger import VisitLedger
from .models import Location, VisitRecord
from .pagination import StampPager
from .projection import ViewProjection
from .selection import SelectionCursor
from .storage import KeyValueStore


class ClaimResult(BaseModel):
    """Outcome of a claim, so presentation can decide what to celebrate."""

    model_config = ConfigDict(frozen=True)

    location: Location
    record: VisitRecord
    newly_claimed: bool
    completed: bool


class PassportSession:
    """Owns the ledger, selection and stamps page for one catalog.

    Every mutating call persists before it returns. If the store fails the
    error propagates with the in-memory state already updated; ``flush``
    writes everything again.
    """

    def __init__(
        self,
        catalog: Sequence[Location],
        store: KeyValueStore,
        clock: Optional[Clock] = None,
        page_size: Optional[int] = None,
        timezone_from_location: bool = False,
    ):
        """Rehydrate state for ``catalog`` from ``store``.

        Args:
            catalog: Pools in display order
            store: Where progress is kept between runs
            clock: Supplies today's date for claims (defaults to the configured timezone)
            page_size: Stamps per page (defaults to config.page_size)
            timezone_from_location: Date claims in the pool's own timezone
        """
        self.catalog: List[Location] = list(catalog)
        self.codec = StateCodec(store)
        self.clock = clock or LocaleClock()
        self.timezone_from_location = timezone_from_location
        self.ledger = VisitLedger(self.codec, known_ids=[p.id for p in self.catalog])
        self.selection = SelectionCursor(self.codec, len(self.catalog))
        self.pager = StampPager(
            self.codec,
            self.ledger,
            page_size if page_size is not None else config.page_size,
            catalog=self.catalog,
        )
        self._listeners: List[Callable[["PassportSession"], None]] = []

    def subscribe(self, callback: Callable[["PassportSession"], None]) -> None:
        """Call ``callback(session)`` after every state change."""
        self._listeners.append(callback)

    def _changed(self) -> None:
        for callback in self._listeners:
            callback(self)

    def _today(self, location: Location) -> str:
        if self.timezone_from_location:
            return clock_for_location(location, fallback=config.timezone).today()
        return self.clock.today()

    def find(self, pool_id: str) -> Optional[Location]:
        for location in self.catalog:
            if location.id == pool_id:
                return location
        return None

    @property
    def selected_index(self) -> int:
        return self.selection.current(len(self.catalog))

    def selected_location(self) -> Optional[Location]:
        if not self.catalog:
            return None
        return self.catalog[self.selected_index]

    def is_visited(self, pool_id: str) -> bool:
        return self.ledger.is_visited(pool_id)

    def claim(self, pool_id: Optional[str] = None) -> Optional[ClaimResult]:
        """Stamp a pool (the selected one by default).

        Returns ``None`` when there is nothing to claim: an empty catalog or
        an id that is not in it.
        """
        location = self.find(pool_id) if pool_id is not None else self.selected_location()
        if location is None:
            return None
        if self.ledger.is_visited(location.id):
            return ClaimResult(
                location=location,
                record=self.ledger.get(location.id),
                newly_claimed=False,
                completed=self.completion_reached(),
            )
        try:
            record = self.ledger.claim(location.id, self._today(location))
            self.pager.clamp()
        finally:
            self._changed()
        return ClaimResult(
            location=location,
            record=record,
            newly_claimed=True,
            completed=self.completion_reached(),
        )

    def next(self) -> int:
        try:
            return self.selection.next(len(self.catalog))
        finally:
            self._changed()

    def previous(self) -> int:
        try:
            return self.selection.previous(len(self.catalog))
        finally:
            self._changed()

    def next_page(self) -> int:
        try:
            return self.pager.advance()
        finally:
            self._changed()

    def previous_page(self) -> int:
        try:
            return self.pager.retreat()
        finally:
            self._changed()

    def reset(self) -> None:
        """Forget every claim on this device."""
        # Listeners must see page 0 even if the ledger write fails
        self.pager.page = 0
        try:
            self.ledger.reset()
            self.pager.reset()
        finally:
            self._changed()

    def count(self) -> int:
        return self.ledger.count()

    def completion_reached(self) -> bool:
        return self.ledger.completion_reached(len(self.catalog))

    def flush(self) -> None:
        """Persist all state again, e.g. after a StorageWriteError."""
        self.ledger.flush()
        self.selection.flush()
        self.pager.clamp()

    def project(self) -> ViewProjection:
        index = self.selected_index
        selected = self.selected_location()
        page = self.pager.current()
        return ViewProjection.build(
            catalog=self.catalog,
            selected_index=index,
            selected_record=self.ledger.get(selected.id) if selected else None,
            visited_count=self.ledger.count(),
            page=page,
            total_pages=self.pager.page_count(),
            page_items=self.pager.visible(self.catalog),
            complete=self.completion_reached(),
        )
