"""Paged, chronological view over claimed stamps.

Page movement saturates at both ends; "page 3 of 3" never wraps to page 1.
"""

import math
from typing import List, Optional, Sequence, Tuple

from .codec import StateCodec
from .ledger import VisitLedger
from .models import Location, VisitRecord


def _check_page_size(page_size: int) -> None:
    if page_size < 1:
        raise ValueError(f"page_size must be at least 1, got {page_size}")


def stamped_locations(ledger: VisitLedger, catalog: Sequence[Location]) -> List[Tuple[Location, VisitRecord]]:
    """Claimed catalog entries, oldest claim first (ties keep catalog order)."""
    stamped = []
    for location in catalog:
        if ledger.is_visited(location.id):
            stamped.append((location, ledger.get(location.id)))
    stamped.sort(key=lambda pair: pair[1].claim_date.sort_key)
    return stamped


def _stamp_total(ledger: VisitLedger, catalog: Optional[Sequence[Location]]) -> int:
    if catalog is None:
        return ledger.count()
    return len(stamped_locations(ledger, catalog))


def page_count(ledger: VisitLedger, page_size: int, catalog: Optional[Sequence[Location]] = None) -> int:
    """Pages needed for the claimed stamps.

    With a catalog, only claims for pools in it are counted, matching what
    ``visible_slice`` can show.
    """
    _check_page_size(page_size)
    return max(1, math.ceil(_stamp_total(ledger, catalog) / page_size))


def clamp(page: int, ledger: VisitLedger, page_size: int, catalog: Optional[Sequence[Location]] = None) -> int:
    return min(max(page, 0), page_count(ledger, page_size, catalog) - 1)


def advance(page: int, ledger: VisitLedger, page_size: int, catalog: Optional[Sequence[Location]] = None) -> int:
    return clamp(page + 1, ledger, page_size, catalog)


def retreat(page: int, ledger: VisitLedger, page_size: int, catalog: Optional[Sequence[Location]] = None) -> int:
    return clamp(page - 1, ledger, page_size, catalog)


def visible_slice(
    ledger: VisitLedger, catalog: Sequence[Location], page: int, page_size: int
) -> List[Tuple[Location, VisitRecord]]:
    _check_page_size(page_size)
    start = max(page, 0) * page_size
    return stamped_locations(ledger, catalog)[start:start + page_size]


class StampPager:
    """Owns the persisted stamps page, re-clamping it on every move."""

    def __init__(
        self,
        codec: StateCodec,
        ledger: VisitLedger,
        page_size: int = 2,
        catalog: Optional[Sequence[Location]] = None,
    ):
        _check_page_size(page_size)
        self.codec = codec
        self.ledger = ledger
        self.page_size = page_size
        self.catalog = list(catalog) if catalog is not None else None
        raw: Optional[int] = codec.read_stamps_page()
        self.page = self._clamped(raw if raw is not None else 0)

    def _clamped(self, page: int) -> int:
        return clamp(page, self.ledger, self.page_size, self.catalog)

    def _store(self, page: int) -> int:
        self.page = page
        self.codec.write_stamps_page(self.page)
        return self.page

    def current(self) -> int:
        """Clamped page, persisted if clamping moved it."""
        page = self._clamped(self.page)
        if page != self.page:
            self._store(page)
        return self.page

    def clamp(self) -> int:
        return self._store(self._clamped(self.page))

    def advance(self) -> int:
        return self._store(self._clamped(self.page + 1))

    def retreat(self) -> int:
        return self._store(self._clamped(self.page - 1))

    def reset(self) -> int:
        return self._store(0)

    def page_count(self) -> int:
        return page_count(self.ledger, self.page_size, self.catalog)

    def visible(self, catalog: Optional[Sequence[Location]] = None) -> List[Tuple[Location, VisitRecord]]:
        catalog = catalog if catalog is not None else (self.catalog or [])
        return visible_slice(self.ledger, catalog, self.current(), self.page_size)
