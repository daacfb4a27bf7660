"""Visited records, keyed by pool id."""

from typing import Dict, Iterable, Optional

from .codec import StateCodec
from .models import VisitRecord


class VisitLedger:
    """Authoritative record of which pools have been claimed.

    Stamping is one-way: a claimed pool stays claimed until ``reset``.
    """

    def __init__(self, codec: StateCodec, known_ids: Optional[Iterable[str]] = None):
        self.codec = codec
        self.known_ids = set(known_ids) if known_ids is not None else None
        self._records: Dict[str, VisitRecord] = codec.read_ledger()

    def is_visited(self, pool_id: str) -> bool:
        record = self._records.get(pool_id)
        return record is not None and record.done

    def get(self, pool_id: str) -> Optional[VisitRecord]:
        return self._records.get(pool_id)

    def records(self) -> Dict[str, VisitRecord]:
        return dict(self._records)

    def claim(self, pool_id: str, today: str) -> Optional[VisitRecord]:
        """Stamp a pool as visited on ``today``.

        Returns the existing record untouched if the pool is already stamped,
        and ``None`` for an id outside the catalog.
        """
        if self.is_visited(pool_id):
            return self._records[pool_id]
        if self.known_ids is not None and pool_id not in self.known_ids:
            return None
        record = VisitRecord(done=True, date=today)
        self._records[pool_id] = record
        self.codec.write_ledger(self._records)
        return record

    def reset(self) -> None:
        self._records = {}
        self.codec.write_ledger(self._records)

    def count(self) -> int:
        return sum(1 for record in self._records.values() if record.done)

    def completion_reached(self, total_locations: int) -> bool:
        return total_locations > 0 and self.count() == total_locations

    def flush(self) -> None:
        """Write the in-memory ledger again, e.g. after a failed save."""
        self.codec.write_ledger(self._records)
