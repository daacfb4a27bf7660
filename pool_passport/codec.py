"""Translate passport state to and from store slots.

Reads never fail: a missing or unreadable slot yields the default value.
Writes propagate ``StorageWriteError`` from the store.
"""

import json
from typing import Dict, Optional

from pydantic import ValidationError

from . import config
from .models import VisitRecord
from .storage import KeyValueStore


def decode_ledger(payload: Optional[str]) -> Dict[str, VisitRecord]:
    """Parse a stored ledger, dropping entries that cannot be understood."""
    if not payload:
        return {}
    try:
        data = json.loads(payload)
    except ValueError as e:
        print(f"Ignoring unreadable visited ledger: {e}")
        return {}
    if not isinstance(data, dict):
        print("Ignoring visited ledger: expected a JSON object")
        return {}

    records: Dict[str, VisitRecord] = {}
    for pool_id, entry in data.items():
        # Very old builds stored a bare `true` per pool
        if entry is True:
            entry = {"done": True}
        if not isinstance(entry, dict):
            continue
        try:
            records[str(pool_id)] = VisitRecord.model_validate(entry)
        except ValidationError as e:
            print(f"Dropping visited entry '{pool_id}': {e.errors()[0]['msg']}")
    return records


def encode_ledger(records: Dict[str, VisitRecord]) -> str:
    return json.dumps(
        {pool_id: record.to_serialized_dict() for pool_id, record in records.items()},
        ensure_ascii=False,
    )


def decode_index(payload: Optional[str]) -> Optional[int]:
    """Parse a stored integer; ``None`` when absent or not an integer."""
    if payload is None:
        return None
    try:
        value = json.loads(payload)
    except ValueError:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


class StateCodec:
    """The only component that reads or writes the store."""

    def __init__(
        self,
        store: KeyValueStore,
        visited_key: str = config.VISITED_KEY,
        selection_key: str = config.SELECTION_KEY,
        stamps_page_key: str = config.STAMPS_PAGE_KEY,
    ):
        self.store = store
        self.visited_key = visited_key
        self.selection_key = selection_key
        self.stamps_page_key = stamps_page_key

    def read_ledger(self) -> Dict[str, VisitRecord]:
        return decode_ledger(self.store.get(self.visited_key))

    def write_ledger(self, records: Dict[str, VisitRecord]) -> None:
        self.store.set(self.visited_key, encode_ledger(records))

    def read_selection(self) -> Optional[int]:
        return decode_index(self.store.get(self.selection_key))

    def write_selection(self, index: int) -> None:
        self.store.set(self.selection_key, str(index))

    def read_stamps_page(self) -> Optional[int]:
        return decode_index(self.store.get(self.stamps_page_key))

    def write_stamps_page(self, page: int) -> None:
        self.store.set(self.stamps_page_key, str(page))
