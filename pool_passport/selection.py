"""Currently selected pool, with wraparound navigation."""

from typing import Optional

from .codec import StateCodec


class SelectionCursor:
    """Index into the catalog. Moving past either end cycles to the other."""

    def __init__(self, codec: StateCodec, catalog_length: int = 0):
        self.codec = codec
        self.index = 0
        self.set_from_persisted(codec.read_selection(), catalog_length)

    @staticmethod
    def _clamp(index: int, catalog_length: int) -> int:
        if catalog_length <= 0:
            return 0
        return min(max(index, 0), catalog_length - 1)

    def set_from_persisted(self, raw: Optional[int], catalog_length: int) -> int:
        """Adopt a stored index, treating missing or out-of-range values as 0."""
        if raw is None or isinstance(raw, bool) or not isinstance(raw, int):
            raw = 0
        if catalog_length <= 0 or raw < 0 or raw >= catalog_length:
            raw = 0
        self.index = raw
        return self.index

    def current(self, catalog_length: int) -> int:
        self.index = self._clamp(self.index, catalog_length)
        return self.index

    def next(self, catalog_length: int) -> int:
        if catalog_length <= 0:
            self.index = 0
            return 0
        self.index = (self.current(catalog_length) + 1) % catalog_length
        self.codec.write_selection(self.index)
        return self.index

    def previous(self, catalog_length: int) -> int:
        if catalog_length <= 0:
            self.index = 0
            return 0
        self.index = (self.current(catalog_length) - 1 + catalog_length) % catalog_length
        self.codec.write_selection(self.index)
        return self.index

    def flush(self) -> None:
        self.codec.write_selection(self.index)
