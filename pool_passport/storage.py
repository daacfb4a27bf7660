"""Device-local key/value storage for passport state.

Stores only hold text slots. Knowing what goes in them is the codec's job.
"""

import json
import os
import shutil
from pathlib import Path
from typing import Dict, Optional

from .errors import StorageWriteError


class KeyValueStore:
    """Minimal synchronous text store."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError


class MemoryStore(KeyValueStore):
    """Dict-backed store for tests and throwaway sessions."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.slots: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.slots.get(key)

    def set(self, key: str, value: str) -> None:
        self.slots[key] = value


def _atomic_write_json(out_path: Path, data: dict):
    """Atomically write JSON to file to avoid corruption."""
    tmp_path = out_path.with_suffix(out_path.suffix + ".tmp")
    with open(tmp_path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
        f.flush()
        os.fsync(f.fileno())
    os.replace(tmp_path, out_path)


class JsonFileStore(KeyValueStore):
    """All slots kept in a single JSON object file.

    The file is read once, on first access. Every ``set`` rewrites the whole
    file before returning.
    """

    def __init__(self, path):
        self.path = Path(path)
        self._slots: Optional[Dict[str, str]] = None

    def _load(self) -> Dict[str, str]:
        if self._slots is not None:
            return self._slots
        self._slots = {}
        if not self.path.exists():
            return self._slots
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            print(f"Error loading state from {self.path}: {e}")
            self._keep_corrupt_copy()
            return self._slots
        if not isinstance(data, dict):
            print(f"Ignoring state file {self.path}: expected a JSON object")
            self._keep_corrupt_copy()
            return self._slots
        # Slots are text; anything else is left for the codec to reject
        for key, value in data.items():
            self._slots[str(key)] = value if isinstance(value, str) else json.dumps(value)
        return self._slots

    def _keep_corrupt_copy(self) -> None:
        backup_path = self.path.with_suffix(self.path.suffix + ".corrupt")
        try:
            shutil.copy2(self.path, backup_path)
            print(f"Kept unreadable state as {backup_path}")
        except OSError as e:
            print(f"Could not back up unreadable state: {e}")

    def get(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        slots = self._load()
        slots[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            _atomic_write_json(self.path, slots)
        except OSError as e:
            raise StorageWriteError(key, e) from e
