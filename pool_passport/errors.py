"""Exceptions raised by the pool passport."""


class PassportError(Exception):
    """Base class for pool passport errors."""


class StorageWriteError(PassportError):
    """Persisting state failed.

    The in-memory state has already changed when this is raised, so the
    stored copy may lag behind it until the next successful write.
    """

    def __init__(self, key: str, cause: Exception):
        super().__init__(f"Failed to save '{key}': {cause}")
        self.key = key
        self.cause = cause
