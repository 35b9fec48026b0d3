"""Fatal storage conditions.

These never become a ``Message``: they abort the running operation and the
store rolls back every page it touched.
"""


class StorageError(Exception):
    """Base class for unrecoverable storage failures."""


class MemoryAccessError(StorageError):
    """Read or write outside the bounds of a memory or region."""


class OutOfMemoryError(StorageError):
    """The substrate (or the bucket table) cannot grow any further."""


class CorruptLayoutError(StorageError):
    """A persisted header does not match the layout this code writes."""


class IdOverflowError(StorageError):
    """The identifier counter would exceed the u64 range."""


class RecordTooLargeError(StorageError):
    """An encoded record exceeds the fixed per-record bound."""


class CorruptRecordError(StorageError):
    """Stored bytes do not decode into the expected record."""
