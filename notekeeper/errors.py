"""
notekeeper/errors.py

Exception hierarchy shared by the storage backends and the CLI.

Every error a storage backend raises on purpose derives from NotekeeperError,
so the dispatcher can report all of them with a single `except` clause while
callers that care about the kind can still catch the specific subclass.

    • InvalidParameter   → an id or string failed local validation
    • NotFound           → the operation targeted an id that does not exist
    • StorageUnavailable → the database file or connection failed
"""


class NotekeeperError(Exception):
    """Base class for all notekeeper errors."""


class InvalidParameter(NotekeeperError, ValueError):
    """Raised when an id is out of range or a string has an invalid length."""


class NotFound(NotekeeperError, LookupError):
    """Raised when no note matches the requested id."""

    def __init__(self, note_id: int) -> None:
        super().__init__(f"note with ID {note_id} not found")
        self.note_id = note_id


class StorageUnavailable(NotekeeperError, RuntimeError):
    """Raised when the database cannot be opened, bootstrapped, or queried."""
