"""
notekeeper/types.py

Centralized type definitions for notekeeper.

This module defines the Note record and the NoteStorage Protocol. Keeping them
in one place ensures:

    • A single source of truth for the note schema
    • A clear contract between the CLI dispatcher and the storage layer
    • Easy substitution of storage backends in tests

When the notes table changes, this file should be updated first.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Protocol


# ---------------------------------------------------------------------------
# Note
# ---------------------------------------------------------------------------
# A single row of the `notes` table.
#
# id, created_at and last_edited_at are always assigned by the storage
# backend; callers only ever supply title and content.
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Note:
    id: int
    title: str
    content: str
    created_at: datetime
    last_edited_at: datetime


# ---------------------------------------------------------------------------
# NoteStorage
# ---------------------------------------------------------------------------
# Protocol describing everything the CLI needs from a storage backend.
#
# IMPORTANT:
#   This Protocol is structural, not nominal. SQLiteStorage and
#   InMemoryStorage both satisfy it without inheriting from it, and so does
#   any test double with the same methods.
#
# All operations validate their arguments before touching storage and raise
# the errors defined in notekeeper/errors.py.
# ---------------------------------------------------------------------------
class NoteStorage(Protocol):
    def create_note(self, title: str, content: str) -> int:
        """Create a note and return its newly assigned id."""
        ...

    def delete_note(self, note_id: int) -> int:
        """Delete a note by id and return the same id."""
        ...

    def update_content(self, note_id: int, content: str) -> None:
        """Replace the content of a note; last_edited_at is refreshed."""
        ...

    def get_note(self, note_id: int) -> Note:
        """Return the note with the given id."""
        ...

    def list_notes(self) -> List[Note]:
        """Return every note in id order."""
        ...

    def search_notes(self, keyword: str) -> List[Note]:
        """Return notes whose title or content contains `keyword`."""
        ...

    def close(self) -> None:
        """Release the underlying resources. Safe to call more than once."""
        ...
