"""
In-memory storage backend.

InMemoryStorage satisfies the same NoteStorage Protocol as SQLiteStorage but
keeps everything in a dict. It lets the CLI and the test suite run without a
database file while still enforcing the full storage contract:

    • ids come from a counter and are never reused after deletion
    • parameters are validated exactly as the SQLite backend validates them
    • last_edited_at is refreshed in the same write as the content change
    • any operation after close() raises StorageUnavailable
"""

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Dict, List

from notekeeper.errors import NotFound, StorageUnavailable
from notekeeper.types import Note
from notekeeper.validation import validate_id, validate_text


def _now() -> datetime:
    """Current UTC time, naive, truncated to milliseconds like the SQLite backend."""
    now = datetime.now(timezone.utc).replace(tzinfo=None)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


class InMemoryStorage:
    """Deterministic, dict-backed note storage."""

    def __init__(self) -> None:
        self._notes: Dict[int, Note] = {}
        self._last_id = 0
        self._closed = False

    def _require_open(self) -> None:
        if self._closed:
            raise StorageUnavailable("storage is closed")

    def close(self) -> None:
        self._closed = True

    def create_note(self, title: str, content: str) -> int:
        validate_text(title)
        validate_text(content)
        self._require_open()

        self._last_id += 1
        stamp = _now()
        self._notes[self._last_id] = Note(
            id=self._last_id,
            title=title,
            content=content,
            created_at=stamp,
            last_edited_at=stamp,
        )
        return self._last_id

    def delete_note(self, note_id: int) -> int:
        validate_id(note_id)
        self._require_open()

        if self._notes.pop(note_id, None) is None:
            raise NotFound(note_id)
        return note_id

    def update_content(self, note_id: int, content: str) -> None:
        validate_id(note_id)
        validate_text(content)
        self._require_open()

        note = self._notes.get(note_id)
        if note is None:
            raise NotFound(note_id)

        # Keep last_edited_at strictly increasing even within one millisecond.
        stamp = max(_now(), note.last_edited_at + timedelta(milliseconds=1))
        self._notes[note_id] = replace(note, content=content, last_edited_at=stamp)

    def get_note(self, note_id: int) -> Note:
        validate_id(note_id)
        self._require_open()

        note = self._notes.get(note_id)
        if note is None:
            raise NotFound(note_id)
        return note

    def list_notes(self) -> List[Note]:
        self._require_open()
        return [self._notes[key] for key in sorted(self._notes)]

    def search_notes(self, keyword: str) -> List[Note]:
        validate_text(keyword)
        self._require_open()
        return [
            note
            for note in self.list_notes()
            if keyword in note.title or keyword in note.content
        ]
