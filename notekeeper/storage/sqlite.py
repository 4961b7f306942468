"""
SQLite storage backend.

This module provides SQLiteStorage, the production implementation of the
NoteStorage Protocol (notekeeper/types.py). It owns one sqlite3 connection to
a single database file and exposes the note operations used by the CLI:

    • create_note     → INSERT, returns the new id
    • delete_note     → DELETE, echoes the id
    • update_content  → UPDATE content; a trigger refreshes last_edited_at
    • get_note        → SELECT one row
    • list_notes      → SELECT all rows
    • search_notes    → case-sensitive substring match on title or content

Every operation validates its parameters first (notekeeper/validation.py) and
converts sqlite3 errors into StorageUnavailable, chaining the sqlite3 error.

Usage:

    from notekeeper.storage import open_storage

    with open_storage("storage.db") as storage:
        note_id = storage.create_note("Groceries", "milk, eggs")
        print(storage.get_note(note_id).title)
"""

import logging
import sqlite3
from contextlib import contextmanager
from datetime import datetime
from typing import Iterator, List, Optional

from notekeeper.errors import NotFound, StorageUnavailable
from notekeeper.types import Note
from notekeeper.validation import validate_id, validate_text

from .schema import bootstrap

logger = logging.getLogger(__name__)

_COLUMNS = "id, title, content, created_at, last_edited_at"


def _parse_timestamp(value: str) -> datetime:
    """Parse a timestamp column ("YYYY-MM-DD HH:MM:SS[.fff]") into a datetime."""
    return datetime.fromisoformat(value)


def _row_to_note(row: sqlite3.Row) -> Note:
    return Note(
        id=row["id"],
        title=row["title"],
        content=row["content"] or "",
        created_at=_parse_timestamp(row["created_at"]),
        last_edited_at=_parse_timestamp(row["last_edited_at"]),
    )


class SQLiteStorage:
    """
    Note storage over a single SQLite database file.

    Parameters
    ----------
    path:
        Location of the database file. Created if it does not exist; its
        parent directory must already exist.

    Raises
    ------
    StorageUnavailable
        If the file cannot be opened or the schema cannot be created.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        self._conn: Optional[sqlite3.Connection] = None

        try:
            conn = sqlite3.connect(path)
        except sqlite3.Error as exc:
            raise StorageUnavailable(f"opening {path}: {exc}") from exc

        try:
            conn.row_factory = sqlite3.Row
            bootstrap(conn)
        except sqlite3.Error as exc:
            conn.close()
            raise StorageUnavailable(f"creating schema in {path}: {exc}") from exc

        self._conn = conn
        logger.debug("opened storage at %s", path)

    # -----------------------------------------------------------------------
    # Internal helpers
    # -----------------------------------------------------------------------

    def _require_connection(self) -> sqlite3.Connection:
        """Return the open connection or raise StorageUnavailable."""
        if self._conn is None:
            raise StorageUnavailable("storage is closed")
        return self._conn

    @contextmanager
    def _transaction(self) -> Iterator[sqlite3.Connection]:
        """
        Yield the connection inside a transaction.

        Commits on success, rolls back on error, and converts any sqlite3
        error into StorageUnavailable.
        """
        conn = self._require_connection()
        try:
            with conn:
                yield conn
        except sqlite3.Error as exc:
            raise StorageUnavailable(str(exc)) from exc

    # -----------------------------------------------------------------------
    # Lifecycle
    # -----------------------------------------------------------------------

    def close(self) -> None:
        if self._conn is None:
            return
        self._conn.close()
        self._conn = None
        logger.debug("closed storage at %s", self.path)

    # -----------------------------------------------------------------------
    # Note operations
    # -----------------------------------------------------------------------

    def create_note(self, title: str, content: str) -> int:
        validate_text(title)
        validate_text(content)

        with self._transaction() as conn:
            cur = conn.execute(
                "INSERT INTO notes (title, content) VALUES (?, ?)",
                (title, content),
            )
            note_id = cur.lastrowid

        logger.debug("created note id=%s", note_id)
        return note_id

    def delete_note(self, note_id: int) -> int:
        validate_id(note_id)

        with self._transaction() as conn:
            cur = conn.execute("DELETE FROM notes WHERE id = ?", (note_id,))

        if cur.rowcount == 0:
            raise NotFound(note_id)

        logger.debug("deleted note id=%s", note_id)
        return note_id

    def update_content(self, note_id: int, content: str) -> None:
        validate_id(note_id)
        validate_text(content)

        with self._transaction() as conn:
            cur = conn.execute(
                "UPDATE notes SET content = ? WHERE id = ?",
                (content, note_id),
            )

        if cur.rowcount == 0:
            raise NotFound(note_id)

        logger.debug("updated content of note id=%s", note_id)

    def get_note(self, note_id: int) -> Note:
        validate_id(note_id)

        with self._transaction() as conn:
            row = conn.execute(
                f"SELECT {_COLUMNS} FROM notes WHERE id = ?", (note_id,)
            ).fetchone()

        if row is None:
            raise NotFound(note_id)
        return _row_to_note(row)

    def list_notes(self) -> List[Note]:
        with self._transaction() as conn:
            rows = conn.execute(f"SELECT {_COLUMNS} FROM notes ORDER BY id").fetchall()
        return [_row_to_note(row) for row in rows]

    def search_notes(self, keyword: str) -> List[Note]:
        """
        Return notes whose title or content contains `keyword`.

        instr() is used instead of LIKE: it is case-sensitive and treats
        `%` and `_` in the keyword as literal characters.
        """
        validate_text(keyword)

        with self._transaction() as conn:
            rows = conn.execute(
                f"SELECT {_COLUMNS} FROM notes "
                "WHERE instr(title, ?) > 0 OR instr(content, ?) > 0 "
                "ORDER BY id",
                (keyword, keyword),
            ).fetchall()

        logger.debug("search for %r matched %d notes", keyword, len(rows))
        return [_row_to_note(row) for row in rows]


@contextmanager
def open_storage(path: str) -> Iterator[SQLiteStorage]:
    """
    Open a SQLiteStorage for the duration of a `with` block.

    The storage is closed when the block exits, whether normally, through an
    exception, or through SystemExit raised by the CLI.
    """
    storage = SQLiteStorage(path)
    try:
        yield storage
    finally:
        storage.close()
