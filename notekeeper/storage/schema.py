"""Schema bootstrap for the notekeeper SQLite database."""

import logging
import sqlite3

logger = logging.getLogger(__name__)

# SQLite expression producing a UTC timestamp with millisecond precision,
# e.g. "2024-01-01 12:00:00.123".
NOW = "strftime('%Y-%m-%d %H:%M:%f', 'now')"

# -- DDL statements ---------------------------------------------------------
# Executed in order during bootstrap(). Safe to call repeatedly.
SCHEMA_STATEMENTS = [
    f"""
    CREATE TABLE IF NOT EXISTS notes (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        title TEXT NOT NULL,
        content TEXT,
        created_at TIMESTAMP DEFAULT ({NOW}),
        last_edited_at TIMESTAMP DEFAULT ({NOW})
    );
    """,
    # Refreshes last_edited_at whenever title or content changes. The trigger
    # only updates last_edited_at, so it never fires itself again.
    # The new value is at least 1ms past the old one, so edits landing in the
    # same millisecond still advance it. Text max() is chronological because
    # every value has the same fixed-width format.
    f"""
    CREATE TRIGGER IF NOT EXISTS update_last_edited_at
    AFTER UPDATE OF title, content ON notes
    FOR EACH ROW
    BEGIN
        UPDATE notes
        SET last_edited_at = max(
            {NOW},
            strftime('%Y-%m-%d %H:%M:%f', OLD.last_edited_at, '+0.001 seconds')
        )
        WHERE id = OLD.id;
    END;
    """,
]


def bootstrap(conn: sqlite3.Connection) -> None:
    """Create the notes table and its update trigger if missing.

    Safe to call more than once. Raises sqlite3.Error on failure.
    """
    with conn:
        for stmt in SCHEMA_STATEMENTS:
            conn.execute(stmt)
    logger.info("notes schema ready")
