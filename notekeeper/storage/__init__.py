"""
Public storage API surface.

External callers (CLI, tests) should import from here rather than reaching
into submodules directly:

    from notekeeper.storage import SQLiteStorage, InMemoryStorage, open_storage

Both backends implement the NoteStorage Protocol from notekeeper/types.py.
"""

from .memory import InMemoryStorage
from .sqlite import SQLiteStorage, open_storage

__all__ = [
    "InMemoryStorage",
    "SQLiteStorage",
    "open_storage",
]
