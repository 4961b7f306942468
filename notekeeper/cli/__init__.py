"""
Public CLI surface.

    from notekeeper.cli import build_app, main
"""

from .main import main
from .notes_cli import build_app

__all__ = [
    "build_app",
    "main",
]
