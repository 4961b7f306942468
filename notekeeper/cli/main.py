"""
Root entrypoint for the notekeeper CLI.

This module wires the pieces together for one invocation:

    1. Resolve Settings (environment or .env, see notekeeper/config.py).
    2. Open the SQLite storage; the schema is created on first use.
    3. Build the Typer app around the storage and run exactly one command.
    4. Close the storage, whatever the command's outcome.

If the storage cannot be opened, `Error initializing storage: ...` is printed
and the process exits with status 1.
"""

import logging
import sys
from typing import List, Optional

import typer

from notekeeper.config import load_settings
from notekeeper.errors import StorageUnavailable
from notekeeper.logging_utils import configure_logging
from notekeeper.storage import open_storage

from .notes_cli import APP_NAME, build_app

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> None:
    """
    Console-script entry point.

    `argv` defaults to sys.argv[1:]. Always ends with SystemExit carrying the
    command's exit status.
    """
    settings = load_settings()
    configure_logging(settings.log_level)
    logger.debug("using storage at %s", settings.storage_path)

    try:
        with open_storage(settings.storage_path) as storage:
            app = build_app(storage)
            app(args=argv, prog_name=APP_NAME)
    except StorageUnavailable as exc:
        typer.echo(f"Error initializing storage: {exc}")
        sys.exit(1)


# ---------------------------------------------------------------------------
# Entry point for `python -m notekeeper.cli.main`
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    main()
