"""
Command-line interface for managing notes.

This module builds the Typer application that maps each CLI subcommand onto
exactly one NoteStorage operation:

    • notekeeper new <title> <content>
    • notekeeper delete <id>
    • notekeeper get <id>
    • notekeeper list
    • notekeeper update <id> <content>
    • notekeeper search <keyword>

Design Goals
------------
• Keep the CLI thin: all persistence rules live in the storage backend.
• Accept any NoteStorage (SQLite, in-memory, test double) through
  `build_app(storage)`, so the dispatcher never knows which backend it talks to.
• Distinguish "nothing to do" from "something failed": a missing title,
  content or keyword prints a hint and exits 0, while storage errors and
  malformed ids print `Error: ...` and exit 1. `delete` and `get` treat a
  missing id as an error.
"""

import logging
import re
from datetime import datetime
from typing import NoReturn, Optional

import typer

from notekeeper import __version__
from notekeeper.errors import NotekeeperError
from notekeeper.logging_utils import configure_logging, log_verbose
from notekeeper.types import Note, NoteStorage

APP_NAME = "notekeeper"
APP_HELP = "Manage your notes using CLI"

# Base-10 integer with an optional sign. Range checking is the storage's job.
_NOTE_ID_PATTERN = re.compile(r"[+-]?[0-9]+")

# Lets a signed id such as "-5" reach the command as a positional argument
# instead of being rejected by Click as an unknown option.
_ID_COMMAND_SETTINGS = {"ignore_unknown_options": True}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
class InvalidNoteID(ValueError):
    """Raised when an id argument is not a base-10 integer."""


def parse_note_id(raw: str) -> int:
    """
    Parse a note id argument.

    Raises
    ------
    InvalidNoteID
        If `raw` is not a base-10 integer. Out-of-range values parse fine and
        are rejected later by the storage backend.
    """
    if not _NOTE_ID_PATTERN.fullmatch(raw):
        raise InvalidNoteID(f"invalid note ID: {raw!r} is not a base-10 integer")
    return int(raw, 10)


def format_timestamp(value: datetime) -> str:
    return value.isoformat(sep=" ", timespec="milliseconds")


def format_note_line(note: Note, include_content: bool = True) -> str:
    """Render a note as one line for `list` and `search` output."""
    parts = [f"ID: {note.id}", f"Title: {note.title}"]
    if include_content:
        parts.append(f"Content: {note.content}")
    parts.append(f"CreatedAt: {format_timestamp(note.created_at)}")
    parts.append(f"LastEditedAt: {format_timestamp(note.last_edited_at)}")
    return ", ".join(parts)


def fail(message: str) -> NoReturn:
    """Report a hard error and exit with status 1."""
    typer.echo(f"Error: {message}")
    raise typer.Exit(code=1)


def _require_note_id(raw: Optional[str], missing_message: str) -> int:
    if not raw:
        fail(missing_message)
    try:
        return parse_note_id(raw)
    except InvalidNoteID as e:
        fail(str(e))


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {__version__}")
        raise typer.Exit()


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------
def build_app(storage: NoteStorage) -> typer.Typer:
    """
    Create the notekeeper Typer application around `storage`.

    The caller owns the storage: it is opened before the app runs and closed
    afterwards (see notekeeper/cli/main.py).
    """
    app = typer.Typer(name=APP_NAME, help=APP_HELP, add_completion=False)
    state = {"verbose": False}

    @app.callback()
    def root(
        verbose: bool = typer.Option(
            False,
            "--verbose",
            "-v",
            help="Show debug logging and progress messages on stderr.",
        ),
        version: bool = typer.Option(
            False,
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ) -> None:
        """Manage your notes using CLI."""
        state["verbose"] = verbose
        if verbose:
            configure_logging(logging.DEBUG)

    # -----------------------------------------------------------------------
    # notekeeper new <title> <content>
    # -----------------------------------------------------------------------
    @app.command("new")
    def new_note(
        title: Optional[str] = typer.Argument(None, help="Title of the new note."),
        content: Optional[str] = typer.Argument(None, help="Content of the new note."),
    ) -> None:
        """Create a new note."""
        if not title:
            typer.echo("Please provide a title for new note.")
            return
        if not content:
            typer.echo("Please provide content for new note.")
            return

        log_verbose(f"Creating note {title!r}...", state["verbose"])
        try:
            note_id = storage.create_note(title, content)
        except NotekeeperError as e:
            fail(f"creating new note: {e}")

        typer.echo(f"Created a new note with ID {note_id}")

    # -----------------------------------------------------------------------
    # notekeeper delete <id>
    # -----------------------------------------------------------------------
    @app.command("delete", context_settings=_ID_COMMAND_SETTINGS)
    def delete_note(
        note_id: Optional[str] = typer.Argument(None, help="ID of the note to delete."),
    ) -> None:
        """Delete a note by ID."""
        parsed_id = _require_note_id(note_id, "please provide ID of note to delete")

        log_verbose(f"Deleting note {parsed_id}...", state["verbose"])
        try:
            deleted_id = storage.delete_note(parsed_id)
        except NotekeeperError as e:
            fail(f"deleting note: {e}")

        typer.echo(f"Deleted note with ID {deleted_id}")

    # -----------------------------------------------------------------------
    # notekeeper get <id>
    # -----------------------------------------------------------------------
    @app.command("get", context_settings=_ID_COMMAND_SETTINGS)
    def get_note(
        note_id: Optional[str] = typer.Argument(None, help="ID of the note to show."),
    ) -> None:
        """Get a note by ID."""
        parsed_id = _require_note_id(note_id, "please provide ID of note to retrieve")

        try:
            note = storage.get_note(parsed_id)
        except NotekeeperError as e:
            fail(f"retrieving note: {e}")

        typer.echo(f"Note ID: {note.id}")
        typer.echo(f"Title: {note.title}")
        typer.echo(f"Content: {note.content}")
        typer.echo(f"CreatedAt: {format_timestamp(note.created_at)}")
        typer.echo(f"LastEditedAt: {format_timestamp(note.last_edited_at)}")

    # -----------------------------------------------------------------------
    # notekeeper list
    # -----------------------------------------------------------------------
    @app.command("list")
    def list_notes() -> None:
        """List all notes."""
        try:
            notes = storage.list_notes()
        except NotekeeperError as e:
            fail(f"listing notes: {e}")

        typer.echo("List of notes:")
        for note in notes:
            typer.echo(format_note_line(note, include_content=False))

    # -----------------------------------------------------------------------
    # notekeeper update <id> <content>
    # -----------------------------------------------------------------------
    @app.command("update", context_settings=_ID_COMMAND_SETTINGS)
    def update_note(
        note_id: Optional[str] = typer.Argument(None, help="ID of the note to update."),
        content: Optional[str] = typer.Argument(None, help="New content for the note."),
    ) -> None:
        """Update content of a note."""
        if not note_id:
            typer.echo("Please provide ID of note to update.")
            return

        try:
            parsed_id = parse_note_id(note_id)
        except InvalidNoteID as e:
            fail(str(e))

        if not content:
            typer.echo("Please provide content to update note.")
            return

        log_verbose(f"Updating note {parsed_id}...", state["verbose"])
        try:
            storage.update_content(parsed_id, content)
        except NotekeeperError as e:
            fail(f"updating note: {e}")

        typer.echo(f"Updated note with ID {parsed_id}")

    # -----------------------------------------------------------------------
    # notekeeper search <keyword>
    # -----------------------------------------------------------------------
    @app.command("search")
    def search_notes(
        keyword: Optional[str] = typer.Argument(
            None, help="Case-sensitive text to look for in titles and content."
        ),
    ) -> None:
        """Search notes by keyword."""
        if not keyword:
            typer.echo("Please provide a keyword to search for notes.")
            return

        try:
            notes = storage.search_notes(keyword)
        except NotekeeperError as e:
            fail(f"searching notes: {e}")

        if not notes:
            typer.echo(f"No notes found for keyword: {keyword}")
            return

        typer.echo(f"Notes found for keyword '{keyword}':")
        for note in notes:
            typer.echo(format_note_line(note))

    return app
