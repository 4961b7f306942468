"""
logging_utils.py

A small collection of logging helpers used across notekeeper.

Library modules log through `logging.getLogger(__name__)` and stay silent
until the CLI calls `configure_logging`. User-facing progress lines for
`--verbose` go through `log_verbose`, which prints via Typer so they stay
consistent with the rest of the CLI output.
"""

import logging
import sys
from typing import Union

import typer

PACKAGE_LOGGER = "notekeeper"

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


class _StderrHandler(logging.StreamHandler):
    """
    StreamHandler that always writes to whatever sys.stderr currently is.

    Typer's CliRunner and pytest's capsys swap sys.stderr per invocation, and
    the package handler outlives any single invocation. Resolving the stream
    on every emit keeps log lines in the captured output instead of a stale,
    possibly closed stream. `stream` is read-only, so setStream() is not
    supported; StreamHandler.__init__ is skipped because it assigns `stream`.
    """

    def __init__(self) -> None:
        logging.Handler.__init__(self)

    @property
    def stream(self):  # type: ignore[override]
        return sys.stderr


def configure_logging(level: Union[int, str] = logging.WARNING) -> logging.Logger:
    """
    Attach a stderr handler to the package logger and set its level.

    Safe to call more than once: the handler is added only on the first call,
    later calls just adjust the level.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    if not any(isinstance(h, _StderrHandler) for h in logger.handlers):
        handler = _StderrHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger


def log_verbose(message: str, verbose: bool) -> None:
    """
    Print a high-level progress message to stderr when verbose mode is enabled.

    Parameters
    ----------
    message : str
        Short, plain-English description of what the CLI is doing
        (e.g., "Creating note 'Groceries'...").

    verbose : bool
        Whether verbose mode is active. When False, this function does
        nothing.

    Notes
    -----
    Progress lines go to stderr so stdout carries only command results
    ("Created a new note with ID 3", listings), which scripts may parse.
    """
    if verbose:
        typer.echo(message, err=True)
