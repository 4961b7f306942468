import io
import logging
import sys

from notekeeper.config import DEFAULT_STORAGE_PATH, load_settings
from notekeeper.logging_utils import PACKAGE_LOGGER, configure_logging, log_verbose


# ---------------------------------------------------------------------------
# Settings resolution
# ---------------------------------------------------------------------------
def test_load_settings_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("NOTEKEEPER_STORAGE_PATH", raising=False)
    monkeypatch.delenv("NOTEKEEPER_LOG_LEVEL", raising=False)

    settings = load_settings()

    assert settings.storage_path == DEFAULT_STORAGE_PATH == "storage.db"
    assert settings.log_level == "WARNING"


def test_load_settings_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("NOTEKEEPER_STORAGE_PATH", str(tmp_path / "custom.db"))
    monkeypatch.setenv("NOTEKEEPER_LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.storage_path == str(tmp_path / "custom.db")
    assert settings.log_level == "DEBUG"


def test_empty_storage_path_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("NOTEKEEPER_STORAGE_PATH", "")

    assert load_settings().storage_path == DEFAULT_STORAGE_PATH


# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------
def test_configure_logging_does_not_duplicate_handlers():
    logger = configure_logging(logging.INFO)
    count = len(logger.handlers)

    configure_logging(logging.DEBUG)

    assert len(logger.handlers) == count
    assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG


def test_configure_logging_writes_to_current_stderr(capsys):
    configure_logging(logging.INFO)

    logging.getLogger("notekeeper.test").info("hello from the test")

    assert "hello from the test" in capsys.readouterr().err


def test_log_handler_follows_stderr_swaps(monkeypatch):
    configure_logging(logging.INFO)
    logger = logging.getLogger("notekeeper.test")

    first, second = io.StringIO(), io.StringIO()
    monkeypatch.setattr(sys, "stderr", first)
    logger.info("first line")
    monkeypatch.setattr(sys, "stderr", second)
    logger.info("second line")

    assert "first line" in first.getvalue()
    assert "second line" not in first.getvalue()
    assert "second line" in second.getvalue()


# ---------------------------------------------------------------------------
# Verbose progress lines
# ---------------------------------------------------------------------------
def test_log_verbose_writes_to_stderr_only(capsys):
    log_verbose("Opening storage...", verbose=True)

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Opening storage..." in captured.err


def test_log_verbose_is_silent_when_disabled(capsys):
    log_verbose("Opening storage...", verbose=False)

    captured = capsys.readouterr()
    assert captured.out == "" and captured.err == ""
