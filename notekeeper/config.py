# notekeeper/config.py

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_STORAGE_PATH = "storage.db"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class Settings:
    """Resolved runtime configuration."""

    storage_path: str = DEFAULT_STORAGE_PATH
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings() -> Settings:
    """
    Build Settings from the environment.

    A `.env` file in the working directory is loaded first, so either source
    can provide NOTEKEEPER_STORAGE_PATH and NOTEKEEPER_LOG_LEVEL. Unset or
    empty variables fall back to the defaults.
    """
    # Load environment variables from the .env file into the process environment
    load_dotenv()

    return Settings(
        storage_path=os.getenv("NOTEKEEPER_STORAGE_PATH") or DEFAULT_STORAGE_PATH,
        log_level=(os.getenv("NOTEKEEPER_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
    )
