"""
notekeeper: a command-line note manager backed by a single SQLite file.
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
