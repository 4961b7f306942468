"""
Parameter validation for storage operations.

Every storage operation validates its arguments before any query runs. Two
typed validators cover all parameters:

    • validate_id   → integers must lie in [MIN_ID, MAX_ID]
    • validate_text → strings must have length in [1, MAX_TEXT_LENGTH]

Both return the value unchanged so they can be used inline.
"""

from notekeeper.errors import InvalidParameter

MIN_ID = 1
MAX_ID = 2**31 - 1

MAX_TEXT_LENGTH = 256000


def validate_id(value: int) -> int:
    """Return `value` if it is a usable note id, else raise InvalidParameter."""
    if value < MIN_ID or value > MAX_ID:
        raise InvalidParameter("invalid number")
    return value


def validate_text(value: str) -> str:
    """
    Return `value` if its length is within bounds, else raise InvalidParameter.

    Length is measured in characters, not encoded bytes.
    """
    if len(value) < 1 or len(value) > MAX_TEXT_LENGTH:
        raise InvalidParameter("invalid param length")
    return value
