"""
Arrata - Engine Errors

Exceptions raised by the notation codecs and the roll engine. Both derive
from the builtin that callers would already catch (ValueError for bad text,
RuntimeError for a roll that could not complete).
"""

from enum import Enum, auto


class ParseErrorKind(Enum):
    """Ways a piece of notation can be malformed."""
    MALFORMED_QUANTITY = auto()  # recovered locally, defaults to 1
    INVALID_FORMAT = auto()      # surfaced to the caller


class NotationError(ValueError):
    """Raised when stat, obstacle or roll notation cannot be read."""

    def __init__(self, kind: ParseErrorKind, text: str, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.text = text


class DiceLimitError(RuntimeError):
    """Raised when a roll draws more dice than the configured cap."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"Roll exceeded the limit of {limit} dice.")
        self.limit = limit
