"""
Error kinds raised by the search server.

Every failure is reported synchronously as one of three exception classes,
so callers can branch on the kind:

- InvalidArgumentError: bad document id, duplicate id, invalid characters,
  malformed query syntax, unknown status name
- DocumentNotFoundError: unknown document id in match/lookup
- OutOfRangeError: positional id lookup out of bounds

Each kind also derives from the matching builtin (ValueError, KeyError,
IndexError) so generic handlers keep working.
"""


class SearchServerError(Exception):
    """Base class for all search server errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message


class InvalidArgumentError(SearchServerError, ValueError):
    """Input rejected before any state was touched"""


class DocumentNotFoundError(SearchServerError, KeyError):
    """Document id was never added"""


class OutOfRangeError(SearchServerError, IndexError):
    """Insertion position outside [0, document count)"""
