"""Exceptions raised by the search server.

Every exception carries an ``ErrorKind`` so callers can branch on the kind of
failure without matching on concrete exception types.
"""

from enum import Enum


class ErrorKind(Enum):
    INVALID_ARGUMENT = "invalid_argument"
    OUT_OF_RANGE = "out_of_range"
    NOT_FOUND = "not_found"


class SearchServerError(Exception):
    """Base class for all search server errors."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvalidArgumentError(SearchServerError, ValueError):
    """Bad document id, invalid characters, empty query or malformed minus word."""

    kind = ErrorKind.INVALID_ARGUMENT


class OutOfRangeError(SearchServerError, IndexError):
    """Positional lookup outside the range of added documents."""

    kind = ErrorKind.OUT_OF_RANGE


class DocumentNotFoundError(SearchServerError, KeyError):
    """Lookup of a document id that was never added."""

    kind = ErrorKind.NOT_FOUND
