"""Exception types raised by the exam core."""

from __future__ import annotations


class WordExamError(Exception):
    """Base class for all exam errors."""


class InvalidArgumentError(WordExamError, ValueError):
    """Raised for an unknown word, a bad option index or a non-positive setting."""


class WordLibraryUnavailableError(WordExamError):
    """Raised when the word-library source is missing or unusable."""


class SessionNotFoundError(WordExamError, KeyError):
    """Raised when a session id is not known to the exam manager."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message for HTTP details.
        return str(self.args[0]) if self.args else ""
