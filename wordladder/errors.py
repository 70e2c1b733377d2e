"""Custom exceptions for the Word Ladder Explorer.

Every error carries the process exit code the CLI reports for it.
"""

from __future__ import annotations

from wordladder.config import (
    EXIT_DICTIONARY,
    EXIT_LENGTH_MISMATCH,
    EXIT_MISSING_WORD,
    EXIT_USAGE,
)


class WordLadderError(Exception):
    """Base exception for the Word Ladder Explorer."""

    exit_code = EXIT_USAGE

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ConfigurationError(WordLadderError):
    """Raised when the command line cannot be used (e.g. wrong argument count)."""

    exit_code = EXIT_USAGE


class ResourceError(WordLadderError):
    """Raised when the dictionary file cannot be opened, read or decoded."""

    exit_code = EXIT_DICTIONARY


class PreconditionError(WordLadderError):
    """Raised when query words are unusable. Detected before any traversal."""


class WordNotInDictionaryError(PreconditionError):
    """Raised when a begin or end word is absent from the dictionary."""

    exit_code = EXIT_MISSING_WORD

    def __init__(self, word: str) -> None:
        self.word = word
        super().__init__(f"Word {word} is not in dictionary.")


class WordLengthMismatchError(PreconditionError):
    """Raised when ladder begin and end words differ in length."""

    exit_code = EXIT_LENGTH_MISMATCH

    def __init__(self, begin: str, end: str) -> None:
        self.begin = begin
        self.end = end
        super().__init__("Word lengths must equal.")
