"""
WordSet: the immutable dictionary behind the word-ladder graph.

Usage:
    from wordladder.data.loader import WordSet

    words = WordSet.from_file("words.txt")
    words.has_word("CAT")
    words.stats()

Entries are kept exactly as read. Query words are uppercased by the CLI but
dictionary entries are not, so lowercase entries never match; the loader
warns when it sees any.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

import msgpack

from wordladder.config import DICTIONARY_ENCODING, MSGPACK_SUFFIX
from wordladder.errors import ResourceError

logger = logging.getLogger(__name__)


class WordSet:
    """
    Immutable set of dictionary words.

    Membership is the only operation the traversal needs; the rest is
    reporting.

    Attributes:
        source: Path the words were loaded from, or None if built in memory
    """

    def __init__(self, words: Iterable[str], source: Path | None = None) -> None:
        self._words: frozenset[str] = frozenset(words)
        self.source = source

    @classmethod
    def from_file(cls, path: str | Path) -> WordSet:
        """
        Load a dictionary file.

        Files ending in .msgpack hold a packed array of strings; anything
        else is read as newline-delimited text, one entry per line.

        Raises:
            ResourceError: If the file cannot be opened, read or decoded
        """
        path = Path(path)
        logger.info(f"Loading dictionary from {path}...")

        if path.suffix == MSGPACK_SUFFIX:
            words = _read_msgpack(path)
        else:
            words = _read_lines(path)

        word_set = cls(words, source=path)
        logger.info(f"Loaded {word_set.word_count():,} words")

        lowercase = word_set.lowercase_count()
        if lowercase:
            logger.warning(
                f"{lowercase:,} dictionary entries contain lowercase letters "
                "and can never match an (uppercased) query word"
            )
        return word_set

    # =========================================================================
    # Core Accessors
    # =========================================================================

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({len(self._words)} words)"

    def has_word(self, word: str) -> bool:
        """Check if a word is in the dictionary."""
        return word in self._words

    def word_count(self) -> int:
        """Total number of distinct entries."""
        return len(self._words)

    def lowercase_count(self) -> int:
        """Number of entries holding at least one lowercase letter."""
        return sum(1 for w in self._words if w != w.upper())

    def stats(self) -> dict:
        """Get statistics about the loaded words."""
        lengths: dict[int, int] = {}
        for word in self._words:
            lengths[len(word)] = lengths.get(len(word), 0) + 1
        return {
            "total_words": len(self._words),
            "word_lengths": dict(sorted(lengths.items())),
            "lowercase_entries": self.lowercase_count(),
            "has_empty_entry": "" in self._words,
        }


def _read_lines(path: Path) -> list[str]:
    """Read one entry per line, stripping only the line terminator."""
    try:
        # newline="\n" keeps a stray "\r" in the entry, as it was written;
        # undecodable bytes survive as lone surrogates and never match a query
        with open(
            path, encoding=DICTIONARY_ENCODING, errors="surrogateescape", newline="\n"
        ) as f:
            return [line[:-1] if line.endswith("\n") else line for line in f]
    except OSError as e:
        logger.error(f"Cannot read dictionary {path}: {e}")
        raise ResourceError("Failed to read dictionary file.") from e


def _read_msgpack(path: Path) -> list[str]:
    """Read a msgpack array of strings."""
    try:
        with open(path, "rb") as f:
            words = msgpack.load(f, raw=False)
    except (OSError, ValueError, msgpack.UnpackException) as e:
        logger.error(f"Cannot read dictionary {path}: {e}")
        raise ResourceError("Failed to read dictionary file.") from e

    if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
        logger.error(f"Dictionary {path} is not a msgpack array of strings")
        raise ResourceError("Failed to read dictionary file.")
    return words


def load_dictionary(path: str | Path) -> WordSet:
    """Load a dictionary file into a WordSet."""
    return WordSet.from_file(path)
