"""
Shortest word ladder between two words.

Breadth-first, so the first path reaching the target is a shortest one.
Among equally short ladders, the one found first by neighbour enumeration
order wins.
"""

from __future__ import annotations

import logging
from collections.abc import Container

from wordladder.errors import WordLengthMismatchError, WordNotInDictionaryError
from wordladder.graph.bfs import PathBFS, WordPath
from wordladder.search.results import LadderResult

logger = logging.getLogger(__name__)


class ShortestPathSearch:
    """
    Finds a shortest ladder from a begin word to an end word.
    """

    def __init__(self, words: Container[str]) -> None:
        """
        Initialize the search.

        Args:
            words: Dictionary defining the graph
        """
        self._words = words
        self._bfs = PathBFS(words)

    def validate(self, begin: str, end: str) -> None:
        """
        Check the query can run.

        Raises:
            WordNotInDictionaryError: If begin or end is not in the dictionary
            WordLengthMismatchError: If begin and end differ in length
        """
        if begin not in self._words:
            raise WordNotInDictionaryError(begin)
        if end not in self._words:
            raise WordNotInDictionaryError(end)
        if len(begin) != len(end):
            raise WordLengthMismatchError(begin, end)

    def run(self, begin: str, end: str) -> LadderResult:
        """
        Search for a shortest ladder.

        Returns:
            LadderResult; its path is None when no ladder exists, which is a
            valid answer rather than an error

        Raises:
            WordNotInDictionaryError: If begin or end is not in the dictionary
            WordLengthMismatchError: If begin and end differ in length
        """
        self.validate(begin, end)

        def reached_end(path: WordPath) -> bool:
            return path.terminates_at(end)

        outcome = self._bfs.run(begin, reached_end)
        path = outcome.stopped_at.words if outcome.stopped_at else None

        if path:
            logger.info(f"Found ladder ({len(path) - 1} steps): {' -> '.join(path)}")
        else:
            logger.info(f"No ladder from '{begin}' to '{end}'")

        return LadderResult(
            begin=begin,
            end=end,
            path=path,
            visited_count=outcome.visited_count,
            expanded=outcome.expanded,
        )
