"""
Exploration of a word's connected component.
"""

from __future__ import annotations

import logging
from collections.abc import Container

from wordladder.errors import WordNotInDictionaryError
from wordladder.graph.bfs import PathBFS, WordPath
from wordladder.search.results import ComponentResult

logger = logging.getLogger(__name__)


class ComponentExplorer:
    """
    Runs a breadth-first traversal to exhaustion from a start word.

    Reports how many words are reachable and the longest path the frontier
    ever held. Since BFS paths are shortest paths, that is a route to one of
    the words farthest from the start. Finding the longest simple path is
    NP-hard and is not attempted.
    """

    def __init__(self, words: Container[str]) -> None:
        self._words = words
        self._bfs = PathBFS(words)

    def run(self, start: str) -> ComponentResult:
        """
        Explore the component containing `start`.

        Raises:
            WordNotInDictionaryError: If start is not in the dictionary
        """
        if start not in self._words:
            raise WordNotInDictionaryError(start)

        longest: WordPath | None = None

        def track_longest(path: WordPath) -> bool:
            nonlocal longest
            # Strictly longer only: the first path of a length is kept
            if longest is None or path.length > longest.length:
                longest = path
            return False

        outcome = self._bfs.run(start, track_longest)
        longest_path = longest.words if longest is not None else [start]

        logger.info(
            f"Component of '{start}': {outcome.visited_count:,} words, "
            f"farthest at distance {len(longest_path) - 1}"
        )
        return ComponentResult(
            start=start,
            size=outcome.visited_count,
            longest_path=longest_path,
            expanded=outcome.expanded,
        )
