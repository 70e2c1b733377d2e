"""
Breadth-first traversal of the word-ladder graph.

The frontier is a FIFO queue of paths. Paths live in a per-traversal arena
where every node stores its word and a back-reference to its parent, so a
frontier entry is a single index and memory stays proportional to the number
of visited words. Full word lists are only rebuilt for reported results.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Container
from dataclasses import dataclass

from wordladder.graph.adjacency import neighbors

logger = logging.getLogger(__name__)


class PathArena:
    """
    Append-only store of path nodes for one traversal.

    Node i is the path ending in word(i); its prefix is the path ending at
    parent(i). Root nodes have no parent.
    """

    def __init__(self) -> None:
        self._words: list[str] = []
        self._parents: list[int | None] = []
        self._lengths: list[int] = []

    def __len__(self) -> int:
        return len(self._words)

    def add(self, word: str, parent: int | None = None) -> int:
        """Append a node extending `parent` by `word` and return its index."""
        length = 1 if parent is None else self._lengths[parent] + 1
        self._words.append(word)
        self._parents.append(parent)
        self._lengths.append(length)
        return len(self._words) - 1

    def word(self, node: int) -> str:
        return self._words[node]

    def parent(self, node: int) -> int | None:
        return self._parents[node]

    def length(self, node: int) -> int:
        return self._lengths[node]

    def root(self, node: int) -> int:
        """Walk parent links up to the path's first node."""
        while self._parents[node] is not None:
            node = self._parents[node]
        return node

    def words(self, node: int) -> list[str]:
        """Rebuild the path ending at `node`, first word first."""
        path = []
        current: int | None = node
        while current is not None:
            path.append(self._words[current])
            current = self._parents[current]
        path.reverse()
        return path


@dataclass(frozen=True)
class WordPath:
    """
    A path held by the traversal, addressed by its last node in the arena.

    Cheap to create; `words` walks the parent links on each access.
    """

    arena: PathArena
    node: int

    @property
    def first(self) -> str:
        return self.arena.word(self.arena.root(self.node))

    @property
    def last(self) -> str:
        return self.arena.word(self.node)

    @property
    def length(self) -> int:
        """Number of words on the path (edges + 1)."""
        return self.arena.length(self.node)

    @property
    def words(self) -> list[str]:
        return self.arena.words(self.node)

    def terminates_at(self, word: str) -> bool:
        return self.last == word

    def extend(self, word: str) -> WordPath:
        """New path equal to this one with `word` appended."""
        return WordPath(self.arena, self.arena.add(word, self.node))

    def __len__(self) -> int:
        return self.length


# Called with each dequeued path; returning True stops the traversal.
Observer = Callable[[WordPath], bool]


@dataclass
class TraversalOutcome:
    """
    What one PathBFS run leaves behind.

    Attributes:
        stopped_at: Path the observer stopped on, or None if the frontier emptied
        visited: Every word placed on some path during the run
        expanded: Number of paths whose neighbours were generated
    """

    stopped_at: WordPath | None
    visited: set[str]
    expanded: int

    @property
    def visited_count(self) -> int:
        return len(self.visited)


class PathBFS:
    """
    Breadth-first traversal over the implicit word-ladder graph.

    A word is marked visited the moment it is first discovered, so it joins
    exactly one path, and that path is a shortest one from the start. Each
    call to run() owns a fresh frontier, visited set and arena.
    """

    def __init__(self, words: Container[str]) -> None:
        """
        Initialize the traversal.

        Args:
            words: Dictionary defining the graph's nodes
        """
        self._words = words

    def run(self, start: str, observer: Observer) -> TraversalOutcome:
        """
        Traverse from `start` until the observer stops or the frontier empties.

        Each dequeued path goes to the observer before it is expanded.

        Args:
            start: First word of every path
            observer: Callback deciding whether to stop on a dequeued path

        Returns:
            TraversalOutcome for this run
        """
        arena = PathArena()
        frontier: deque[WordPath] = deque([WordPath(arena, arena.add(start))])
        visited = {start}
        expanded = 0
        stopped_at = None

        while frontier:
            path = frontier.popleft()

            if observer(path):
                stopped_at = path
                break

            expanded += 1
            for word in neighbors(path.last, self._words):
                if word in visited:
                    continue
                visited.add(word)
                frontier.append(path.extend(word))

        logger.debug(
            f"BFS from '{start}': visited {len(visited):,} words, "
            f"expanded {expanded:,} paths, arena holds {len(arena):,} nodes"
        )
        return TraversalOutcome(stopped_at=stopped_at, visited=visited, expanded=expanded)
