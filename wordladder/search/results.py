"""
Result dataclasses for word-ladder queries.
"""

from __future__ import annotations

from dataclasses import dataclass


def format_path(words: list[str]) -> str:
    """Render a path as `[ A -> B -> C ]`."""
    return f"[ {' -> '.join(words)} ]"


@dataclass
class LadderResult:
    """
    Outcome of a shortest-ladder search.

    Attributes:
        begin: First word of the ladder
        end: Target word
        path: Shortest ladder (begin and end included), or None if none exists
        visited_count: Words discovered before the search stopped
        expanded: Paths expanded before the search stopped
    """

    begin: str
    end: str
    path: list[str] | None
    visited_count: int = 0
    expanded: int = 0

    @property
    def found(self) -> bool:
        return self.path is not None

    @property
    def length(self) -> int:
        """Number of words on the ladder, 0 if none was found."""
        return len(self.path) if self.path else 0

    def to_dict(self) -> dict:
        return {
            "begin": self.begin,
            "end": self.end,
            "found": self.found,
            "path": self.path,
            "length": self.length,
        }


@dataclass
class ComponentResult:
    """
    Outcome of exploring a connected component.

    `longest_path` is a shortest path from `start` to one of the words
    farthest from it, not the longest simple path in the component.

    Attributes:
        start: Word the exploration started from
        size: Number of words in the component, start included
        longest_path: Longest path held by the BFS frontier
        expanded: Paths expanded during the exploration
    """

    start: str
    size: int
    longest_path: list[str]
    expanded: int = 0

    @property
    def length(self) -> int:
        return len(self.longest_path)

    def to_dict(self) -> dict:
        return {
            "start": self.start,
            "size": self.size,
            "longest_path": self.longest_path,
            "length": self.length,
        }
