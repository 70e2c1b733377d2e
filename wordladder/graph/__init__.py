"""
Graph traversal module.

Provides the implicit word-ladder graph and breadth-first traversal over it:
- neighbors: adjacency by single-letter substitution
- PathBFS: FIFO traversal carrying path state through the frontier
- WordPath: handle to a path stored in a traversal's PathArena
"""

from wordladder.graph.adjacency import neighbors
from wordladder.graph.bfs import PathArena, PathBFS, TraversalOutcome, WordPath

__all__ = [
    "neighbors",
    "PathArena",
    "PathBFS",
    "TraversalOutcome",
    "WordPath",
]
