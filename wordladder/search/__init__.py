"""
Search module.

Provides the two queries over the word-ladder graph:
- ShortestPathSearch: shortest ladder between two words
- ComponentExplorer: size and longest BFS path of a word's component
- LadderResult / ComponentResult: query results
"""

from wordladder.search.explore import ComponentExplorer
from wordladder.search.ladder import ShortestPathSearch
from wordladder.search.results import ComponentResult, LadderResult, format_path

__all__ = [
    "ShortestPathSearch",
    "ComponentExplorer",
    "LadderResult",
    "ComponentResult",
    "format_path",
]
