"""
Adjacency in the word-ladder graph.

Two words are adjacent when they differ in exactly one position. Neighbours
are generated on demand instead of materialising the graph.
"""

from __future__ import annotations

from collections.abc import Container

from wordladder.config import ALPHABET


def neighbors(word: str, words: Container[str], alphabet: str = ALPHABET) -> list[str]:
    """
    List the dictionary words one substitution away from `word`.

    Candidates are tried position by position, and within a position in
    alphabet order, so the result order is deterministic. Each
    (position, letter) pair is tried once, hence no duplicates.

    Args:
        word: Word to expand
        words: Dictionary to test candidates against
        alphabet: Letters substituted at each position

    Returns:
        Adjacent words, never including `word` itself
    """
    adjacent = []
    for i, current in enumerate(word):
        prefix, suffix = word[:i], word[i + 1:]
        for letter in alphabet:
            if letter == current:
                continue
            candidate = prefix + letter + suffix
            if candidate in words:
                adjacent.append(candidate)
    return adjacent
