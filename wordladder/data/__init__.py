"""
Dictionary loading module.

Provides the immutable WordSet the traversal engine tests membership against.

Usage:
    from wordladder.data import load_dictionary

    words = load_dictionary("words.txt")
    "CAT" in words
"""

from wordladder.data.loader import WordSet, load_dictionary

__all__ = ["WordSet", "load_dictionary"]
