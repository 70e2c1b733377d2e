"""
Word Ladder Explorer.

Finds shortest word ladders between dictionary words and explores the
connected components of the word-ladder graph.
"""

__version__ = "0.1.0"
