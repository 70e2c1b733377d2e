"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import random
from pathlib import Path

import pytest

from wordladder.data.loader import WordSet


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def ladder_words() -> WordSet:
    """Dictionary with a single ladder CAT -> COT -> COG -> DOG."""
    return WordSet(["CAT", "COT", "COG", "DOG", "COW"])


@pytest.fixture
def square_words() -> WordSet:
    """Four words forming a cycle: CAT-COT-COG-CAG-CAT."""
    return WordSet(["CAT", "COT", "COG", "CAG"])


@pytest.fixture
def write_dictionary(tmp_path: Path):
    """Return a helper writing dictionary text to a temporary file."""

    def _write(content: str, name: str = "words.txt") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8", newline="")
        return path

    return _write


@pytest.fixture
def ladder_file(write_dictionary) -> Path:
    """Text dictionary holding the CAT -> DOG ladder words."""
    return write_dictionary("CAT\nCOT\nCOG\nDOG\nCOW\n")


def random_dictionary(seed: int, size: int = 40, length: int = 3, letters: str = "ABCD") -> WordSet:
    """Seeded random dictionary over a small alphabet, so words connect often."""
    rng = random.Random(seed)
    words = {"".join(rng.choice(letters) for _ in range(length)) for _ in range(size)}
    return WordSet(words)


@pytest.fixture(params=range(8))
def random_words(request) -> WordSet:
    """A handful of random synthetic dictionaries."""
    return random_dictionary(seed=request.param)
