"""
Unit tests for neighbour generation in the word-ladder graph.
"""

from wordladder.data.loader import WordSet
from wordladder.graph import neighbors


def differing_positions(a: str, b: str) -> int:
    return sum(1 for x, y in zip(a, b) if x != y)


class TestNeighbors:
    """Test the single-substitution neighbour contract."""

    def test_order_by_position_then_letter(self):
        """Neighbours should be grouped by position, letters ascending."""
        words = WordSet(["CAT", "BAT", "HAT", "CUT", "COT", "CAB", "CAR", "DOG"])
        assert neighbors("CAT", words) == ["BAT", "HAT", "COT", "CUT", "CAB", "CAR"]

    def test_excludes_word_itself(self, ladder_words):
        """The word should never be its own neighbour."""
        assert "COT" not in neighbors("COT", ladder_words)

    def test_only_dictionary_words(self, ladder_words):
        """Candidates outside the dictionary should be dropped."""
        assert neighbors("COT", ladder_words) == ["CAT", "COG", "COW"]

    def test_word_not_in_dictionary(self, ladder_words):
        """A word absent from the dictionary can still be expanded."""
        assert neighbors("DOT", ladder_words) == ["COT", "DOG"]

    def test_isolated_word(self):
        """A word with no single-letter relatives has no neighbours."""
        assert neighbors("CAT", WordSet(["CAT", "DOG"])) == []

    def test_empty_word(self):
        """The empty word has no positions to substitute."""
        assert neighbors("", WordSet(["", "A"])) == []

    def test_ignores_other_lengths(self):
        """Words of other lengths are never adjacent."""
        words = WordSet(["CAT", "CATS", "CA", "AT"])
        assert neighbors("CAT", words) == []

    def test_lowercase_entries_unreachable(self):
        """Only uppercase letters are substituted."""
        words = WordSet(["CAT", "cAT", "COT"])
        assert neighbors("CAT", words) == ["COT"]

    def test_custom_alphabet(self):
        """Only letters of the given alphabet are tried."""
        words = WordSet(["AB", "BB", "CB", "AA"])
        assert neighbors("AB", words, alphabet="AB") == ["BB", "AA"]

    def test_properties_on_random_dictionaries(self, random_words):
        """Every neighbour should be one substitution away, without repeats."""
        for word in random_words:
            adjacent = neighbors(word, random_words)
            assert len(adjacent) == len(set(adjacent))
            for other in adjacent:
                assert other in random_words
                assert len(other) == len(word)
                assert other != word
                assert differing_positions(word, other) == 1

    def test_complete_on_random_dictionaries(self, random_words):
        """Every dictionary word one substitution away should be found."""
        for word in random_words:
            expected = {
                other for other in random_words
                if len(other) == len(word) and differing_positions(word, other) == 1
            }
            assert set(neighbors(word, random_words)) == expected
