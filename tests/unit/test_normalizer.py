# ABOUTME: Unit tests for title normalization and concatenated-title splitting.
# ABOUTME: Covers punctuation/whitespace handling, idempotence, and CamelCase/separator splits.

import pytest

from shelfmark.matching.normalizer import normalize_title, split_concatenated


class TestNormalizeTitle:
    """Tests for normalize_title."""

    def test_lowercases(self) -> None:
        """Titles are compared case-insensitively."""
        assert normalize_title("The HOBBIT") == "the hobbit"

    def test_strips_punctuation(self) -> None:
        """Non-word, non-space characters are removed."""
        assert normalize_title("Harry Potter: The Philosopher's Stone!") == (
            "harry potter the philosophers stone"
        )

    def test_collapses_and_trims_whitespace(self) -> None:
        """Whitespace runs collapse to one space and ends are trimmed."""
        assert normalize_title("  The   Great\tGatsby \n") == "the great gatsby"

    def test_keeps_digits_and_underscores(self) -> None:
        """Digits and underscores are word characters and survive."""
        assert normalize_title("Catch-22") == "catch22"
        assert normalize_title("snake_case") == "snake_case"

    def test_keeps_accented_letters(self) -> None:
        """Accented letters are word characters."""
        assert normalize_title("Café Society") == "café society"

    def test_punctuation_only_becomes_empty(self) -> None:
        """A title with no word characters normalizes to the empty string."""
        assert normalize_title("?!...") == ""
        assert normalize_title("") == ""

    @pytest.mark.parametrize(
        "title",
        ["The Great Gatsby", "  A  Tale of Two Cities!! ", "1984", "Don Quixote, Part II", "---"],
    )
    def test_idempotent(self, title: str) -> None:
        """Normalizing twice gives the same result as normalizing once."""
        once = normalize_title(title)
        assert normalize_title(once) == once


class TestSplitConcatenated:
    """Tests for split_concatenated."""

    def test_camel_case_split(self) -> None:
        """CamelCase runs are split at case boundaries."""
        assert split_concatenated("TheGreatGatsby") == "The Great Gatsby"

    def test_underscore_split(self) -> None:
        """Underscores separate words."""
        assert split_concatenated("The_Hobbit") == "The Hobbit"

    def test_letter_digit_boundary(self) -> None:
        """Letters and digits inside a CamelCase run are separated."""
        assert split_concatenated("FahrenheitFour51") == "Fahrenheit Four 51"

    def test_short_title_unchanged(self) -> None:
        """Short single words are left alone."""
        assert split_concatenated("Dune") == "Dune"

    def test_spaced_title_unchanged(self) -> None:
        """A normally spaced title is returned as is."""
        assert split_concatenated("The Name of the Rose") == "The Name of the Rose"

    def test_short_hyphenated_unchanged(self) -> None:
        """Hyphenated titles with short parts are not split."""
        assert split_concatenated("Catch-22") == "Catch-22"

    def test_empty(self) -> None:
        """Empty input is returned unchanged."""
        assert split_concatenated("") == ""
