# ABOUTME: Unit tests for heuristic author extraction from OCR text.
# ABOUTME: Covers the "by"/"author"/"written by" patterns, their guards, and the adjacency fallback.

from shelfmark.metadata.authors import AUTHOR_RULES, extract_author


class TestLinePatterns:
    """Explicit author lines."""

    def test_by_line(self) -> None:
        """A "by X" line names the author."""
        assert extract_author("The Hobbit\nby J.R.R. Tolkien\n") == "J.R.R. Tolkien"

    def test_by_is_case_insensitive(self) -> None:
        """The marker may be capitalized."""
        assert extract_author("BY Ursula K. Le Guin") == "Ursula K. Le Guin"

    def test_author_label(self) -> None:
        """An "Author:" label names the author."""
        assert extract_author("Author: Octavia E. Butler") == "Octavia E. Butler"

    def test_written_by(self) -> None:
        """A "Written by" line names the author."""
        assert extract_author("Coraline\nWritten by Neil Gaiman") == "Neil Gaiman"

    def test_first_matching_line_wins(self) -> None:
        """Lines are scanned top to bottom."""
        assert extract_author("by Alice Walker\nby Toni Morrison") == "Alice Walker"

    def test_by_rejects_page_noise(self) -> None:
        """"by Page 5" style captures are rejected."""
        assert extract_author("by Page 5") is None
        assert extract_author("by chapter two") is None

    def test_capture_too_short(self) -> None:
        """Captures of two characters or fewer are rejected."""
        assert extract_author("by Al") is None

    def test_rule_order(self) -> None:
        """Rules are tried in by, author, written-by order."""
        assert [rule.name for rule in AUTHOR_RULES] == ["by", "author", "written_by"]


class TestAdjacencyFallback:
    """A long title line directly followed by a name line."""

    def test_name_after_title(self) -> None:
        """A capitalized name under a long title is taken as the author."""
        assert extract_author("The Left Hand of Darkness\nUrsula Leguin") == "Ursula Leguin"

    def test_title_line_must_be_long(self) -> None:
        """Short lines above a name do not trigger the fallback."""
        assert extract_author("Dune\nFrank Herbert") is None

    def test_all_caps_name_rejected(self) -> None:
        """Shouting lines are not names."""
        assert extract_author("The Left Hand of Darkness\nURSULA LEGUIN") is None

    def test_noise_word_rejected(self) -> None:
        """Structural words are not names."""
        assert extract_author("A Long Introduction\nChapter One") is None
        assert extract_author("A Long Introduction\nIsbn") is None

    def test_line_pattern_preferred(self) -> None:
        """An explicit pattern anywhere beats the adjacency heuristic."""
        text = "The Left Hand of Darkness\nUrsula Leguin\nby Someone Else"
        assert extract_author(text) == "Someone Else"

    def test_nothing_found(self) -> None:
        """Text with no author cues yields None."""
        assert extract_author("") is None
        assert extract_author("just some words\nand more words") is None
