# ABOUTME: Heuristic author extraction from OCR text of a book cover or title page.
# ABOUTME: Tries "by X" style line patterns first, then a title/author adjacency fallback.

import re
from collections.abc import Callable
from dataclasses import dataclass

_BY_NOISE_RE = re.compile(r"^(page|chapter|table|index|copyright)", re.IGNORECASE)
_ADJACENT_NOISE_RE = re.compile(r"^(page|chapter|table|index|copyright|isbn)", re.IGNORECASE)
_CAPITALIZED_WORDS_RE = re.compile(r"^[A-Z][a-z]+(\s+[A-Z][a-z]+)*$")

_MIN_AUTHOR_LENGTH = 2
_MAX_AUTHOR_LENGTH = 100

# Adjacency fallback: a title-like line followed by a short name-like line.
_TITLE_LINE_MIN_LENGTH = 10
_ADJACENT_AUTHOR_MAX_LENGTH = 50


def _plausible_length(author: str) -> bool:
    return _MIN_AUTHOR_LENGTH < len(author) < _MAX_AUTHOR_LENGTH


def _not_by_noise(author: str) -> bool:
    return _plausible_length(author) and _BY_NOISE_RE.match(author) is None


@dataclass(frozen=True)
class AuthorRule:
    """A single line pattern: the first capture group is the candidate author."""

    name: str
    pattern: re.Pattern[str]
    accept: Callable[[str], bool]

    def apply(self, line: str) -> str | None:
        match = self.pattern.match(line)
        if match is None:
            return None
        author = match.group(1).strip()
        return author if self.accept(author) else None


AUTHOR_RULES: tuple[AuthorRule, ...] = (
    AuthorRule("by", re.compile(r"^by\s+(.+)$", re.IGNORECASE), _not_by_noise),
    AuthorRule("author", re.compile(r"^author[:\s]+(.+)$", re.IGNORECASE), _plausible_length),
    AuthorRule(
        "written_by", re.compile(r"^written by\s+(.+)$", re.IGNORECASE), _plausible_length
    ),
)


def _split_lines(text: str) -> list[str]:
    return [line.strip() for line in text.split("\n") if line.strip()]


def _looks_like_name(line: str) -> bool:
    return (
        _MIN_AUTHOR_LENGTH < len(line) < _ADJACENT_AUTHOR_MAX_LENGTH
        and _CAPITALIZED_WORDS_RE.match(line) is not None
        and line != line.upper()
        and _ADJACENT_NOISE_RE.match(line) is None
    )


def _author_after_title(lines: list[str]) -> str | None:
    """Cover layout heuristic: a long title line directly above a name line."""
    for current, following in zip(lines, lines[1:]):
        if len(current) > _TITLE_LINE_MIN_LENGTH and _looks_like_name(following):
            return following
    return None


def extract_author(text: str) -> str | None:
    """Find the most likely author name in OCR text.

    Scans lines top to bottom; on each line the rules in AUTHOR_RULES are
    tried in order and the first accepted capture wins. Only when no line
    matches any rule does the adjacency heuristic run.

    Returns:
        The author string, or None when nothing plausible was found.
    """
    lines = _split_lines(text)
    for line in lines:
        for rule in AUTHOR_RULES:
            author = rule.apply(line)
            if author is not None:
                return author
    return _author_after_title(lines)
