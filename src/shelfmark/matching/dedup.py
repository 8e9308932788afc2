# ABOUTME: Layered fuzzy duplicate detection for book titles.
# ABOUTME: Decides whether a new title is already cataloged and reports the closest match.

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from shelfmark.matching.normalizer import normalize_title
from shelfmark.matching.similarity import similarity

T = TypeVar("T")

# Normalized titles shorter than this are never reported as duplicates.
MIN_TITLE_LENGTH = 3

# Containment rules only apply when both normalized titles are longer than this.
CONTAINMENT_MIN_LENGTH = 10
WORD_OVERLAP_RATIO = 0.7
SUBSTRING_MIN_LENGTH = 15

SIMILARITY_THRESHOLD = 0.85
SHORT_TITLE_LENGTH = 30
SHORT_TITLE_THRESHOLD = 0.75

# find_best_match reports the closest entry only above this score.
BEST_MATCH_THRESHOLD = 0.75

_LEADING_ARTICLES = ("the ", "a ", "an ")


@dataclass
class MatchResult(Generic[T]):
    """Outcome of comparing a title against existing catalog entries.

    Attributes:
        is_duplicate: Whether the title was judged to be already cataloged.
        matched_entry: The most similar existing entry, if one was close enough.
        similarity: Similarity score of matched_entry, in [0, 1].
    """

    is_duplicate: bool
    matched_entry: T | None = None
    similarity: float | None = None


def _title_of(record: Any) -> str:
    """Existing entries may be plain strings or anything with a .title."""
    if isinstance(record, str):
        return record
    return record.title


def _drop_leading_article(text: str) -> str:
    for article in _LEADING_ARTICLES:
        if text.startswith(article):
            return text[len(article):]
    return text


def _word_overlap_matches(new: str, existing: str) -> bool:
    """Most words of one title appear (as substrings) among the other's words."""
    words_new = new.split()
    words_existing = existing.split()
    if len(words_new) <= 2 or len(words_existing) <= 2:
        return False

    overlap = sum(
        1
        for word in words_new
        if any(other in word or word in other for other in words_existing)
    )
    min_words = min(len(words_new), len(words_existing))
    return overlap >= math.ceil(min_words * WORD_OVERLAP_RATIO)


def _contains_matches(new: str, existing: str) -> bool:
    if new in existing or existing in new:
        return min(len(new), len(existing)) > SUBSTRING_MIN_LENGTH
    return False


def _article_dropped(new: str, existing: str) -> bool:
    """Titles equal once a leading article is dropped (The Great Gatsby / Great Gatsby)."""
    return _drop_leading_article(new) == _drop_leading_article(existing)


def _matches(new: str, existing: str) -> bool:
    """Apply the per-entry rules to two already-normalized titles."""
    if new == existing:
        return True

    if len(new) > CONTAINMENT_MIN_LENGTH and len(existing) > CONTAINMENT_MIN_LENGTH:
        if _word_overlap_matches(new, existing):
            return True
        if _contains_matches(new, existing):
            return True
        if _article_dropped(new, existing):
            return True

    score = similarity(new, existing)
    if score > SIMILARITY_THRESHOLD:
        return True
    # Short titles: a few edits are a large relative change, so the lower bar
    # only applies when both sides are short.
    return (
        len(new) < SHORT_TITLE_LENGTH
        and len(existing) < SHORT_TITLE_LENGTH
        and score > SHORT_TITLE_THRESHOLD
    )


def is_duplicate(new_title: str, existing: Iterable[Any]) -> bool:
    """Decide whether new_title refers to a book already in existing.

    Rules are tried per existing entry in order: exact normalized match,
    word-overlap / containment for longer titles, then the two-tier
    similarity threshold. The first entry that matches by any rule wins.
    """
    normalized_new = normalize_title(new_title)
    if len(normalized_new) < MIN_TITLE_LENGTH:
        return False

    return any(
        _matches(normalized_new, normalize_title(_title_of(record)))
        for record in existing
    )


def find_best_match(new_title: str, existing: Iterable[T]) -> MatchResult[T]:
    """Report the existing entry most similar to new_title.

    Advisory only: uses a flat threshold rather than the tiered duplicate
    rules, so is_duplicate stays the authority on duplicate status. The
    returned result's is_duplicate is always False.
    """
    normalized_new = normalize_title(new_title)
    best: T | None = None
    best_score = 0.0

    for record in existing:
        score = similarity(normalized_new, normalize_title(_title_of(record)))
        if score > best_score:
            best, best_score = record, score

    if best is not None and best_score > BEST_MATCH_THRESHOLD:
        return MatchResult(is_duplicate=False, matched_entry=best, similarity=best_score)
    return MatchResult(is_duplicate=False)


def check_duplicate(new_title: str, existing: Iterable[T]) -> MatchResult[T]:
    """Duplicate decision plus, for duplicates, the closest existing entry."""
    entries = list(existing)
    if not is_duplicate(new_title, entries):
        return MatchResult(is_duplicate=False)

    best = find_best_match(new_title, entries)
    return MatchResult(
        is_duplicate=True,
        matched_entry=best.matched_entry,
        similarity=best.similarity,
    )
