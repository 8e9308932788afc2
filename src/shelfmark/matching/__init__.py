# ABOUTME: Title matching package: normalization, similarity, and duplicate detection.
# ABOUTME: Pure functions with no I/O, safe to call from anywhere.

from shelfmark.matching.dedup import (
    MatchResult,
    check_duplicate,
    find_best_match,
    is_duplicate,
)
from shelfmark.matching.normalizer import normalize_title, split_concatenated
from shelfmark.matching.similarity import levenshtein_distance, similarity

__all__ = [
    "MatchResult",
    "check_duplicate",
    "find_best_match",
    "is_duplicate",
    "levenshtein_distance",
    "normalize_title",
    "similarity",
    "split_concatenated",
]
