# ABOUTME: Levenshtein edit distance and the [0, 1] similarity score built on it.
# ABOUTME: Used by duplicate detection and best-match reporting.

from rapidfuzz.distance import Levenshtein


def levenshtein_distance(a: str, b: str) -> int:
    """Classic edit distance: insert, delete and substitute all cost 1."""
    return Levenshtein.distance(a, b)


def similarity(a: str, b: str) -> float:
    """Similarity of two strings as 1 - distance / longer length.

    Two empty strings are identical (1.0). Symmetric in its arguments.
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return (longest - levenshtein_distance(a, b)) / longest
