# ABOUTME: Canonical title normalization for duplicate detection.
# ABOUTME: Also splits mangled OCR titles ("TheGreatGatsby") into clean lookup queries.

import re

import wordninja

_NON_WORD_RE = re.compile(r"[^\w\s]")
_WHITESPACE_RE = re.compile(r"\s+")

# Spaceless runs shorter than this ("Dune", "1984") are never split.
_MIN_CONCAT_LENGTH = 8

_CAMEL_CASE_RE = re.compile(r"[a-z][A-Z]")
_CAMEL_LOWER_UPPER_RE = re.compile(r"([a-z\d])([A-Z])")
_CAMEL_UPPER_SEQUENCE_RE = re.compile(r"([A-Z]+)([A-Z][a-z])")
_LETTER_DIGIT_RE = re.compile(r"([a-zA-Z])(\d)")
_DIGIT_LETTER_RE = re.compile(r"(\d)([a-zA-Z])")
_SEPARATOR_RE = re.compile(r"[-_]")
_SPLIT_MARK = "\x00"


def normalize_title(title: str) -> str:
    """Reduce a title to the form used for every comparison.

    Lowercases, drops anything that is not a word character or whitespace,
    collapses whitespace runs to one space and trims. Idempotent.
    """
    lowered = title.lower()
    stripped = _NON_WORD_RE.sub("", lowered)
    return _WHITESPACE_RE.sub(" ", stripped).strip()


def _looks_concatenated(text: str) -> bool:
    """Whether an OCR title has words run together and is worth splitting."""
    text = text.strip()
    if not text:
        return False
    if "_" in text or _CAMEL_CASE_RE.search(text):
        return True
    segments = text.split("-")
    return any(" " not in seg and len(seg) >= _MIN_CONCAT_LENGTH for seg in segments)


def _split_camel_case(text: str) -> list[str]:
    """Split "TheGreatGatsby", "HTMLGuide" or "Fahrenheit451" into words."""
    marked = _CAMEL_LOWER_UPPER_RE.sub(rf"\1{_SPLIT_MARK}\2", text)
    marked = _CAMEL_UPPER_SEQUENCE_RE.sub(rf"\1{_SPLIT_MARK}\2", marked)
    marked = _LETTER_DIGIT_RE.sub(rf"\1{_SPLIT_MARK}\2", marked)
    marked = _DIGIT_LETTER_RE.sub(rf"\1{_SPLIT_MARK}\2", marked)
    parts = [p for p in marked.split(_SPLIT_MARK) if p]
    return parts or [text]


def split_concatenated(text: str) -> str:
    """Turn a run-together title into space-separated words.

    Splits on hyphens/underscores, then CamelCase boundaries, and hands long
    all-lowercase pieces to wordninja. Text that already looks fine is
    returned unchanged.
    """
    if not _looks_concatenated(text):
        return text

    words: list[str] = []
    for segment in _SEPARATOR_RE.split(text):
        segment = segment.strip()
        if not segment:
            continue
        for part in _split_camel_case(segment):
            if part.islower() and len(part) >= _MIN_CONCAT_LENGTH:
                words.extend(wordninja.split(part) or [part])
            else:
                words.append(part)
    return " ".join(words)
