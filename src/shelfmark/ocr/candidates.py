# ABOUTME: Filters raw OCR text down to lines that plausibly are book titles.
# ABOUTME: Each rejection rule is a named predicate so rules can be tested one by one.

import re
from collections.abc import Callable

_LETTER_RE = re.compile(r"[a-zA-Z]")
_DIGIT_RE = re.compile(r"[0-9]")
_NON_WORD_RE = re.compile(r"[^\w\s]")
_WHITESPACE_RE = re.compile(r"\s+")

_NOISE_PREFIX_RE = re.compile(
    r"^(page|p\.|chapter|table of contents|index|copyright|isbn|©|®|™)",
    re.IGNORECASE,
)
_PAGE_NUMBER_RE = re.compile(r"^([0-9]+|[ivxlcdm]+)$", re.IGNORECASE)
_DATE_RE = re.compile(r"^[0-9]{1,2}[/-][0-9]{1,2}[/-]([0-9]{2}|[0-9]{4})$")
_ISBN_LINE_RE = re.compile(r"^(isbn|issn)[\s:]*[0-9\-x]+$", re.IGNORECASE)

# Long all-caps runs are usually artifacts; short ones are often cover titles.
_ALL_CAPS_MAX_LENGTH = 10
_MIN_LENGTH = 3
_MAX_LENGTH = 200
_MAX_WORDS = 15
_MAX_DIGIT_RATIO = 0.5


def _has_letters(line: str) -> bool:
    return _LETTER_RE.search(line) is not None


def _not_long_all_caps(line: str) -> bool:
    return line != line.upper() or len(line) < _ALL_CAPS_MAX_LENGTH


def _reasonable_length(line: str) -> bool:
    return _MIN_LENGTH <= len(line) < _MAX_LENGTH


def _not_mostly_digits(line: str) -> bool:
    return len(_DIGIT_RE.findall(line)) / len(line) < _MAX_DIGIT_RATIO


def _not_noise_prefix(line: str) -> bool:
    return _NOISE_PREFIX_RE.match(line) is None


def _reasonable_word_count(line: str) -> bool:
    return 1 <= len(line.split()) <= _MAX_WORDS


def _not_just_punctuation(line: str) -> bool:
    return _LETTER_RE.search(_NON_WORD_RE.sub("", line)) is not None


def _not_page_number(line: str) -> bool:
    return _PAGE_NUMBER_RE.match(line) is None


def _not_date(line: str) -> bool:
    return _DATE_RE.match(line) is None


def _not_isbn(line: str) -> bool:
    return _ISBN_LINE_RE.match(line) is None


# Ordered (name, predicate) pairs; a line must satisfy all of them.
TITLE_RULES: tuple[tuple[str, Callable[[str], bool]], ...] = (
    ("no_letters", _has_letters),
    ("all_caps", _not_long_all_caps),
    ("length", _reasonable_length),
    ("mostly_digits", _not_mostly_digits),
    ("noise_prefix", _not_noise_prefix),
    ("word_count", _reasonable_word_count),
    ("punctuation_only", _not_just_punctuation),
    ("page_number", _not_page_number),
    ("date", _not_date),
    ("isbn", _not_isbn),
)


def rejection_reason(line: str) -> str | None:
    """Name of the first rule a trimmed, non-empty line fails, or None if it passes."""
    for name, passes in TITLE_RULES:
        if not passes(line):
            return name
    return None


def clean_line(line: str) -> str:
    """Collapse whitespace and fix the common "|" for "I" misread."""
    return _WHITESPACE_RE.sub(" ", line).replace("|", "I").strip()


def extract_titles(raw_text: str) -> list[str]:
    """Extract plausible book titles from raw OCR output.

    Lines are trimmed, filtered through TITLE_RULES, cleaned, and
    de-duplicated keeping the first occurrence. Pure: the same input
    always yields the same list.
    """
    titles: list[str] = []
    seen: set[str] = set()

    for raw_line in raw_text.split("\n"):
        line = raw_line.strip()
        if not line or rejection_reason(line) is not None:
            continue
        cleaned = clean_line(line)
        if cleaned not in seen:
            seen.add(cleaned)
            titles.append(cleaned)

    return titles
