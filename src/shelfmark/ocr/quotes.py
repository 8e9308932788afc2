# ABOUTME: Turns the OCR text of a photographed page into a savable quote.
# ABOUTME: Joins wrapped lines into one passage and spots a printed page number.

import re

_PAGE_RE = re.compile(r"\b(?:page|p\.?)\s*(\d+)", re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s+")


def detect_page_number(text: str) -> int | None:
    """First "Page 123" / "p. 123" / "p123" marker in the text, if any."""
    match = _PAGE_RE.search(text)
    return int(match.group(1)) if match else None


def clean_quote_text(text: str) -> str:
    """Join non-empty lines with single spaces and collapse runs of whitespace."""
    lines = (line.strip() for line in text.splitlines())
    return _WHITESPACE_RE.sub(" ", " ".join(line for line in lines if line)).strip()
