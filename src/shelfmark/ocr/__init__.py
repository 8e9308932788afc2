# ABOUTME: OCR package: the engine seam, candidate-title extraction, and quote cleanup.
# ABOUTME: Recognition itself is external; this package only interprets its output.

from shelfmark.ocr.candidates import clean_line, extract_titles, rejection_reason
from shelfmark.ocr.engine import OcrEngine, OcrError
from shelfmark.ocr.quotes import clean_quote_text, detect_page_number

__all__ = [
    "OcrEngine",
    "OcrError",
    "clean_line",
    "clean_quote_text",
    "detect_page_number",
    "extract_titles",
    "rejection_reason",
]
