# ABOUTME: OcrEngine protocol for the external text-recognition service.
# ABOUTME: Any engine (Tesseract, a cloud API) maps image bytes to raw text.

from typing import Protocol, runtime_checkable


class OcrError(Exception):
    """Raised when the OCR engine cannot recognize text in an image."""


@runtime_checkable
class OcrEngine(Protocol):
    """Protocol for optical character recognition backends."""

    def recognize(self, image: bytes) -> str: ...
