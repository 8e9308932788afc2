# ABOUTME: Orchestrates OCR extraction, duplicate checks, enrichment, and catalog writes.
# ABOUTME: The add, move, quote and enrichment entry points used by the CLI and other front ends.

import logging
from dataclasses import dataclass, field

from shelfmark.db.catalog import CatalogStore
from shelfmark.db.mapping import CatalogEntry, Quote, Shelf
from shelfmark.matching.dedup import MatchResult, check_duplicate
from shelfmark.metadata.authors import extract_author
from shelfmark.metadata.enricher import BookEnricher
from shelfmark.metadata.genres import normalize_genre
from shelfmark.ocr.candidates import extract_titles
from shelfmark.ocr.engine import OcrEngine, OcrError
from shelfmark.ocr.quotes import clean_quote_text, detect_page_number

logger = logging.getLogger(__name__)


@dataclass
class OcrResult:
    """Candidate titles and author pulled out of one image's text."""

    titles: list[str]
    raw_text: str
    author: str | None = None


@dataclass
class AddResult:
    """Outcome of adding (or moving) a title onto a shelf.

    entry is None when the title was rejected as a duplicate; match then
    carries the existing entry it most resembled.
    """

    entry: CatalogEntry | None
    is_duplicate: bool
    match: MatchResult[CatalogEntry] = field(
        default_factory=lambda: MatchResult(is_duplicate=False)
    )


@dataclass
class AuthorResult:
    """Author of a stored entry; was_updated is True when it was just looked up."""

    author: str | None
    was_updated: bool


def _require_title(title: str) -> str:
    if not title or not title.strip():
        raise ValueError("Book title is required")
    return title.strip()


class CatalogCoordinator:
    """Sequences extraction, deduplication, enrichment and persistence.

    The duplicate check and the write are not atomic: two concurrent adds of
    the same title for one user can both pass the check.
    """

    def __init__(
        self,
        store: CatalogStore,
        enricher: BookEnricher | None = None,
        ocr_engine: OcrEngine | None = None,
    ) -> None:
        self._store = store
        self._enricher = enricher
        self._ocr = ocr_engine

    @property
    def store(self) -> CatalogStore:
        return self._store

    def process_text(self, raw_text: str) -> OcrResult:
        """Extract candidate titles and an author from recognized text."""
        titles = extract_titles(raw_text)
        logger.debug("Extracted %d candidate title(s)", len(titles))
        return OcrResult(titles=titles, raw_text=raw_text, author=extract_author(raw_text))

    def process_image(self, image: bytes) -> OcrResult:
        """Run OCR on an image, then extract candidates from its text.

        Raises:
            OcrError: If no engine is configured or recognition fails.
        """
        return self.process_text(self._recognize(image))

    def add_book(
        self,
        user_id: str,
        title: str,
        *,
        source_image: str | None = None,
        author: str | None = None,
        ocr_text: str | None = None,
    ) -> AddResult:
        """Add a title to the user's library unless it is already there.

        A missing author is looked up (OCR text first, then the lookup
        service) and genres are fetched; if either comes back empty the
        entry is still created without it.

        Raises:
            ValueError: If title is blank.
        """
        title = _require_title(title)
        match = check_duplicate(title, self._store.list_entries(user_id, Shelf.LIBRARY))
        if match.is_duplicate:
            logger.info("Duplicate detected for user=%s title=%r", user_id, title)
            return AddResult(entry=None, is_duplicate=True, match=match)

        genres: list[str] = []
        if self._enricher is not None:
            if not author:
                author = self._enricher.get_author(title, ocr_text)
            genres = self._enricher.get_genres(title, author)

        entry = self._store.add_entry(
            user_id,
            title,
            shelf=Shelf.LIBRARY,
            author=author or None,
            genres=genres,
            source_image=source_image,
        )
        logger.info(
            "Added %s for user=%s (author=%s, %d genre(s))",
            entry.id,
            user_id,
            "yes" if entry.author else "no",
            len(entry.genres),
        )
        return AddResult(entry=entry, is_duplicate=False, match=match)

    def add_to_wishlist(self, user_id: str, title: str) -> AddResult:
        """Add a title to the user's wishlist unless it is already there.

        Raises:
            ValueError: If title is blank.
        """
        title = _require_title(title)
        match = check_duplicate(title, self._store.list_entries(user_id, Shelf.WISHLIST))
        if match.is_duplicate:
            logger.info("Duplicate wishlist title for user=%s title=%r", user_id, title)
            return AddResult(entry=None, is_duplicate=True, match=match)

        entry = self._store.add_entry(user_id, title, shelf=Shelf.WISHLIST)
        return AddResult(entry=entry, is_duplicate=False, match=match)

    def move_to_library(self, user_id: str, entry_id: str) -> AddResult:
        """Move a wishlist entry into the library, unless the library already has it."""
        return self._move(user_id, entry_id, Shelf.LIBRARY)

    def move_to_wishlist(self, user_id: str, entry_id: str) -> AddResult:
        """Move a library entry onto the wishlist, unless the wishlist already has it."""
        return self._move(user_id, entry_id, Shelf.WISHLIST)

    def delete_book(self, user_id: str, entry_id: str, shelf: Shelf = Shelf.LIBRARY) -> bool:
        """Delete an entry from a shelf. Returns False if it was not there."""
        deleted = self._store.delete_entry(user_id, entry_id, shelf)
        logger.info("Delete %s from %s for user=%s: %s", entry_id, shelf.value, user_id, deleted)
        return deleted

    def list_books(self, user_id: str, shelf: Shelf = Shelf.LIBRARY) -> list[CatalogEntry]:
        return self._store.list_entries(user_id, shelf)

    def list_genres(self, user_id: str) -> list[str]:
        return self._store.list_genres(user_id)

    def find_author(self, user_id: str, entry_id: str) -> AuthorResult:
        """Return an entry's author, looking it up and saving it if missing.

        Raises:
            ValueError: If the user has no entry with this id.
        """
        entry = self._get(user_id, entry_id)
        if entry.author and entry.author.strip():
            return AuthorResult(author=entry.author, was_updated=False)
        if self._enricher is None:
            return AuthorResult(author=None, was_updated=False)

        author = self._enricher.get_author(entry.title)
        if not author:
            logger.info("No author found for %s (%r)", entry_id, entry.title)
            return AuthorResult(author=None, was_updated=False)
        self._store.update_author(user_id, entry_id, author)
        return AuthorResult(author=author, was_updated=True)

    def set_genres(self, user_id: str, entry_id: str, genres: list[str]) -> CatalogEntry:
        """Replace an entry's genres by hand.

        Labels go through the same normalization as looked-up subjects; the
        store keeps at most five distinct ones. An empty list clears them.

        Raises:
            ValueError: If the user has no entry with this id.
        """
        labels = [normalize_genre(g.strip()) for g in genres if g and g.strip()]
        self._store.update_genres(user_id, entry_id, labels)
        return self._get(user_id, entry_id)

    def add_quote(
        self,
        user_id: str,
        entry_id: str,
        text: str,
        *,
        page_number: int | None = None,
        source_image: str | None = None,
    ) -> Quote:
        """Save a passage from one of the user's books.

        Raises:
            ValueError: If text is blank or the entry does not exist.
        """
        text = clean_quote_text(text or "")
        if not text:
            raise ValueError("Quote text is required")
        quote = self._store.add_quote(
            user_id, entry_id, text, page_number=page_number, source_image=source_image
        )
        logger.info("Saved quote %s on %s for user=%s", quote.id, entry_id, user_id)
        return quote

    def quote_from_text(
        self,
        user_id: str,
        entry_id: str,
        raw_text: str,
        *,
        page_number: int | None = None,
        source_image: str | None = None,
    ) -> Quote:
        """Save recognized page text as a quote.

        A page number printed in the text wins over the one passed in.
        """
        detected = detect_page_number(raw_text)
        return self.add_quote(
            user_id,
            entry_id,
            raw_text,
            page_number=detected if detected is not None else page_number,
            source_image=source_image,
        )

    def quote_from_image(
        self,
        user_id: str,
        entry_id: str,
        image: bytes,
        *,
        page_number: int | None = None,
        source_image: str | None = None,
    ) -> Quote:
        """Run OCR on a page photo and save its text as a quote.

        Raises:
            OcrError: If no engine is configured or recognition fails.
        """
        return self.quote_from_text(
            user_id,
            entry_id,
            self._recognize(image),
            page_number=page_number,
            source_image=source_image,
        )

    def list_quotes(self, user_id: str, entry_id: str) -> list[Quote]:
        return self._store.list_quotes(user_id, entry_id)

    def search_quotes(self, user_id: str, term: str) -> list[tuple[CatalogEntry, Quote]]:
        """Raises ValueError for a blank search term."""
        if not term or not term.strip():
            raise ValueError("Search term is required")
        return self._store.search_quotes(user_id, term.strip())

    def delete_quote(self, user_id: str, quote_id: str) -> bool:
        return self._store.delete_quote(user_id, quote_id)

    def _get(self, user_id: str, entry_id: str) -> CatalogEntry:
        entry = self._store.get_entry(user_id, entry_id)
        if entry is None:
            raise ValueError(f"Entry {entry_id} not found")
        return entry

    def _recognize(self, image: bytes) -> str:
        if self._ocr is None:
            raise OcrError("No OCR engine configured")
        try:
            return self._ocr.recognize(image)
        except OcrError:
            raise
        except Exception as exc:
            raise OcrError(f"OCR engine failed: {exc}") from exc

    def _move(self, user_id: str, entry_id: str, destination: Shelf) -> AddResult:
        """Raises ValueError if the user has no entry with this id."""
        entry = self._get(user_id, entry_id)
        if entry.shelf is destination:
            return AddResult(entry=entry, is_duplicate=False)

        match = check_duplicate(entry.title, self._store.list_entries(user_id, destination))
        if match.is_duplicate:
            logger.info("Not moving %s: already on %s", entry_id, destination.value)
            return AddResult(entry=None, is_duplicate=True, match=match)

        moved = self._store.move_entry(user_id, entry_id, destination)
        return AddResult(entry=moved, is_duplicate=False, match=match)
