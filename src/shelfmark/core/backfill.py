# ABOUTME: Bulk re-run of author and genre enrichment over existing library entries.
# ABOUTME: Lookups are serialized with a fixed delay to respect third-party rate limits.

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from shelfmark.db.catalog import CatalogStore
from shelfmark.db.mapping import CatalogEntry, Shelf
from shelfmark.metadata.enricher import BookEnricher

logger = logging.getLogger(__name__)

DEFAULT_BACKFILL_DELAY = 0.5


@dataclass
class BackfillResult:
    """Summary of a backfill run."""

    updated: int = 0
    failed: int = 0
    skipped: int = 0


ProgressFn = Callable[[CatalogEntry], None]


def _run(
    entries: list[CatalogEntry],
    needs_work: Callable[[CatalogEntry], bool],
    work: Callable[[CatalogEntry], bool],
    delay: float,
    sleep: Callable[[float], None],
    on_entry: ProgressFn | None,
) -> BackfillResult:
    result = BackfillResult()
    looked_up = False
    for entry in entries:
        if on_entry is not None:
            on_entry(entry)
        if not needs_work(entry):
            result.skipped += 1
            continue
        if looked_up and delay > 0:
            sleep(delay)
        looked_up = True
        if work(entry):
            result.updated += 1
        else:
            result.failed += 1
    return result


def backfill_authors(
    store: CatalogStore,
    enricher: BookEnricher,
    user_id: str,
    *,
    delay: float = DEFAULT_BACKFILL_DELAY,
    sleep: Callable[[float], None] = time.sleep,
    on_entry: ProgressFn | None = None,
) -> BackfillResult:
    """Look up authors for every library entry that lacks one."""

    def work(entry: CatalogEntry) -> bool:
        author = enricher.get_author(entry.title)
        if not author:
            logger.info("No author found for %r", entry.title)
            return False
        store.update_author(user_id, entry.id, author)
        return True

    result = _run(
        store.list_entries(user_id, Shelf.LIBRARY),
        lambda entry: not (entry.author and entry.author.strip()),
        work,
        delay,
        sleep,
        on_entry,
    )
    logger.info(
        "Author backfill for user=%s: %d updated, %d failed, %d skipped",
        user_id,
        result.updated,
        result.failed,
        result.skipped,
    )
    return result


def backfill_genres(
    store: CatalogStore,
    enricher: BookEnricher,
    user_id: str,
    *,
    delay: float = DEFAULT_BACKFILL_DELAY,
    sleep: Callable[[float], None] = time.sleep,
    on_entry: ProgressFn | None = None,
) -> BackfillResult:
    """Look up genres for every library entry that has none."""

    def work(entry: CatalogEntry) -> bool:
        genres = enricher.get_genres(entry.title, entry.author)
        if not genres:
            logger.info("No genres found for %r", entry.title)
            return False
        store.update_genres(user_id, entry.id, genres)
        return True

    result = _run(
        store.list_entries(user_id, Shelf.LIBRARY),
        lambda entry: not entry.genres,
        work,
        delay,
        sleep,
        on_entry,
    )
    logger.info(
        "Genre backfill for user=%s: %d updated, %d failed, %d skipped",
        user_id,
        result.updated,
        result.failed,
        result.skipped,
    )
    return result
