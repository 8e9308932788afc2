# ABOUTME: MetadataLookup protocol defining the contract for external catalog lookups.
# ABOUTME: Open Library implements it; tests substitute in-memory fakes.

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetadataLookup(Protocol):
    """Protocol for author and subject lookup services.

    search_author returns None when nothing was found or the service failed.
    search_subjects returns an empty list when the book has no subjects and
    None only when the lookup itself failed.
    """

    @property
    def name(self) -> str: ...

    def search_author(self, title: str) -> str | None: ...

    def search_subjects(self, title: str, author: str | None = None) -> list[str] | None: ...
