# ABOUTME: Time-bounded in-memory cache for lookup results (genre subjects).
# ABOUTME: Entries expire after a fixed TTL, dropped on read or on the next write.

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from shelfmark.matching.normalizer import normalize_title

T = TypeVar("T")

DEFAULT_TTL_SECONDS = 7 * 24 * 60 * 60


def lookup_key(title: str, author: str | None = None) -> str:
    """Cache key for a title/author lookup: both normalized, pipe-joined."""
    return f"{normalize_title(title)}|{normalize_title(author or '')}"


@dataclass
class _Entry(Generic[T]):
    value: T
    stored_at: float


class TtlCache(Generic[T]):
    """Key -> value store whose entries expire ttl seconds after being written.

    The clock is injectable so expiry can be tested without waiting.
    """

    def __init__(
        self,
        ttl: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._ttl = ttl
        self._clock = clock
        self._entries: dict[str, _Entry[T]] = {}

    def get(self, key: str) -> T | None:
        """Return the cached value, or None if missing or expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.stored_at >= self._ttl:
            del self._entries[key]
            return None
        return entry.value

    def set(self, key: str, value: T) -> None:
        """Store a value, dropping every entry that has already expired."""
        now = self._clock()
        expired = [k for k, e in self._entries.items() if now - e.stored_at >= self._ttl]
        for k in expired:
            del self._entries[k]
        self._entries[key] = _Entry(value=value, stored_at=now)

    def __len__(self) -> int:
        return len(self._entries)
