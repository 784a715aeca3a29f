"""Single-slot freshness cache for the built feed."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta

from adventfeed.atom.models import FeedDocument


@dataclass(frozen=True, slots=True)
class CacheEntry:
    document: FeedDocument
    fetched_at: float


class FreshnessCache:
    """Holds one feed document; stale entries are never returned but stay until replaced."""

    def __init__(self, ttl: timedelta, *, clock: Callable[[], float] = time.monotonic) -> None:
        self.ttl = ttl
        self._clock = clock
        self._lock = threading.Lock()
        self._entry: CacheEntry | None = None

    def get(self) -> FeedDocument | None:
        with self._lock:
            entry = self._entry
        if entry is None:
            return None
        if self._clock() - entry.fetched_at < self.ttl.total_seconds():
            return entry.document
        return None

    def set(self, document: FeedDocument) -> None:
        entry = CacheEntry(document=document, fetched_at=self._clock())
        with self._lock:
            self._entry = entry
