"""Feed service orchestration."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from adventfeed.atom.models import FeedDocument
from adventfeed.ingest.advent_calendar import AdventCalendarClient
from adventfeed.ingest.models import StoreProfile
from adventfeed.logic.cache import FreshnessCache
from adventfeed.logic.feed import build_feed
from adventfeed.settings import Settings

logger = logging.getLogger(__name__)


class FeedService:
    """Serve the feed from cache, rebuilding it from upstream on a miss.

    Concurrent misses are not coalesced: each caller fetches and builds on its
    own and the last ``set`` wins. Upstream errors propagate unchanged and no
    stale document is served in their place.
    """

    def __init__(self, cache: FreshnessCache, client: AdventCalendarClient, profile: StoreProfile) -> None:
        self.cache = cache
        self.client = client
        self.profile = profile

    async def get_feed(self) -> FeedDocument:
        cached = self.cache.get()
        if cached is not None:
            logger.info("Serving from cache")
            return cached

        logger.info("Fetching fresh data from API")
        calendar = await self.client.fetch_calendar()
        document = build_feed(calendar, self.profile)
        self.cache.set(document)
        return document


@dataclass(frozen=True, slots=True)
class AppContext:
    settings: Settings
    cache: FreshnessCache
    client: AdventCalendarClient
    service: FeedService

    @property
    def store(self) -> StoreProfile:
        return self.settings.store

    async def close(self) -> None:
        await self.client.close()


def build_context(settings: Settings) -> AppContext:
    cache = FreshnessCache(settings.cache_duration)
    client = AdventCalendarClient(settings.store, user_agent=settings.user_agent)
    service = FeedService(cache, client, settings.store)
    return AppContext(settings=settings, cache=cache, client=client, service=service)
