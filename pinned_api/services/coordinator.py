"""Stale-while-revalidate coordination between the cache and the scraper."""

import asyncio
import logging

from pinned_api.models.schemas import PinnedRepo
from pinned_api.services.cache import LRUCache
from pinned_api.services.scraper import GitHubScraper

logger = logging.getLogger(__name__)


class RefreshCoordinator:
    """
    Serves pinned repositories from cache and keeps them fresh.

    A cache hit is answered immediately while a detached task refetches the
    profile in the background. Misses and forced refreshes fetch inline.
    Concurrent requests for the same username are not coalesced.
    """

    def __init__(self, scraper: GitHubScraper, cache: LRUCache[list[PinnedRepo]]):
        self._scraper = scraper
        self._cache = cache
        self._refresh_tasks: set[asyncio.Task] = set()

    @property
    def pending_refreshes(self) -> int:
        return len(self._refresh_tasks)

    async def resolve(self, username: str, force_refresh: bool = False) -> list[PinnedRepo]:
        """
        Return the pinned repositories for a user.

        Raises:
            FetchError: If a synchronous fetch is required and fails. The
                previously cached value, if any, is kept.
        """
        if not force_refresh:
            cached = self._cache.get(username)
            if cached is not None:
                logger.debug(f"Cache hit for '{username}', scheduling refresh")
                self._schedule_refresh(username)
                return cached

        logger.debug(f"Fetching '{username}' (force_refresh={force_refresh})")
        repos = await self._scraper.fetch_pinned_repos(username)
        self._cache.set(username, repos)
        return repos

    async def close(self) -> None:
        """Cancel background refreshes that are still running."""
        tasks = list(self._refresh_tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        self._refresh_tasks.clear()

    def _schedule_refresh(self, username: str) -> None:
        task = asyncio.create_task(self._refresh(username))
        self._refresh_tasks.add(task)
        task.add_done_callback(self._refresh_tasks.discard)

    async def _refresh(self, username: str) -> None:
        try:
            repos = await self._scraper.fetch_pinned_repos(username)
        except Exception as e:
            logger.warning(f"Background refresh failed for '{username}': {e}")
            return
        self._cache.set(username, repos)
        logger.info(f"Refreshed {len(repos)} pinned repos for '{username}'")
