"""Read-through access to the Discord quest list."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Callable, List

from fastapi.concurrency import run_in_threadpool

from quest_relay.config import DEFAULT_DISCORD_QUESTS_URL, Settings
from quest_relay.db.models import utcnow
from quest_relay.domain.entities import QUESTS_CACHE_KEY
from quest_relay.domain.errors import ConfigurationError, UpstreamError
from quest_relay.domain.ports import CacheStorePort, QuestSourcePort
from quest_relay.services.cache_policy import CachePolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuestFetcherConfig:
    token: str
    port: int = 3000
    freshness_window: timedelta = timedelta(minutes=30)
    upstream_url: str = DEFAULT_DISCORD_QUESTS_URL

    @classmethod
    def from_settings(cls, settings: Settings) -> "QuestFetcherConfig":
        return cls(
            token=settings.DISCORD_TOKEN,
            port=settings.PORT,
            freshness_window=timedelta(minutes=settings.CACHE_DURATION_MINUTES),
            upstream_url=settings.DISCORD_QUESTS_URL,
        )


class QuestFetcher:
    """Serve quests from the cache, refreshing from Discord once it goes stale.

    Concurrent requests that all see a stale entry each call upstream and
    upsert; the last write wins. Store calls are synchronous and run in the
    threadpool so the event loop keeps serving other requests.
    """

    def __init__(
        self,
        config: QuestFetcherConfig,
        store: CacheStorePort,
        source: QuestSourcePort,
        clock: Callable[[], datetime] = utcnow,
        cache_key: str = QUESTS_CACHE_KEY,
    ) -> None:
        self._config = config
        self._store = store
        self._source = source
        self._clock = clock
        self._cache_key = cache_key
        self._policy = CachePolicy(config.freshness_window)

    async def get_quests(self) -> List[Any]:
        self._require_token()

        entry = await run_in_threadpool(self._store.get, self._cache_key)
        if entry is None:
            logger.debug(f"Cache miss for {self._cache_key}")
        elif self._policy.is_fresh(entry, self._clock()):
            logger.debug(f"Cache hit for {self._cache_key}")
            return entry.data
        else:
            logger.debug(f"Cache stale for {self._cache_key}")

        return await self._fetch_and_store()

    async def refresh(self) -> List[Any]:
        """Fetch from upstream and overwrite the cache regardless of age."""
        self._require_token()
        return await self._fetch_and_store()

    def _require_token(self) -> None:
        if not self._config.token or not self._config.token.strip():
            raise ConfigurationError("Discord token not configured on server")

    async def _fetch_and_store(self) -> List[Any]:
        logger.info("Fetching quests from Discord API")
        payload = await self._source.fetch_quests_response()
        quests = payload.get("quests")
        if quests is None:
            quests = []
        if not isinstance(quests, list):
            raise UpstreamError(
                f"Unexpected `quests` field from Discord API: {type(quests).__name__}"
            )
        await run_in_threadpool(self._store.upsert, self._cache_key, quests)
        logger.info(f"Cache updated for {self._cache_key} ({len(quests)} quests)")
        return quests
