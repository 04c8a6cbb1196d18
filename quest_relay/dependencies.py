from __future__ import annotations

from quest_relay.config import settings
from quest_relay.db.database import SessionLocal
from quest_relay.db.repositories.cache_store import CacheStoreRepository
from quest_relay.infrastructure.discord_client import DiscordQuestClient
from quest_relay.services.quest_fetcher import QuestFetcher, QuestFetcherConfig


def get_fetcher_config() -> QuestFetcherConfig:
    return QuestFetcherConfig.from_settings(settings)


def get_cache_store() -> CacheStoreRepository:
    return CacheStoreRepository(SessionLocal)


def get_discord_client(config: QuestFetcherConfig) -> DiscordQuestClient:
    return DiscordQuestClient(
        token=config.token,
        url=config.upstream_url,
        timeout=settings.UPSTREAM_TIMEOUT_SECONDS,
    )


def get_quest_fetcher() -> QuestFetcher:
    config = get_fetcher_config()
    return QuestFetcher(
        config=config,
        store=get_cache_store(),
        source=get_discord_client(config),
    )
