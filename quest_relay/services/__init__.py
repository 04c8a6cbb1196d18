from quest_relay.services.cache_policy import CachePolicy
from quest_relay.services.quest_fetcher import QuestFetcher, QuestFetcherConfig

__all__ = ['CachePolicy', 'QuestFetcher', 'QuestFetcherConfig']
