from quest_relay.db.repositories.cache_store import CacheStoreRepository

__all__ = ['CacheStoreRepository']
