from quest_relay.db.models import Base, CacheStore
from quest_relay.db.init_db import init_database

__all__ = ['Base', 'CacheStore', 'init_database']
