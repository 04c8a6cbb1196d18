"""
Test configuration and fixtures for quest-relay tests.
"""
import os

# Keep the app off any real database or Discord account during tests
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("WARM_CACHE_ON_STARTUP", "false")
os.environ["DISCORD_TOKEN"] = ""

import datetime
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from quest_relay.db.models import Base
from quest_relay.dependencies import get_quest_fetcher
from quest_relay.domain.entities import CacheEntry
from quest_relay.main import app
from quest_relay.services.quest_fetcher import QuestFetcher, QuestFetcherConfig

T0 = datetime.datetime(2025, 1, 1, 12, 0, tzinfo=datetime.timezone.utc)


class FakeClock:
    """Manually advanced clock shared by the fetcher and the store."""

    def __init__(self, now: datetime.datetime = T0):
        self.now = now

    def __call__(self) -> datetime.datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += datetime.timedelta(**kwargs)


class InMemoryCacheStore:
    """Dict-backed cache store that records how it was used."""

    def __init__(self, clock: FakeClock):
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self.get_calls = 0
        self.upsert_calls = 0

    def get(self, key: str) -> Optional[CacheEntry]:
        self.get_calls += 1
        return self._entries.get(key)

    def upsert(self, key: str, data: List[Any]) -> CacheEntry:
        self.upsert_calls += 1
        entry = CacheEntry(key=key, data=data, updated_at=self._clock())
        self._entries[key] = entry
        return entry


class FakeQuestSource:
    """Stands in for the Discord client."""

    def __init__(self, payload: Optional[Dict[str, Any]] = None, error: Optional[Exception] = None):
        self.payload = payload if payload is not None else {"quests": []}
        self.error = error
        self.calls = 0

    async def fetch_quests_response(self) -> Dict[str, Any]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return InMemoryCacheStore(clock)


@pytest.fixture
def source():
    return FakeQuestSource({"quests": [{"id": 1}]})


@pytest.fixture
def fetcher_config():
    return QuestFetcherConfig(token="  test-token  ")


@pytest.fixture
def fetcher(fetcher_config, store, source, clock):
    return QuestFetcher(config=fetcher_config, store=store, source=source, clock=clock)


@pytest.fixture
def session_factory(tmp_path):
    """SQLite-backed session factory with the schema created."""
    engine = create_engine(f"sqlite:///{tmp_path / 'cache.db'}")
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def client(fetcher):
    """Create test client wired to the fake-backed fetcher."""
    app.dependency_overrides[get_quest_fetcher] = lambda: fetcher
    yield TestClient(app)
    app.dependency_overrides.clear()
