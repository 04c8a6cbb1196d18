"""Abstractions the quest fetcher depends on."""
from __future__ import annotations

from typing import Any, Dict, List, Protocol

from quest_relay.domain.entities import CacheEntry


class CacheStorePort(Protocol):
    def get(self, key: str) -> CacheEntry | None: ...

    def upsert(self, key: str, data: List[Any]) -> CacheEntry: ...


class QuestSourcePort(Protocol):
    async def fetch_quests_response(self) -> Dict[str, Any]: ...
