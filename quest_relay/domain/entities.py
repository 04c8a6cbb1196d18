"""Internal domain entities."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, List

QUESTS_CACHE_KEY = "discord_quests"


@dataclass(frozen=True)
class CacheEntry:
    """Last-known-good payload for a cache key and when it was refreshed."""

    key: str
    data: List[Any]
    updated_at: datetime
