from __future__ import annotations

from datetime import datetime, timedelta, timezone

from quest_relay.domain.entities import CacheEntry


class CachePolicy:
    """Encapsulate caching heuristics such as freshness checks."""

    def __init__(self, freshness_window: timedelta = timedelta(minutes=30)) -> None:
        self.freshness_window = freshness_window

    def age(self, entry: CacheEntry | None, now: datetime) -> timedelta | None:
        if entry is None:
            return None
        updated_at = entry.updated_at
        if updated_at.tzinfo is None:
            updated_at = updated_at.replace(tzinfo=timezone.utc)
        return now - updated_at

    def is_fresh(self, entry: CacheEntry | None, now: datetime) -> bool:
        age = self.age(entry, now)
        if age is None:
            return False
        return age < self.freshness_window
