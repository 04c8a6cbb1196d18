from __future__ import annotations

import datetime
from typing import Any, Callable, List, Optional

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from quest_relay.db.models import CacheStore, utcnow
from quest_relay.domain.entities import CacheEntry
from quest_relay.domain.errors import PersistenceError

_UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def _as_utc(value: datetime.datetime) -> datetime.datetime:
    # SQLite hands back naive datetimes; everything is written as UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value


class CacheStoreRepository:
    """Repository for the key/value cache rows."""

    def __init__(
        self,
        session_factory: Callable[[], Session],
        clock: Callable[[], datetime.datetime] = utcnow,
    ) -> None:
        self._session_factory = session_factory
        self._clock = clock

    def get(self, key: str) -> Optional[CacheEntry]:
        """
        Get the cache entry for a key.

        Args:
            key: Cache key

        Returns:
            CacheEntry if present, None otherwise

        Raises:
            PersistenceError: if the database cannot be read
        """
        try:
            with self._session_factory() as db:
                row = db.get(CacheStore, key)
                if row is None:
                    return None
                return self._to_entry(row)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to read cache entry '{key}': {e}") from e

    def upsert(self, key: str, data: List[Any]) -> CacheEntry:
        """
        Create or replace the cache entry for a key.

        Data and timestamp are written in one statement, so concurrent
        upserts on the same key leave whichever landed last.

        Args:
            key: Cache key
            data: Payload to store

        Returns:
            The stored entry

        Raises:
            PersistenceError: if the write fails
        """
        now = self._clock()
        try:
            with self._session_factory() as db:
                insert = _UPSERT_DIALECTS.get(db.get_bind().dialect.name)
                if insert is not None:
                    stmt = insert(CacheStore).values(id=key, data=data, updated_at=now)
                    stmt = stmt.on_conflict_do_update(
                        index_elements=[CacheStore.id],
                        set_={"data": stmt.excluded["data"], "updated_at": stmt.excluded["updated_at"]},
                    )
                    db.execute(stmt)
                else:
                    db.merge(CacheStore(id=key, data=data, updated_at=now))
                db.commit()
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to update cache entry '{key}': {e}") from e

        return CacheEntry(key=key, data=data, updated_at=_as_utc(now))

    @staticmethod
    def _to_entry(row: CacheStore) -> CacheEntry:
        return CacheEntry(key=row.id, data=row.data, updated_at=_as_utc(row.updated_at))
