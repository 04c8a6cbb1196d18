"""
Database Models using SQLAlchemy.

The relay persists a single table: one row per cache key holding the last
payload fetched from Discord and the time it was refreshed.
"""
from sqlalchemy import Column, String, DateTime, JSON
from sqlalchemy.orm import declarative_base
import datetime

Base = declarative_base()


def utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class CacheStore(Base):
    __tablename__ = "cache_store"

    id = Column(String(191), primary_key=True)
    data = Column(JSON, nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
