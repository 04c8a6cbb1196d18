"""
quest-relay Application Package

Directory Structure:
├── routers/           # FastAPI route handlers (quests, health)
├── services/          # Read-through quest fetcher and cache freshness policy
├── infrastructure/    # Discord API client and header bundle
├── db/                # SQLAlchemy models, provisioning and the cache store
├── domain/            # Entities, ports and the error hierarchy
└── config.py          # Application configuration

The relay serves Discord's quest list from a single cached row, refreshing it
from upstream once it is older than the freshness window.
"""
