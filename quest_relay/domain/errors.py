"""Error hierarchy for the relay; every class maps to a uniform 500 response."""
from __future__ import annotations


class QuestRelayError(Exception):
    """Base for all relay errors."""


class ConfigurationError(QuestRelayError):
    """Required configuration (e.g. the Discord token) is missing."""


class PersistenceError(QuestRelayError):
    """Cache store read or write failed."""


class UpstreamError(QuestRelayError):
    """Discord API request failed or returned an unusable response."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
