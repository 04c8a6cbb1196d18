"""Client for the Discord quests endpoint."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from quest_relay.config import DEFAULT_DISCORD_QUESTS_URL
from quest_relay.domain.errors import UpstreamError
from quest_relay.infrastructure.discord_headers import build_headers

logger = logging.getLogger(__name__)


class DiscordQuestClient:
    """Fetches the raw quests response on behalf of the configured account."""

    def __init__(
        self,
        token: str,
        url: str = DEFAULT_DISCORD_QUESTS_URL,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.token = token
        self.url = url
        self.timeout = timeout
        self._transport = transport

    async def fetch_quests_response(self) -> Dict[str, Any]:
        """GET the quests endpoint and return the decoded JSON object."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(self.url, headers=build_headers(self.token))
        except httpx.TimeoutException as e:
            logger.error(f"Discord API timeout: {e}")
            raise UpstreamError(f"Request to Discord API timed out: {e}") from e
        except httpx.RequestError as e:
            logger.error(f"Discord API request error: {e}")
            raise UpstreamError(f"Request failed: {e}") from e

        if not response.is_success:
            raise UpstreamError(
                f"Discord API returned {response.status_code}: {response.text or 'Unknown error'}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError(f"Failed to parse response: {e}", status_code=response.status_code) from e

        if not isinstance(data, dict):
            raise UpstreamError(
                f"Unexpected response shape from Discord API: {type(data).__name__}",
                status_code=response.status_code,
            )
        return data
