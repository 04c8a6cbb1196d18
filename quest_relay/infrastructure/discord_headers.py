"""Browser-impersonation headers the Discord quests endpoint expects."""
from __future__ import annotations

import base64
import json
from typing import Any, Dict, Optional

USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/141.0.0.0 Safari/537.36"
)

SUPER_PROPERTIES: Dict[str, Any] = {
    "os": "Linux",
    "browser": "Chrome",
    "device": "",
    "system_locale": "en-US",
    "browser_user_agent": USER_AGENT,
    "browser_version": "124.0.0.0",
    "os_version": "10",
    "referrer": "",
    "referring_domain": "",
    "referrer_current": "",
    "referring_domain_current": "",
    "release_channel": "stable",
    "client_build_number": 9298544,
    "client_event_source": None,
    "design_id": 0,
}


def build_super_properties(properties: Optional[Dict[str, Any]] = None) -> str:
    """Base64-encode the client properties as compact JSON."""
    raw = json.dumps(properties or SUPER_PROPERTIES, separators=(",", ":"))
    return base64.b64encode(raw.encode("utf-8")).decode("ascii")


def build_headers(
    token: str,
    accept: str = "*/*",
    accept_language: str = "en,en-US;q=0.9,ar;q=0.8",
    super_properties: Optional[str] = None,
    extra_headers: Optional[Dict[str, str]] = None,
) -> Dict[str, str]:
    headers = {
        "accept": accept,
        "accept-language": accept_language,
        "authorization": token.strip(),
        "priority": "u=1, i",
        "sec-ch-ua": '"Google Chrome";v="141", "Not?A_Brand";v="8", "Chromium";v="141"',
        "User-Agent": USER_AGENT,
        "sec-ch-ua-mobile": "?0",
        "sec-ch-ua-platform": '"Linux"',
        "sec-fetch-dest": "empty",
        "sec-fetch-mode": "cors",
        "sec-fetch-site": "same-origin",
        "x-discord-locale": "en-US",
        "x-super-properties": super_properties or build_super_properties(),
        "content-type": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return headers
