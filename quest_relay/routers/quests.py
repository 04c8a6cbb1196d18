"""
Quest endpoints.

Quest records are opaque to the relay: whatever Discord returned under
`quests` at the last refresh is served unchanged.
"""
from typing import Any, List

from fastapi import APIRouter, Depends

from quest_relay.dependencies import get_quest_fetcher
from quest_relay.services.quest_fetcher import QuestFetcher

router = APIRouter(prefix="/v1/quests")


@router.get("/")
@router.get("", include_in_schema=False)
async def get_quests(fetcher: QuestFetcher = Depends(get_quest_fetcher)) -> List[Any]:
    """Return the cached quest list, refreshing from Discord when stale."""
    return await fetcher.get_quests()
