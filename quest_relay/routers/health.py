"""
Health check endpoint for the API.
"""
from fastapi import APIRouter
from typing import Dict

router = APIRouter()


@router.get("/health")
async def health_check() -> Dict[str, str]:
    """
    Basic liveness check.
    Does not touch the cache or Discord, so it answers even when both are down.
    """
    return {"status": "ok"}
