import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from quest_relay.config import settings
from quest_relay.dependencies import get_quest_fetcher
from quest_relay.domain.errors import QuestRelayError
from quest_relay.routers import health, quests

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Quest Relay",
    description="Cached relay for the Discord quests API",
    version=settings.VERSION,
)


# Pre-populate the cache so the first client request is served from it
@app.on_event("startup")
async def warm_cache():
    if not settings.WARM_CACHE_ON_STARTUP or not settings.DISCORD_TOKEN.strip():
        return
    logger.info("Fetching initial quest data...")
    try:
        quests_data = await get_quest_fetcher().refresh()
        logger.info(f"Initial quest data loaded ({len(quests_data)} quests)")
    except Exception as e:
        logger.warning(f"Failed to fetch initial quests: {e}")


def error_response(exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={"error": "Something went wrong!", "message": str(exc)},
    )


# Registered before CORS so error responses still carry CORS headers
@app.middleware("http")
async def unhandled_error_middleware(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception as exc:
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
        return error_response(exc)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(QuestRelayError)
async def relay_error_handler(request: Request, exc: QuestRelayError):
    logger.error(f"Error handling {request.method} {request.url.path}: {exc}")
    return error_response(exc)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return JSONResponse(
            status_code=404,
            content={
                "error": "Not Found",
                "message": "The requested endpoint does not exist",
                "status": 404,
            },
        )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(quests.router, tags=["Quests"])
