import logging
import sys

import uvicorn
from quest_relay.config import settings
from quest_relay.db.init_db import init_database
from quest_relay.dependencies import get_fetcher_config

logger = logging.getLogger("quest_relay")


def main():
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        init_database()
    except Exception as e:
        logger.error(f"Failed to synchronize database: {e}")
        sys.exit(1)

    port = get_fetcher_config().port

    # Start the API server
    logger.info(f"Server is running on http://{settings.API_HOST}:{port}")
    logger.info(f"API available at http://{settings.API_HOST}:{port}/v1/quests")
    uvicorn.run(
        "quest_relay.main:app",
        host=settings.API_HOST,
        port=port,
        reload=settings.API_RELOAD,
    )


if __name__ == "__main__":
    main()
