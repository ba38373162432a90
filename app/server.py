from __future__ import annotations

import logging

import uvicorn

from app.core.config import settings
from app.core.logging import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    configure_logging(settings.log_level)
    logger.info("server starting on port %d", settings.port)
    # A failed lifespan startup (database unreachable) makes uvicorn exit non-zero.
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
