from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from app.api.errors import register_exception_handlers
from app.api.router import api_router
from app.core.config import Settings, settings as default_settings
from app.core.logging import configure_logging
from app.core.otel import init_otel
from app.db.session import (
    build_engine,
    build_session_factory,
    connect_with_retry,
    init_db,
)
from app.middleware.request_id import RequestIdMiddleware
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Blocks startup until the database answers or the retries run out.
        engine = build_engine(settings.sqlalchemy_database_url)
        try:
            connect_with_retry(
                engine,
                max_retries=settings.db_connect_max_retries,
                retry_interval=settings.db_connect_retry_interval_secs,
            )
            init_db(engine)
        except Exception:
            engine.dispose()
            raise

        app.state.session_factory = build_session_factory(engine)
        try:
            yield
        finally:
            engine.dispose()

    app = FastAPI(title=settings.api_name, lifespan=lifespan)

    app.add_middleware(RequestIdMiddleware)
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials="*" not in settings.cors_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)
    app.include_router(api_router)

    if init_otel(app, settings):
        logger.info("OpenTelemetry tracing enabled")

    return app


app = create_app()
