from __future__ import annotations

import logging
import time
from typing import Any, Callable, Generator

from app.models import Base
from fastapi import Request
from sqlalchemy import Engine, create_engine, text
from sqlalchemy.engine import URL
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

logger = logging.getLogger(__name__)


class DatabaseUnavailableError(RuntimeError):
    """Raised when the database cannot be reached within the retry budget."""


def build_engine(url: str | URL) -> Engine:
    kwargs: dict[str, Any] = {"pool_pre_ping": True}
    if str(url).startswith("sqlite"):
        # Route functions run on a threadpool; sqlite connections must be shareable.
        kwargs["connect_args"] = {"check_same_thread": False}
    return create_engine(url, **kwargs)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def connect_with_retry(
    engine: Engine,
    *,
    max_retries: int,
    retry_interval: float,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Block until a round trip to the database succeeds.

    Makes at most ``max_retries`` attempts with a fixed ``retry_interval``
    between them, then raises DatabaseUnavailableError.
    """
    last_exc: SQLAlchemyError | None = None
    for attempt in range(1, max_retries + 1):
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            logger.info("connected to database (attempt %d/%d)", attempt, max_retries)
            return
        except SQLAlchemyError as exc:
            last_exc = exc
            logger.warning(
                "failed to connect to database (attempt %d/%d): %s",
                attempt,
                max_retries,
                exc,
            )
            if attempt < max_retries:
                sleep(retry_interval)

    logger.error("giving up on database after %d attempts", max_retries)
    raise DatabaseUnavailableError(
        f"failed to connect to database after {max_retries} attempts: {last_exc}"
    ) from last_exc


def init_db(engine: Engine) -> None:
    """Create the books table if it does not exist yet."""
    Base.metadata.create_all(bind=engine)
    logger.info("books table ready")


def get_db(request: Request) -> Generator[Session, None, None]:
    session_factory: sessionmaker[Session] = request.app.state.session_factory
    db = session_factory()
    try:
        yield db
    finally:
        db.close()
