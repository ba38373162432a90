import pytest
from app.core.config import Settings
from app.db.session import DatabaseUnavailableError, build_engine, connect_with_retry, init_db
from app.main import create_app
from fastapi.testclient import TestClient
from sqlalchemy import inspect
from sqlalchemy.exc import OperationalError


class _Conn:
    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, stmt):
        return None


class FlakyEngine:
    """Fails the first ``failures`` connection attempts."""

    def __init__(self, failures: int):
        self.failures = failures
        self.attempts = 0

    def connect(self):
        self.attempts += 1
        if self.attempts <= self.failures:
            raise OperationalError("SELECT 1", {}, Exception("connection refused"))
        return _Conn()


def test_connect_succeeds_after_transient_failures():
    engine = FlakyEngine(failures=3)
    sleeps: list[float] = []

    connect_with_retry(engine, max_retries=10, retry_interval=2.0, sleep=sleeps.append)

    assert engine.attempts == 4
    assert sleeps == [2.0, 2.0, 2.0]


def test_connect_gives_up_after_max_retries():
    engine = FlakyEngine(failures=100)
    sleeps: list[float] = []

    with pytest.raises(DatabaseUnavailableError, match="after 10 attempts"):
        connect_with_retry(engine, max_retries=10, retry_interval=2.0, sleep=sleeps.append)

    assert engine.attempts == 10
    assert len(sleeps) == 9


def test_init_db_is_idempotent(tmp_path):
    engine = build_engine(f"sqlite+pysqlite:///{tmp_path / 'books.db'}")
    try:
        init_db(engine)
        init_db(engine)
        cols = {c["name"] for c in inspect(engine).get_columns("books")}
    finally:
        engine.dispose()

    assert cols == {"id", "title", "author", "progress", "notes", "finished", "rating"}


def test_startup_fails_when_database_unreachable(tmp_path):
    # A path inside a missing directory cannot be opened by sqlite.
    settings = Settings(
        DATABASE_URL=f"sqlite+pysqlite:///{tmp_path / 'missing' / 'books.db'}",
        DB_CONNECT_MAX_RETRIES=2,
        DB_CONNECT_RETRY_INTERVAL_SECS=0,
    )
    app = create_app(settings)

    with pytest.raises(DatabaseUnavailableError):
        with TestClient(app):
            pass
