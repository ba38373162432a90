import pytest
from app.api.deps import get_book_repository
from app.core.config import Settings
from app.crud.memory_books import InMemoryBookRepository
from app.main import create_app
from fastapi.testclient import TestClient


@pytest.fixture()
def test_settings(tmp_path):
    # A file-backed SQLite DB per test keeps tests independent of Postgres.
    return Settings(
        DATABASE_URL=f"sqlite+pysqlite:///{tmp_path / 'books.db'}",
        DB_CONNECT_MAX_RETRIES=1,
        DB_CONNECT_RETRY_INTERVAL_SECS=0,
    )


@pytest.fixture()
def app(test_settings):
    return create_app(test_settings)


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def memory_repo():
    return InMemoryBookRepository()


@pytest.fixture()
def memory_client(app, memory_repo):
    app.dependency_overrides[get_book_repository] = lambda: memory_repo
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
