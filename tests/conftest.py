from __future__ import annotations

from datetime import date
from typing import Any, Callable, Dict, Generator, List

from fastapi.testclient import TestClient
import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.engine import Engine

from app.config import Settings
from app.db.books import BookStore
from app.db.schema import books, metadata
from app.main import create_app
from app.services.catalog import CatalogService

ALLOWED_ORIGIN = "http://localhost:5500"


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def insert_books(engine: Engine) -> Callable[[List[Dict[str, Any]]], None]:
    def _insert(rows: List[Dict[str, Any]]) -> None:
        with engine.begin() as conn:
            conn.execute(books.insert(), rows)

    return _insert


@pytest.fixture
def seeded(insert_books) -> List[Dict[str, Any]]:
    rows = [
        {"id": 1, "title": "Dune"},
        {"id": 2, "title": "Foundation"},
    ]
    insert_books(rows)
    return rows


@pytest.fixture
def full_record(insert_books) -> Dict[str, Any]:
    row = {
        "id": 7,
        "title": "The Go Programming Language",
        "author": "Alan A. A. Donovan",
        "isbn": "9780134190440",
        "publish_date": date(2015, 10, 26),
        "description": "An introduction to Go.",
    }
    insert_books([row])
    return row


@pytest.fixture
def store(engine: Engine) -> BookStore:
    return BookStore(engine)


@pytest.fixture
def catalog(store: BookStore) -> CatalogService:
    return CatalogService(store)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        database_url="sqlite://",
        cors_origins=[ALLOWED_ORIGIN],
        log_level="DEBUG",
    )


@pytest.fixture
def client(settings: Settings, engine: Engine) -> Generator[TestClient, None, None]:
    app = create_app(settings, engine=engine)
    with TestClient(app) as client:
        yield client
