"""Test fixtures: every test gets its own in-memory store and API client."""
from __future__ import annotations

from typing import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from robot_analytics.config import Settings
from robot_analytics.database import Database, utcnow
from robot_analytics.main import create_app


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        database_url="sqlite://",
        log_level="WARNING",
        real_time_history_max_hours=72,
        performance_history_max_days=30,
    )


@pytest.fixture
def database() -> Iterator[Database]:
    db = Database("sqlite://")
    db.create_schema()
    yield db
    db.dispose()


@pytest.fixture
def session(database: Database) -> Iterator[Session]:
    s = database.SessionLocal()
    yield s
    s.close()


@pytest.fixture
def client(settings: Settings, database: Database) -> Iterator[TestClient]:
    with TestClient(create_app(settings, database)) as c:
        yield c


@pytest.fixture
def add_rows(session: Session):
    """Insert model rows directly, each ``age`` before now."""

    def _add(*rows_with_age):
        for row, age in rows_with_age:
            row.timestamp = utcnow() - age
            session.add(row)
        session.commit()

    return _add
