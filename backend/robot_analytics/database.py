"""Shared SQLAlchemy Base and the owned store handle used by the API."""
import logging
from datetime import datetime, timezone
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger("robot_analytics.database")

Base = declarative_base()


def utcnow() -> datetime:
    """Naive UTC now, matching what the store keeps in its timestamp columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Database:
    """Engine and session factory for one store.

    Built once per process (or per test) and released with ``dispose``.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = make_url(url)
        engine_kwargs = {}
        if self.url.get_backend_name() == "sqlite":
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if self.url.database in (None, "", ":memory:"):
                # every session must see the same in-memory database
                engine_kwargs["poolclass"] = StaticPool

        self.engine = create_engine(self.url, echo=echo, **engine_kwargs)
        self.SessionLocal = sessionmaker(bind=self.engine, autoflush=False, expire_on_commit=False)

    @property
    def safe_url(self) -> str:
        return self.url.render_as_string(hide_password=True)

    def create_schema(self) -> None:
        """Create any missing tables. Existing tables are left alone."""
        # models register themselves on Base when imported
        from robot_analytics import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine, checkfirst=True)

    def ping(self) -> bool:
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database connection closed")


def get_db(request: Request) -> Iterator[Session]:
    """Request-scoped session from the application's store."""
    db = request.app.state.database.SessionLocal()
    try:
        yield db
    finally:
        db.close()
