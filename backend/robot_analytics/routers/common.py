"""Helpers shared by the telemetry routers."""
import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import HTTPException, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from robot_analytics.config import Settings

logger = logging.getLogger("robot_analytics.api")

MISSING_FIELDS = "Missing required fields"


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


@contextmanager
def store_errors(db: Session, action: str) -> Iterator[None]:
    """Turn store failures into a generic 500; the cause is only logged."""
    try:
        yield
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error %s", action)
        raise HTTPException(status_code=500, detail="Internal server error")
