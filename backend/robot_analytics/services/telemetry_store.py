"""
Typed access to the telemetry tables.

Every table shares the same two read shapes: the most recent row, and the
rows inside a trailing time window. Handlers go through these helpers
instead of writing SQL per resource.
"""
import logging
from datetime import datetime, timedelta
from typing import Any, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from robot_analytics.database import Base, utcnow

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


def insert_record(db: Session, model: Type[ModelT], values: dict[str, Any]) -> ModelT:
    """Insert one row and return it with its assigned id and timestamp."""
    record = model(**values)
    db.add(record)
    db.commit()
    db.refresh(record)
    logger.debug("Inserted %s id=%s", model.__tablename__, record.id)
    return record


def latest_record(db: Session, model: Type[ModelT]) -> Optional[ModelT]:
    """Row with the greatest timestamp, newest id first on ties."""
    stmt = (
        select(model)
        .order_by(model.timestamp.desc(), model.id.desc())
        .limit(1)
    )
    return db.execute(stmt).scalars().first()


def records_since(
    db: Session,
    model: Type[ModelT],
    window: timedelta,
    now: Optional[datetime] = None,
) -> List[ModelT]:
    """Rows with ``timestamp >= now - window`` in ascending time order."""
    cutoff = (now or utcnow()) - window
    stmt = (
        select(model)
        .where(model.timestamp >= cutoff)
        .order_by(model.timestamp.asc(), model.id.asc())
    )
    return list(db.execute(stmt).scalars().all())


def clamp_window(value: int, upper: int) -> int:
    """Clamp a caller supplied window size to ``[1, upper]``."""
    return max(1, min(value, upper))
