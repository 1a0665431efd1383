"""
Schema initializer for the robot analytics store.

Creates the four telemetry tables when missing and can seed one example
row per table for smoke testing:

    robot-analytics-init-db --database-url sqlite:///./robot_analytics.db --seed
"""
import argparse
import logging
import sys
from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy.orm import Session

from robot_analytics.config import get_settings
from robot_analytics.database import Database
from robot_analytics.models import (
    CumulativeTotals,
    EnvironmentalImpact,
    PerformanceSnapshot,
    RealTimeSample,
)

logger = logging.getLogger("robot_analytics.seed")


def sample_records(timestamp: Optional[datetime] = None) -> list:
    """One example row per table. ``timestamp`` overrides insertion time."""
    records = [
        RealTimeSample(trash_collected=25, robot_status="Active", latitude=37.7749, longitude=-122.4194),
        CumulativeTotals(total_trash_collected=1000, plastic=600, metal=300, organic=100),
        PerformanceSnapshot(efficiency=12.5, operational_time=480),
        EnvironmentalImpact(pollution_reduction=1000, carbon_offset=250.5),
    ]
    if timestamp is not None:
        for record in records:
            record.timestamp = timestamp
    return records


def seed_database(session: Session, timestamp: Optional[datetime] = None) -> int:
    """Insert the example rows and return how many were written."""
    records = sample_records(timestamp)
    session.add_all(records)
    session.commit()
    return len(records)


def init_database(database: Database, seed: bool = False, timestamp: Optional[datetime] = None) -> int:
    database.create_schema()
    logger.info("All tables created successfully")
    if not seed:
        return 0

    session = database.SessionLocal()
    try:
        inserted = seed_database(session, timestamp)
    finally:
        session.close()
    logger.info("Sample data inserted successfully (%d rows)", inserted)
    return inserted


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Create the robot analytics tables.")
    parser.add_argument(
        "--database-url",
        default=None,
        help="SQLAlchemy database URL (defaults to DATABASE_URL)",
    )
    parser.add_argument("--seed", action="store_true", help="insert one example row per table")
    args = parser.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    database = Database(args.database_url or settings.database_url)
    try:
        init_database(database, seed=args.seed)
    except Exception:
        logger.exception("Error initializing database")
        return 1
    finally:
        database.dispose()
    return 0


if __name__ == "__main__":
    sys.exit(main())
