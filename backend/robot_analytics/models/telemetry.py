"""Append-only telemetry tables. One row per report, never updated."""
from sqlalchemy import Column, DateTime, Float, Integer, String, func

from robot_analytics.database import Base, utcnow


def _timestamp_column() -> Column:
    return Column(
        DateTime,
        nullable=False,
        index=True,
        default=utcnow,
        server_default=func.current_timestamp(),
    )


class RealTimeSample(Base):
    """Live robot state: position, status and trash picked up."""
    __tablename__ = "real_time_data"

    id = Column(Integer, primary_key=True, autoincrement=True)
    timestamp = _timestamp_column()
    trash_collected = Column(Integer, nullable=False, default=0)
    robot_status = Column(String(50), nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)

    def __repr__(self):
        return f"<RealTimeSample(id={self.id}, status='{self.robot_status}')>"


class CumulativeTotals(Base):
    """Running totals with a per-material breakdown."""
    __tablename__ = "cumulative_data"

    id = Column(Integer, primary_key=True, autoincrement=True)
    total_trash_collected = Column(Integer, nullable=False)
    plastic = Column(Integer, nullable=False)
    metal = Column(Integer, nullable=False)
    organic = Column(Integer, nullable=False)
    timestamp = _timestamp_column()


class PerformanceSnapshot(Base):
    __tablename__ = "performance_metrics"

    id = Column(Integer, primary_key=True, autoincrement=True)
    timestamp = _timestamp_column()
    efficiency = Column(Float, nullable=False)
    operational_time = Column(Integer, nullable=False)  # minutes


class EnvironmentalImpact(Base):
    __tablename__ = "environmental_impact"

    id = Column(Integer, primary_key=True, autoincrement=True)
    timestamp = _timestamp_column()
    pollution_reduction = Column(Integer, nullable=False)
    carbon_offset = Column(Float, nullable=False)
