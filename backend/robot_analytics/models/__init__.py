"""All SQLAlchemy models, re-exported for app and schema setup."""

from robot_analytics.models.telemetry import (
    CumulativeTotals,
    EnvironmentalImpact,
    PerformanceSnapshot,
    RealTimeSample,
)

__all__ = [
    "RealTimeSample",
    "CumulativeTotals",
    "PerformanceSnapshot",
    "EnvironmentalImpact",
]
