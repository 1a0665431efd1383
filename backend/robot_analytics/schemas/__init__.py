"""Pydantic schemas for API request/response validation."""
from robot_analytics.schemas.telemetry import (
    CumulativeTotalsCreate,
    CumulativeTotalsOut,
    EnvironmentalImpactCreate,
    EnvironmentalImpactOut,
    InsertResponse,
    PerformanceSnapshotCreate,
    PerformanceSnapshotOut,
    RealTimeSampleCreate,
    RealTimeSampleOut,
)

__all__ = [
    "InsertResponse",
    "RealTimeSampleCreate", "RealTimeSampleOut",
    "CumulativeTotalsCreate", "CumulativeTotalsOut",
    "PerformanceSnapshotCreate", "PerformanceSnapshotOut",
    "EnvironmentalImpactCreate", "EnvironmentalImpactOut",
]
