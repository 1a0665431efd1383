"""Request/response schemas for the four telemetry resources."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class InsertResponse(BaseModel):
    message: str
    id: int


# ═══════════════════════════════════════════════════════════════
# Real-time samples
# ═══════════════════════════════════════════════════════════════

class RealTimeSampleCreate(BaseModel):
    model_config = {"allow_inf_nan": False}

    trash_collected: Optional[int] = Field(default=0, ge=0)
    robot_status: str = Field(min_length=1, max_length=50)
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)

    @field_validator("trash_collected", mode="before")
    @classmethod
    def default_trash_collected(cls, v):
        return 0 if v is None else v


class RealTimeSampleOut(BaseModel):
    id: int
    timestamp: datetime
    trash_collected: int
    robot_status: str
    latitude: float
    longitude: float

    model_config = {"from_attributes": True}


# ═══════════════════════════════════════════════════════════════
# Cumulative totals
# ═══════════════════════════════════════════════════════════════

class CumulativeTotalsCreate(BaseModel):
    total_trash_collected: int
    plastic: int
    metal: int
    organic: int


class CumulativeTotalsOut(BaseModel):
    id: int
    total_trash_collected: int
    plastic: int
    metal: int
    organic: int
    timestamp: datetime

    model_config = {"from_attributes": True}


# ═══════════════════════════════════════════════════════════════
# Performance snapshots
# ═══════════════════════════════════════════════════════════════

class PerformanceSnapshotCreate(BaseModel):
    model_config = {"allow_inf_nan": False}

    efficiency: float
    operational_time: int = Field(description="Operational time in minutes")


class PerformanceSnapshotOut(BaseModel):
    id: int
    timestamp: datetime
    efficiency: float
    operational_time: int

    model_config = {"from_attributes": True}


# ═══════════════════════════════════════════════════════════════
# Environmental impact
# ═══════════════════════════════════════════════════════════════

class EnvironmentalImpactCreate(BaseModel):
    model_config = {"allow_inf_nan": False}

    pollution_reduction: int
    carbon_offset: float


class EnvironmentalImpactOut(BaseModel):
    id: int
    timestamp: datetime
    pollution_reduction: int
    carbon_offset: float

    model_config = {"from_attributes": True}
