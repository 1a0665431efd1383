"""Real-time robot samples: position, status and trash count."""
from datetime import timedelta
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from robot_analytics.config import Settings
from robot_analytics.database import get_db
from robot_analytics.models import RealTimeSample
from robot_analytics.routers.common import get_app_settings, store_errors
from robot_analytics.schemas import InsertResponse, RealTimeSampleCreate, RealTimeSampleOut
from robot_analytics.services.telemetry_store import (
    clamp_window,
    insert_record,
    latest_record,
    records_since,
)

router = APIRouter(prefix="/api/real-time", tags=["real-time"])


@router.post("", response_model=InsertResponse, status_code=201)
def create_real_time_sample(data: RealTimeSampleCreate, db: Session = Depends(get_db)):
    """Record the robot's current position and status."""
    with store_errors(db, "inserting real-time data"):
        record = insert_record(db, RealTimeSample, data.model_dump())
    return InsertResponse(message="Real-time data inserted successfully", id=record.id)


@router.get("", response_model=RealTimeSampleOut)
def get_latest_real_time_sample(db: Session = Depends(get_db)):
    with store_errors(db, "fetching real-time data"):
        record = latest_record(db, RealTimeSample)
    if record is None:
        raise HTTPException(status_code=404, detail="No real-time data available")
    return record


@router.get("/history", response_model=List[RealTimeSampleOut])
def get_real_time_history(
    hours: Optional[int] = Query(None, description="Trailing window in hours"),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """Samples from the last ``hours`` hours, oldest first."""
    if hours is None:
        hours = settings.real_time_history_default_hours
    hours = clamp_window(hours, settings.real_time_history_max_hours)
    with store_errors(db, "fetching historical real-time data"):
        return records_since(db, RealTimeSample, timedelta(hours=hours))
