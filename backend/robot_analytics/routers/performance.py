from datetime import timedelta
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from robot_analytics.config import Settings
from robot_analytics.database import get_db
from robot_analytics.models import PerformanceSnapshot
from robot_analytics.routers.common import get_app_settings, store_errors
from robot_analytics.schemas import InsertResponse, PerformanceSnapshotCreate, PerformanceSnapshotOut
from robot_analytics.services.telemetry_store import (
    clamp_window,
    insert_record,
    latest_record,
    records_since,
)

router = APIRouter(prefix="/api/performance", tags=["performance"])


@router.post("", response_model=InsertResponse, status_code=201)
def create_performance_snapshot(data: PerformanceSnapshotCreate, db: Session = Depends(get_db)):
    with store_errors(db, "inserting performance metrics"):
        record = insert_record(db, PerformanceSnapshot, data.model_dump())
    return InsertResponse(message="Performance metrics inserted successfully", id=record.id)


@router.get("", response_model=PerformanceSnapshotOut)
def get_latest_performance_snapshot(db: Session = Depends(get_db)):
    with store_errors(db, "fetching performance metrics"):
        record = latest_record(db, PerformanceSnapshot)
    if record is None:
        raise HTTPException(status_code=404, detail="No performance metrics available")
    return record


@router.get("/history", response_model=List[PerformanceSnapshotOut])
def get_performance_history(
    days: Optional[int] = Query(None, description="Trailing window in days"),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """Snapshots from the last ``days`` days, oldest first."""
    if days is None:
        days = settings.performance_history_default_days
    days = clamp_window(days, settings.performance_history_max_days)
    with store_errors(db, "fetching historical performance data"):
        return records_since(db, PerformanceSnapshot, timedelta(days=days))
