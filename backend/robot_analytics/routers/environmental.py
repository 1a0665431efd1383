"""Environmental impact endpoints."""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from robot_analytics.database import get_db
from robot_analytics.models import EnvironmentalImpact
from robot_analytics.routers.common import store_errors
from robot_analytics.schemas import EnvironmentalImpactCreate, EnvironmentalImpactOut, InsertResponse
from robot_analytics.services.telemetry_store import insert_record, latest_record

router = APIRouter(prefix="/api/environmental-impact", tags=["environmental-impact"])


@router.post("", response_model=InsertResponse, status_code=201)
def create_environmental_impact(data: EnvironmentalImpactCreate, db: Session = Depends(get_db)):
    with store_errors(db, "inserting environmental impact data"):
        record = insert_record(db, EnvironmentalImpact, data.model_dump())
    return InsertResponse(message="Environmental impact data inserted successfully", id=record.id)


@router.get("", response_model=EnvironmentalImpactOut)
def get_latest_environmental_impact(db: Session = Depends(get_db)):
    with store_errors(db, "fetching environmental impact data"):
        record = latest_record(db, EnvironmentalImpact)
    if record is None:
        raise HTTPException(status_code=404, detail="No environmental impact data available")
    return record
