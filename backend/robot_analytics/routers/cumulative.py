from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from robot_analytics.database import get_db
from robot_analytics.models import CumulativeTotals
from robot_analytics.routers.common import MISSING_FIELDS, store_errors
from robot_analytics.schemas import CumulativeTotalsCreate, CumulativeTotalsOut, InsertResponse
from robot_analytics.services.telemetry_store import insert_record, latest_record

router = APIRouter(prefix="/api/cumulative", tags=["cumulative"])


@router.post("", response_model=InsertResponse, status_code=201)
def create_cumulative_totals(data: CumulativeTotalsCreate, db: Session = Depends(get_db)):
    """Record running totals and the material breakdown."""
    values = data.model_dump()
    # Zero counts are rejected along with absent ones. Kept until it is
    # confirmed whether a zero breakdown is a legitimate report.
    if not all(values.values()):
        raise HTTPException(status_code=400, detail=MISSING_FIELDS)

    with store_errors(db, "inserting cumulative data"):
        record = insert_record(db, CumulativeTotals, values)
    return InsertResponse(message="Cumulative data inserted successfully", id=record.id)


@router.get("", response_model=CumulativeTotalsOut)
def get_latest_cumulative_totals(db: Session = Depends(get_db)):
    with store_errors(db, "fetching cumulative data"):
        record = latest_record(db, CumulativeTotals)
    if record is None:
        raise HTTPException(status_code=404, detail="No cumulative data available")
    return record
