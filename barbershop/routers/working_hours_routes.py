# barbershop/routers/working_hours_routes.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from barbershop.db import Database, get_db
from barbershop.deps import require_admin
from barbershop.schemas import MessageResponse, WorkingHoursPublic, WorkingHoursUpdate

router = APIRouter(
    prefix="/working-hours",
    tags=["working hours"],
)


@router.get("", response_model=List[WorkingHoursPublic])
def list_working_hours(db: Database = Depends(get_db)):
    return db.fetch_many("SELECT * FROM working_hours ORDER BY day_of_week")


@router.patch("/{hours_id}", response_model=MessageResponse)
def update_working_hours(
    hours_id: int,
    update: WorkingHoursUpdate,
    db: Database = Depends(get_db),
    current_user: dict = Depends(require_admin),
):
    changes = update.model_dump(exclude_unset=True, exclude_none=True)
    if not changes:
        raise HTTPException(status_code=400, detail="No updates provided")

    current = db.fetch_one("SELECT * FROM working_hours WHERE id = ?", [hours_id])
    if current is None:
        raise HTTPException(status_code=404, detail="Working hours not found")

    # HH:MM strings compare in clock order
    start_time = changes.get("start_time") or current["start_time"]
    end_time = changes.get("end_time") or current["end_time"]
    if start_time >= end_time:
        raise HTTPException(status_code=400, detail="start_time must be before end_time")

    db.update_columns("working_hours", hours_id, changes)
    return {"message": "Working hours updated successfully"}
