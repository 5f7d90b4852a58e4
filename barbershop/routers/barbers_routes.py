# barbershop/routers/barbers_routes.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError

from barbershop.db import Database, get_db
from barbershop.deps import require_admin
from barbershop.schemas import BarberCreate, BarberCreated, BarberPublic, BarberUpdate, MessageResponse

router = APIRouter(
    prefix="/barbers",
    tags=["barbers"],
)


@router.get("", response_model=List[BarberPublic])
def list_barbers(db: Database = Depends(get_db)):
    return db.fetch_many("SELECT * FROM barbers WHERE is_active = 1 ORDER BY name")


@router.post("", response_model=BarberCreated, status_code=201)
def create_barber(
    barber: BarberCreate,
    db: Database = Depends(get_db),
    current_user: dict = Depends(require_admin),
):
    result = db.execute(
        "INSERT INTO barbers (name, bio, image_url, specialty) VALUES (?, ?, ?, ?)",
        [barber.name, barber.bio, barber.image_url, barber.specialty],
    )
    return {"message": "Barber created successfully", "barber_id": result.lastrowid}


# deactivating a barber shrinks the any-barber pool used by /available-slots
@router.patch("/{barber_id}", response_model=MessageResponse)
def update_barber(
    barber_id: int,
    update: BarberUpdate,
    db: Database = Depends(get_db),
    current_user: dict = Depends(require_admin),
):
    changes = update.model_dump(exclude_unset=True)
    if not changes:
        raise HTTPException(status_code=400, detail="No updates provided")

    try:
        result = db.update_columns("barbers", barber_id, changes)
    except IntegrityError:
        raise HTTPException(status_code=400, detail="Invalid update")
    if result.rowcount == 0:
        raise HTTPException(status_code=404, detail="Barber not found")

    return {"message": "Barber updated successfully"}
