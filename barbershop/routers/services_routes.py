# barbershop/routers/services_routes.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError

from barbershop.db import Database, get_db
from barbershop.deps import require_admin
from barbershop.schemas import MessageResponse, ServiceCreate, ServiceCreated, ServicePublic, ServiceUpdate

router = APIRouter(
    prefix="/services",
    tags=["services"],
)


@router.get("", response_model=List[ServicePublic])
def list_services(db: Database = Depends(get_db)):
    return db.fetch_many("SELECT * FROM services WHERE is_active = 1 ORDER BY name")


@router.post("", response_model=ServiceCreated, status_code=201)
def create_service(
    service: ServiceCreate,
    db: Database = Depends(get_db),
    current_user: dict = Depends(require_admin),
):
    result = db.execute(
        "INSERT INTO services (name, description, price, duration) VALUES (?, ?, ?, ?)",
        [service.name, service.description, service.price, service.duration],
    )
    return {"message": "Service created successfully", "service_id": result.lastrowid}


@router.patch("/{service_id}", response_model=MessageResponse)
def update_service(
    service_id: int,
    update: ServiceUpdate,
    db: Database = Depends(get_db),
    current_user: dict = Depends(require_admin),
):
    changes = update.model_dump(exclude_unset=True)
    if not changes:
        raise HTTPException(status_code=400, detail="No updates provided")

    try:
        result = db.update_columns("services", service_id, changes)
    except IntegrityError:
        raise HTTPException(status_code=400, detail="Invalid update")
    if result.rowcount == 0:
        raise HTTPException(status_code=404, detail="Service not found")

    return {"message": "Service updated successfully"}
