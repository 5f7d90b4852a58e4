# barbershop/routers/appointments_routes.py

import logging
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from barbershop.auth import get_current_user
from barbershop.availability import available_slots, is_slot_booked
from barbershop.config import get_settings
from barbershop.db import Database, get_db
from barbershop.deps import require_admin
from barbershop.notifications import notify_admins_of_booking, notify_status_change
from barbershop.schemas import (
    AdminAppointmentPublic,
    AppointmentCreate,
    AppointmentCreated,
    AppointmentPublic,
    AppointmentStatus,
    AvailableSlots,
    MessageResponse,
    StatusUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["appointments"],
)

APPOINTMENT_COLUMNS = """
        a.*,
        s.name AS service_name,
        s.duration AS service_duration,
        s.price AS service_price,
        b.name AS barber_name
"""
NEWEST_FIRST = "ORDER BY a.appointment_date DESC, a.appointment_time DESC"


@router.get("/admin/appointments", response_model=List[AdminAppointmentPublic])
def list_all_appointments(
    status: Optional[AppointmentStatus] = None,
    date: Optional[date] = None,
    db: Database = Depends(get_db),
    current_user: dict = Depends(require_admin),
):
    query = f"""
        SELECT {APPOINTMENT_COLUMNS},
        u.full_name AS client_name,
        u.email AS client_email,
        u.phone AS client_phone
        FROM appointments a
        JOIN users u ON a.client_id = u.id
        JOIN services s ON a.service_id = s.id
        LEFT JOIN barbers b ON a.barber_id = b.id
    """
    conditions = []
    params = []

    if status is not None:
        conditions.append("a.status = ?")
        params.append(status.value)
    if date is not None:
        conditions.append("a.appointment_date = ?")
        params.append(date.isoformat())

    if conditions:
        query += " WHERE " + " AND ".join(conditions)
    query += " " + NEWEST_FIRST

    return db.fetch_many(query, params)


@router.get("/client/appointments", response_model=List[AppointmentPublic])
def list_my_appointments(
    db: Database = Depends(get_db),
    current_user: dict = Depends(get_current_user),
):
    return db.fetch_many(
        f"""
        SELECT {APPOINTMENT_COLUMNS}
        FROM appointments a
        JOIN services s ON a.service_id = s.id
        LEFT JOIN barbers b ON a.barber_id = b.id
        WHERE a.client_id = ?
        {NEWEST_FIRST}
        """,
        [current_user["id"]],
    )


@router.post("/appointments", response_model=AppointmentCreated, status_code=201)
def create_appointment(
    appt: AppointmentCreate,
    db: Database = Depends(get_db),
    current_user: dict = Depends(get_current_user),
):
    appointment_date = appt.appointment_date.isoformat()
    appointment_time = appt.appointment_time

    # 1) Validate service and barber
    if db.fetch_one("SELECT id FROM services WHERE id = ?", [appt.service_id]) is None:
        raise HTTPException(status_code=404, detail="Service not found")
    if appt.barber_id is not None:
        if db.fetch_one("SELECT id FROM barbers WHERE id = ?", [appt.barber_id]) is None:
            raise HTTPException(status_code=404, detail="Barber not found")

    # 2) Reject full slots (same rule as /available-slots)
    if is_slot_booked(db, appointment_date, appointment_time, appt.barber_id):
        logger.info(
            f"Slot {appointment_date} {appointment_time} already taken",
            extra={"user_id": current_user["id"]},
        )
        raise HTTPException(status_code=409, detail="This time slot is no longer available")

    # 3) Create appointment
    result = db.execute(
        """
        INSERT INTO appointments (client_id, service_id, barber_id, appointment_date, appointment_time, notes)
        VALUES (?, ?, ?, ?, ?, ?)
        """,
        [current_user["id"], appt.service_id, appt.barber_id, appointment_date, appointment_time, appt.notes],
    )
    appointment_id = result.lastrowid
    logger.info(
        "Appointment booked",
        extra={"user_id": current_user["id"], "appointment_id": appointment_id},
    )

    # 4) Tell the admins
    notify_admins_of_booking(db, appointment_date, appointment_time)

    return {"message": "Appointment booked successfully", "appointment_id": appointment_id}


@router.patch("/appointments/{appointment_id}/status", response_model=MessageResponse)
def update_appointment_status(
    appointment_id: int,
    update: StatusUpdate,
    db: Database = Depends(get_db),
    current_user: dict = Depends(require_admin),
):
    appointment = db.fetch_one(
        """
        SELECT a.*, u.full_name AS client_name
        FROM appointments a
        JOIN users u ON a.client_id = u.id
        WHERE a.id = ?
        """,
        [appointment_id],
    )
    if appointment is None:
        raise HTTPException(status_code=404, detail="Appointment not found")

    # any listed status may replace any other
    db.execute(
        """
        UPDATE appointments
        SET status = ?, admin_notes = ?, updated_at = CURRENT_TIMESTAMP
        WHERE id = ?
        """,
        [update.status.value, update.admin_notes, appointment_id],
    )
    logger.info(
        f"Appointment status {appointment['status']} -> {update.status.value}",
        extra={"user_id": current_user["id"], "appointment_id": appointment_id},
    )

    notify_status_change(
        db,
        appointment["client_id"],
        update.status.value,
        appointment["appointment_date"],
        appointment["appointment_time"],
    )

    return {"message": "Appointment status updated successfully"}


@router.get("/available-slots", response_model=AvailableSlots)
def get_available_slots(
    date: date,
    barber_id: Optional[int] = Query(default=None, alias="barberId"),
    db: Database = Depends(get_db),
):
    return available_slots(db, date, barber_id, get_settings().SLOT_MINUTES)
