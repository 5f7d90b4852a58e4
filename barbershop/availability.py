# barbershop/availability.py

"""
Slot availability.

A slot is a fixed clock time (HH:MM) inside the day's working hours. A
booking for a named barber blocks only that barber. A booking with no
barber ("any barber") takes one place from the pool of active barbers, so
an any-barber slot is full once

    distinct booked barbers + any-barber bookings >= active barbers

The pool count does not pin any-barber bookings to a real barber, so it is
an approximation of true capacity. Booking uses the same rule.
"""

from datetime import date, datetime, timedelta
from typing import Optional

# statuses that hold a slot
HOLDING_STATUSES = ("pending", "accepted")
_HOLDING_SQL = "status IN ({})".format(", ".join(f"'{s}'" for s in HOLDING_STATUSES))


def day_of_week(day: date) -> int:
    """Weekday in working_hours numbering: 0 = Sunday ... 6 = Saturday."""
    return (day.weekday() + 1) % 7


def generate_slots(start_time: str, end_time: str, slot_minutes: int = 30) -> list[str]:
    work_start = datetime.strptime(start_time, "%H:%M")
    work_end = datetime.strptime(end_time, "%H:%M")
    slot_delta = timedelta(minutes=slot_minutes)

    slots = []
    current = work_start
    while current + slot_delta <= work_end:
        slots.append(current.strftime("%H:%M"))
        current += slot_delta
    return slots


def count_active_barbers(db) -> int:
    return db.fetch_one("SELECT COUNT(*) AS count FROM barbers WHERE is_active = 1")["count"]


def barber_is_booked(db, appointment_date: str, appointment_time: str, barber_id: int) -> bool:
    booked = db.fetch_one(
        f"""
        SELECT id FROM appointments
        WHERE appointment_date = ? AND appointment_time = ?
        AND barber_id = ?
        AND {_HOLDING_SQL}
        """,
        [appointment_date, appointment_time, barber_id],
    )
    return booked is not None


def pool_is_full(db, appointment_date: str, appointment_time: str, active_barbers: int) -> bool:
    booked_barbers = db.fetch_one(
        f"""
        SELECT COUNT(DISTINCT barber_id) AS count FROM appointments
        WHERE appointment_date = ? AND appointment_time = ?
        AND barber_id IS NOT NULL
        AND {_HOLDING_SQL}
        """,
        [appointment_date, appointment_time],
    )["count"]
    any_barber_bookings = db.fetch_one(
        f"""
        SELECT COUNT(*) AS count FROM appointments
        WHERE appointment_date = ? AND appointment_time = ?
        AND barber_id IS NULL
        AND {_HOLDING_SQL}
        """,
        [appointment_date, appointment_time],
    )["count"]
    return booked_barbers + any_barber_bookings >= active_barbers


def is_slot_booked(
    db,
    appointment_date: str,
    appointment_time: str,
    barber_id: Optional[int] = None,
) -> bool:
    if barber_id is not None:
        return barber_is_booked(db, appointment_date, appointment_time, barber_id)
    return pool_is_full(db, appointment_date, appointment_time, count_active_barbers(db))


def available_slots(
    db,
    day: date,
    barber_id: Optional[int] = None,
    slot_minutes: int = 30,
) -> list[str]:
    """Ordered HH:MM start times still bookable on ``day``."""
    hours = db.fetch_one(
        """
        SELECT start_time, end_time
        FROM working_hours
        WHERE day_of_week = ? AND is_active = 1
        """,
        [day_of_week(day)],
    )
    if hours is None:
        return []

    appointment_date = day.isoformat()
    active_barbers = count_active_barbers(db) if barber_id is None else 0

    available = []
    for slot in generate_slots(hours["start_time"], hours["end_time"], slot_minutes):
        if barber_id is not None:
            booked = barber_is_booked(db, appointment_date, slot, barber_id)
        else:
            booked = pool_is_full(db, appointment_date, slot, active_barbers)
        if not booked:
            available.append(slot)
    return available
