# barbershop/notifications.py

import logging
from typing import Optional

logger = logging.getLogger(__name__)

APPOINTMENT = "appointment"

NEW_BOOKING_TITLE = "New Appointment Request"
NEW_BOOKING_MESSAGE = "New booking request for {date} at {time}"

# status -> (title, message); statuses missing here send nothing
STATUS_TEMPLATES = {
    "accepted": (
        "Appointment Confirmed!",
        "Your appointment on {date} at {time} has been confirmed.",
    ),
    "rejected": (
        "Appointment Declined",
        "Unfortunately, your appointment request for {date} at {time} could not be accommodated.",
    ),
    "cancelled": (
        "Appointment Cancelled",
        "Your appointment on {date} at {time} has been cancelled.",
    ),
}


def create_notification(db, user_id: int, title: str, message: str, type_: str = APPOINTMENT) -> int:
    result = db.execute(
        "INSERT INTO notifications (user_id, title, message, type) VALUES (?, ?, ?, ?)",
        [user_id, title, message, type_],
    )
    return result.lastrowid


def notify_admins_of_booking(db, appointment_date: str, appointment_time: str) -> int:
    """One notification per admin user. Returns how many were sent."""
    admins = db.fetch_many("SELECT id FROM users WHERE role = ?", ["admin"])
    message = NEW_BOOKING_MESSAGE.format(date=appointment_date, time=appointment_time)
    for admin in admins:
        create_notification(db, admin["id"], NEW_BOOKING_TITLE, message)
    return len(admins)


def notify_status_change(
    db,
    client_id: int,
    status: str,
    appointment_date: str,
    appointment_time: str,
) -> Optional[int]:
    template = STATUS_TEMPLATES.get(status)
    if template is None:
        return None
    title, message = template
    notification_id = create_notification(
        db,
        client_id,
        title,
        message.format(date=appointment_date, time=appointment_time),
    )
    logger.info(f"Notified client of status '{status}'", extra={"user_id": client_id})
    return notification_id
