# barbershop/routers/notifications_routes.py

from typing import List

from fastapi import APIRouter, Depends

from barbershop.auth import get_current_user
from barbershop.db import Database, get_db
from barbershop.schemas import MessageResponse, NotificationPublic, UnreadCount

router = APIRouter(
    prefix="/notifications",
    tags=["notifications"],
)

LIST_LIMIT = 50


@router.get("", response_model=List[NotificationPublic])
def list_notifications(
    db: Database = Depends(get_db),
    current_user: dict = Depends(get_current_user),
):
    return db.fetch_many(
        """
        SELECT * FROM notifications
        WHERE user_id = ?
        ORDER BY created_at DESC, id DESC
        LIMIT ?
        """,
        [current_user["id"], LIST_LIMIT],
    )


@router.get("/unread-count", response_model=UnreadCount)
def unread_count(
    db: Database = Depends(get_db),
    current_user: dict = Depends(get_current_user),
):
    result = db.fetch_one(
        "SELECT COUNT(*) AS count FROM notifications WHERE user_id = ? AND is_read = 0",
        [current_user["id"]],
    )
    return {"count": result["count"]}


@router.patch("/read-all", response_model=MessageResponse)
def mark_all_read(
    db: Database = Depends(get_db),
    current_user: dict = Depends(get_current_user),
):
    db.execute("UPDATE notifications SET is_read = 1 WHERE user_id = ?", [current_user["id"]])
    return {"message": "All notifications marked as read"}


@router.patch("/{notification_id}/read", response_model=MessageResponse)
def mark_read(
    notification_id: int,
    db: Database = Depends(get_db),
    current_user: dict = Depends(get_current_user),
):
    # scoped to the caller; someone else's id is a silent no-op
    db.execute(
        "UPDATE notifications SET is_read = 1 WHERE id = ? AND user_id = ?",
        [notification_id, current_user["id"]],
    )
    return {"message": "Notification marked as read"}
