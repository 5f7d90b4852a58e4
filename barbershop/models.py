# barbershop/models.py

from datetime import datetime
from typing import Optional

from sqlalchemy import CheckConstraint, Index, text
from sqlmodel import SQLModel, Field

NOW = {"server_default": text("CURRENT_TIMESTAMP")}
TRUE = {"server_default": text("1")}
FALSE = {"server_default": text("0")}


class User(SQLModel, table=True):
    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint("role IN ('client', 'admin')", name="ck_users_role"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(unique=True)
    password: str  # bcrypt hash
    full_name: str
    phone: Optional[str] = None
    role: str = Field(default="client", sa_column_kwargs={"server_default": "client"})
    created_at: Optional[datetime] = Field(default=None, sa_column_kwargs=NOW)
    updated_at: Optional[datetime] = Field(default=None, sa_column_kwargs=NOW)


class Barber(SQLModel, table=True):
    __tablename__ = "barbers"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    bio: Optional[str] = None
    image_url: Optional[str] = None
    specialty: Optional[str] = None
    is_active: bool = Field(default=True, sa_column_kwargs=TRUE)
    created_at: Optional[datetime] = Field(default=None, sa_column_kwargs=NOW)


class Service(SQLModel, table=True):
    __tablename__ = "services"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    description: Optional[str] = None
    price: float
    duration: int  # minutes
    is_active: bool = Field(default=True, sa_column_kwargs=TRUE)
    created_at: Optional[datetime] = Field(default=None, sa_column_kwargs=NOW)


class Appointment(SQLModel, table=True):
    __tablename__ = "appointments"
    __table_args__ = (
        CheckConstraint(
            "status IN ('pending', 'accepted', 'rejected', 'completed', 'cancelled')",
            name="ck_appointments_status",
        ),
        Index("ix_appointments_slot", "appointment_date", "appointment_time"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    client_id: int = Field(foreign_key="users.id")
    barber_id: Optional[int] = Field(default=None, foreign_key="barbers.id")  # None = any barber
    service_id: int = Field(foreign_key="services.id")
    appointment_date: str  # YYYY-MM-DD
    appointment_time: str  # HH:MM
    status: str = Field(default="pending", sa_column_kwargs={"server_default": "pending"})
    notes: Optional[str] = None
    admin_notes: Optional[str] = None
    created_at: Optional[datetime] = Field(default=None, sa_column_kwargs=NOW)
    updated_at: Optional[datetime] = Field(default=None, sa_column_kwargs=NOW)


class WorkingHours(SQLModel, table=True):
    __tablename__ = "working_hours"
    __table_args__ = (
        CheckConstraint("day_of_week >= 0 AND day_of_week <= 6", name="ck_working_hours_day"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    day_of_week: int  # 0=Sun, 1=Mon ... 6=Sat
    start_time: str
    end_time: str
    is_active: bool = Field(default=True, sa_column_kwargs=TRUE)


class UnavailableSlot(SQLModel, table=True):
    __tablename__ = "unavailable_slots"

    id: Optional[int] = Field(default=None, primary_key=True)
    barber_id: Optional[int] = Field(default=None, foreign_key="barbers.id")
    start_datetime: str
    end_datetime: str
    reason: Optional[str] = None


class Notification(SQLModel, table=True):
    __tablename__ = "notifications"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    title: str
    message: str
    type: str
    is_read: bool = Field(default=False, sa_column_kwargs=FALSE)
    created_at: Optional[datetime] = Field(default=None, sa_column_kwargs=NOW)
