# barbershop/schemas.py

from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

HHMM = r"^([01]\d|2[0-3]):[0-5]\d$"


class UserRole(str, Enum):
    client = "client"
    admin = "admin"


class AppointmentStatus(str, Enum):
    pending = "pending"
    accepted = "accepted"
    rejected = "rejected"
    completed = "completed"
    cancelled = "cancelled"


class CamelModel(BaseModel):
    """Request/response bodies the client UI speaks in camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(BaseModel):
    message: str


# --- auth ---

class RegisterRequest(CamelModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1, max_length=72)  # bcrypt limit
    full_name: str = Field(min_length=1)
    phone: Optional[str] = None


class LoginRequest(CamelModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class UserPublic(CamelModel):
    id: int
    email: str
    full_name: str
    phone: Optional[str] = None
    role: UserRole


class AuthResponse(CamelModel):
    message: str
    token: str
    user: UserPublic


class TokenUser(BaseModel):
    id: int
    email: Optional[str] = None
    role: UserRole


# --- appointments ---

class AppointmentCreate(CamelModel):
    service_id: int
    barber_id: Optional[int] = None  # None = any barber
    appointment_date: date
    appointment_time: str = Field(pattern=HHMM)
    notes: Optional[str] = None


class AppointmentCreated(CamelModel):
    message: str
    appointment_id: int


class StatusUpdate(CamelModel):
    status: AppointmentStatus
    admin_notes: Optional[str] = None


class AppointmentPublic(BaseModel):
    id: int
    client_id: int
    barber_id: Optional[int] = None
    service_id: int
    appointment_date: str
    appointment_time: str
    status: AppointmentStatus
    notes: Optional[str] = None
    admin_notes: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    service_name: str
    service_duration: int
    service_price: float
    barber_name: Optional[str] = None


class AdminAppointmentPublic(AppointmentPublic):
    client_name: str
    client_email: str
    client_phone: Optional[str] = None


# --- services ---

class ServicePublic(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    price: float
    duration: int
    is_active: bool
    created_at: Optional[str] = None


class ServiceCreate(CamelModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    price: float = Field(gt=0)
    duration: int = Field(gt=0)


class ServiceUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    price: Optional[float] = Field(default=None, gt=0)
    duration: Optional[int] = Field(default=None, gt=0)
    is_active: Optional[bool] = None


class ServiceCreated(CamelModel):
    message: str
    service_id: int


# --- barbers ---

class BarberPublic(BaseModel):
    id: int
    name: str
    bio: Optional[str] = None
    image_url: Optional[str] = None
    specialty: Optional[str] = None
    is_active: bool
    created_at: Optional[str] = None


class BarberCreate(CamelModel):
    name: str = Field(min_length=1)
    bio: Optional[str] = None
    image_url: Optional[str] = None
    specialty: Optional[str] = None


class BarberUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    bio: Optional[str] = None
    image_url: Optional[str] = None
    specialty: Optional[str] = None
    is_active: Optional[bool] = None


class BarberCreated(CamelModel):
    message: str
    barber_id: int


# --- working hours ---

class WorkingHoursPublic(BaseModel):
    id: int
    day_of_week: int  # 0=Sun, 1=Mon ... 6=Sat
    start_time: str
    end_time: str
    is_active: bool


class WorkingHoursUpdate(CamelModel):
    start_time: Optional[str] = Field(default=None, pattern=HHMM)
    end_time: Optional[str] = Field(default=None, pattern=HHMM)
    is_active: Optional[bool] = None


# --- notifications ---

class NotificationPublic(BaseModel):
    id: int
    user_id: int
    title: str
    message: str
    type: str
    is_read: bool
    created_at: Optional[str] = None


class UnreadCount(BaseModel):
    count: int


AvailableSlots = List[str]
