from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from app.domain.entities.doctor import Doctor


class AppointmentStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(frozen=True)
class Appointment:
    id: str
    user_id: str
    doctor_id: str
    appointment_date: str  # YYYY-MM-DD
    appointment_time: str  # HH:MM
    status: AppointmentStatus
    payment_status: PaymentStatus
    created_at: str  # ISO timestamp
    payment_id: str | None = None
    doctor: Doctor | None = None
