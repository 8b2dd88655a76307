from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, EmailStr, Field, field_validator



class AppointmentFilter(str, Enum):
    all = "all"
    upcoming = "upcoming"
    completed = "completed"
    cancelled = "cancelled"


class SpecializationSchema(BaseModel):
    id: str
    name: str
    description: str
    icon: str


class DoctorSchema(BaseModel):
    id: str
    name: str
    specialization: str
    experience: int
    rating: float
    image: str
    availability: list[str] = Field(default_factory=list)
    fee: float
    location: str


class TimeSlotSchema(BaseModel):
    value: str
    label: str


class NotificationSchema(BaseModel):
    level: str
    message: str


class PaymentEventSchema(BaseModel):
    kind: str
    outcome: str | None = None
    message: str | None = None
    payment_id: str | None = None


class SelectionSchema(BaseModel):
    step: int
    specialization: str | None = None
    doctor: DoctorSchema | None = None
    date: str | None = None
    time: str | None = None


class SelectSpecializationRequest(BaseModel):
    specialization: str


class SelectDoctorRequest(BaseModel):
    doctor_id: str


class SelectDateRequest(BaseModel):
    date: str = Field(description="YYYY-MM-DD")


class SelectTimeRequest(BaseModel):
    time: str = Field(description="HH:MM, one of the catalog slots")


class AppointmentSchema(BaseModel):
    id: str
    user_id: str
    doctor_id: str
    appointment_date: str
    appointment_time: str
    status: str
    payment_status: str
    payment_id: str | None = None
    created_at: str
    doctor: DoctorSchema | None = None


class BookingSessionResponse(BaseModel):
    session_id: str
    action: str
    reason: str | None = None
    selection: SelectionSchema | None = None
    shortlist: list[DoctorSchema] = Field(default_factory=list)
    payment_in_flight: bool = False
    payment_events: list[PaymentEventSchema] = Field(default_factory=list)
    appointment: AppointmentSchema | None = None
    notifications: list[NotificationSchema] = Field(default_factory=list)
    navigate_to: str | None = None


class RedirectResponseSchema(BaseModel):
    detail: str
    redirect_to: str
    notifications: list[NotificationSchema] = Field(default_factory=list)


class AppointmentListResponse(BaseModel):
    filter: AppointmentFilter
    appointments: list[AppointmentSchema]


class AppointmentActionResponse(BaseModel):
    appointment: AppointmentSchema | None = None
    notifications: list[NotificationSchema] = Field(default_factory=list)


class ContactRequestSchema(BaseModel):
    name: str
    email: EmailStr
    phone: str
    subject: str
    message: str

    @field_validator("name", "phone", "subject", "message")
    @classmethod
    def check_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("field is required")
        return value


class ContactResponseSchema(BaseModel):
    notifications: list[NotificationSchema] = Field(default_factory=list)
