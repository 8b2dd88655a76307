from __future__ import annotations

from app.api.v1.schemas import (
    AppointmentSchema,
    BookingSessionResponse,
    DoctorSchema,
    NotificationSchema,
    PaymentEventSchema,
    SelectionSchema,
    SpecializationSchema,
)
from app.application.use_cases.booking_wizard import WizardResult
from app.domain.entities.appointment import Appointment
from app.domain.entities.booking_selection import BookingSelection
from app.domain.entities.doctor import Doctor
from app.domain.entities.specialization import Specialization
from app.infrastructure.store.booking_sessions import BookingSession


def doctor_to_schema(doctor: Doctor) -> DoctorSchema:
    return DoctorSchema(
        id=doctor.id,
        name=doctor.name,
        specialization=doctor.specialization,
        experience=doctor.experience,
        rating=doctor.rating,
        image=doctor.image,
        availability=list(doctor.availability),
        fee=doctor.fee,
        location=doctor.location,
    )


def specialization_to_schema(spec: Specialization) -> SpecializationSchema:
    return SpecializationSchema(id=spec.id, name=spec.name, description=spec.description, icon=spec.icon)


def selection_to_schema(selection: BookingSelection | None) -> SelectionSchema | None:
    if selection is None:
        return None
    return SelectionSchema(
        step=int(selection.step),
        specialization=selection.specialization,
        doctor=doctor_to_schema(selection.doctor) if selection.doctor else None,
        date=selection.date,
        time=selection.time,
    )


def appointment_to_schema(appointment: Appointment) -> AppointmentSchema:
    return AppointmentSchema(
        id=appointment.id,
        user_id=appointment.user_id,
        doctor_id=appointment.doctor_id,
        appointment_date=appointment.appointment_date,
        appointment_time=appointment.appointment_time,
        status=appointment.status.value,
        payment_status=appointment.payment_status.value,
        payment_id=appointment.payment_id,
        created_at=appointment.created_at,
        doctor=doctor_to_schema(appointment.doctor) if appointment.doctor else None,
    )


def notifications_to_schema(items: list[dict[str, str]]) -> list[NotificationSchema]:
    return [NotificationSchema(level=i["level"], message=i["message"]) for i in items]


def session_response(session: BookingSession, result: WizardResult) -> BookingSessionResponse:
    """Snapshot the wizard and drain what this request produced."""
    wizard = session.wizard
    return BookingSessionResponse(
        session_id=session.session_id,
        action=result.action,
        reason=result.reason,
        selection=selection_to_schema(result.selection),
        shortlist=[doctor_to_schema(d) for d in wizard.shortlist],
        payment_in_flight=wizard.payment_in_flight,
        payment_events=[
            PaymentEventSchema(kind=e.kind, outcome=e.outcome, message=e.message, payment_id=e.payment_id)
            for e in wizard.payment_events
        ],
        appointment=appointment_to_schema(result.appointment) if result.appointment else None,
        notifications=notifications_to_schema(session.notifications.drain()),
        navigate_to=session.navigator.drain(),
    )
