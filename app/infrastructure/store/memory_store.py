from __future__ import annotations

from app.application.ports.appointment_store import AppointmentStorePort
from app.domain.entities.appointment import Appointment, AppointmentStatus, PaymentStatus
from app.infrastructure.catalog.catalog_data import DOCTORS


def _seed_appointments() -> list[Appointment]:
    doctors = {doctor.id: doctor for doctor in DOCTORS}
    return [
        Appointment(
            id="1",
            user_id="1",
            doctor_id="1",
            appointment_date="2024-01-15",
            appointment_time="10:00",
            status=AppointmentStatus.CONFIRMED,
            payment_status=PaymentStatus.COMPLETED,
            created_at="2024-01-10T10:00:00Z",
            doctor=doctors["1"],
        ),
        Appointment(
            id="2",
            user_id="1",
            doctor_id="2",
            appointment_date="2024-01-20",
            appointment_time="14:30",
            status=AppointmentStatus.PENDING,
            payment_status=PaymentStatus.COMPLETED,
            created_at="2024-01-12T14:00:00Z",
            doctor=doctors["2"],
        ),
    ]


class MemoryAppointmentStore(AppointmentStorePort):
    def __init__(self, appointments: list[Appointment] | None = None, seed: bool = False) -> None:
        self._appointments: dict[str, Appointment] = {}
        initial = appointments if appointments is not None else (_seed_appointments() if seed else [])
        for appointment in initial:
            self._appointments[appointment.id] = appointment
        self._counter = len(self._appointments)

    def add(self, appointment: Appointment) -> None:
        if appointment.id in self._appointments:
            raise ValueError(f"Appointment {appointment.id} already exists")
        self._appointments[appointment.id] = appointment

    def get(self, appointment_id: str) -> Appointment | None:
        return self._appointments.get(appointment_id)

    def list_for_user(self, user_id: str) -> list[Appointment]:
        owned = [a for a in self._appointments.values() if a.user_id == user_id]
        return sorted(owned, key=lambda a: a.created_at)

    def update(self, appointment: Appointment) -> None:
        if appointment.id not in self._appointments:
            raise KeyError(appointment.id)
        self._appointments[appointment.id] = appointment

    def next_id(self) -> str:
        # Skips ids taken by explicitly supplied appointments.
        while True:
            self._counter += 1
            candidate = str(self._counter)
            if candidate not in self._appointments:
                return candidate
