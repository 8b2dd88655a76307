from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.entities.appointment import Appointment


class AppointmentStorePort(ABC):
    @abstractmethod
    def add(self, appointment: Appointment) -> None:
        raise NotImplementedError

    @abstractmethod
    def get(self, appointment_id: str) -> Appointment | None:
        raise NotImplementedError

    @abstractmethod
    def list_for_user(self, user_id: str) -> list[Appointment]:
        """Appointments owned by the user, oldest booking first."""
        raise NotImplementedError

    @abstractmethod
    def update(self, appointment: Appointment) -> None:
        raise NotImplementedError

    @abstractmethod
    def next_id(self) -> str:
        raise NotImplementedError
