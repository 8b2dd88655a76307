from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Callable
from zoneinfo import ZoneInfo

from app.application.exceptions import NotAuthenticatedError
from app.application.ports.appointment_store import AppointmentStorePort
from app.application.ports.auth import AuthPort
from app.application.ports.navigation import NavigationPort
from app.application.ports.notifications import NotificationPort
from app.domain.entities.appointment import Appointment, AppointmentStatus
from app.domain.entities.user import User

APPOINTMENT_FILTERS = ("all", "upcoming", "completed", "cancelled")
_UPCOMING_STATUSES = (AppointmentStatus.PENDING, AppointmentStatus.CONFIRMED)


class AppointmentsUseCase:
    """List and cancel the signed-in user's appointments."""

    def __init__(
        self,
        auth: AuthPort,
        store: AppointmentStorePort,
        notifications: NotificationPort,
        navigation: NavigationPort,
        timezone: ZoneInfo | None = None,
        today: Callable[[], date] | None = None,
        login_route: str = "/login",
    ) -> None:
        self._auth = auth
        self._store = store
        self._notifications = notifications
        self._navigation = navigation
        self._timezone = timezone or ZoneInfo("UTC")
        self._today = today or (lambda: datetime.now(self._timezone).date())
        self._login_route = login_route
        self._logger = logging.getLogger(__name__)

    def list_appointments(self, filter: str = "all") -> list[Appointment]:
        user = self._require_user()
        if filter not in APPOINTMENT_FILTERS:
            raise ValueError(f"Unknown appointment filter: {filter}")

        appointments = self._store.list_for_user(user.id)
        if filter == "all":
            return appointments
        if filter == "upcoming":
            today = self._today().isoformat()
            return [
                a for a in appointments
                if a.status in _UPCOMING_STATUSES and a.appointment_date >= today
            ]
        return [a for a in appointments if a.status.value == filter]

    def cancel(self, appointment_id: str) -> Appointment | None:
        """
        Cancel a confirmed appointment owned by the current user.
        Returns the updated appointment, or None when the request was rejected.
        """
        user = self._require_user()
        appointment = self._store.get(appointment_id)
        if appointment is None or appointment.user_id != user.id:
            self._notifications.notify_error("Appointment not found")
            return None
        if appointment.status != AppointmentStatus.CONFIRMED:
            self._notifications.notify_error("Only confirmed appointments can be cancelled")
            return None

        cancelled = replace(appointment, status=AppointmentStatus.CANCELLED)
        self._store.update(cancelled)
        self._logger.info(
            "Appointment cancelled",
            extra={"user_id": user.id, "appointment_id": appointment_id},
        )
        self._notifications.notify_success("Appointment cancelled successfully")
        return cancelled

    def _require_user(self) -> User:
        user = self._auth.current_user()
        if user is None:
            message = "Please login to view appointments"
            self._navigation.go_to(self._login_route)
            self._notifications.notify_error(message)
            raise NotAuthenticatedError(message, redirect_to=self._login_route)
        return user
