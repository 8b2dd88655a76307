"""
Tests for the appointments list and cancellation.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date

import pytest

from app.application.exceptions import NotAuthenticatedError
from app.application.use_cases.appointments import AppointmentsUseCase
from app.domain.entities.appointment import Appointment, AppointmentStatus, PaymentStatus
from app.infrastructure.auth.static_auth import StaticAuthProvider
from app.infrastructure.navigation.recording_navigator import RecordingNavigator
from app.infrastructure.notifications.recording_sink import RecordingNotificationSink
from app.infrastructure.store.memory_store import MemoryAppointmentStore
from tests.fakes import PATIENT


def _appointment(appointment_id: str, day: str, status: AppointmentStatus, user_id: str = "1") -> Appointment:
    return Appointment(
        id=appointment_id,
        user_id=user_id,
        doctor_id="2",
        appointment_date=day,
        appointment_time="09:30",
        status=status,
        payment_status=PaymentStatus.COMPLETED,
        created_at=f"2024-01-0{appointment_id}T10:00:00Z",
    )


def _use_case(store: MemoryAppointmentStore, user=PATIENT, today=date(2024, 1, 15)):
    notifications = RecordingNotificationSink()
    navigator = RecordingNavigator()
    uc = AppointmentsUseCase(
        auth=StaticAuthProvider(user),
        store=store,
        notifications=notifications,
        navigation=navigator,
        today=lambda: today,
    )
    return uc, notifications, navigator


def _store() -> MemoryAppointmentStore:
    return MemoryAppointmentStore(
        appointments=[
            _appointment("1", "2024-01-10", AppointmentStatus.COMPLETED),
            _appointment("2", "2024-01-20", AppointmentStatus.CONFIRMED),
            _appointment("3", "2024-01-25", AppointmentStatus.PENDING),
            _appointment("4", "2024-01-12", AppointmentStatus.CONFIRMED),
            _appointment("5", "2024-01-18", AppointmentStatus.CANCELLED),
            _appointment("6", "2024-01-21", AppointmentStatus.CONFIRMED, user_id="someone-else"),
        ]
    )


def test_list_filters():
    uc, _, _ = _use_case(_store())

    assert [a.id for a in uc.list_appointments("all")] == ["1", "2", "3", "4", "5"]
    assert [a.id for a in uc.list_appointments("upcoming")] == ["2", "3"]
    assert [a.id for a in uc.list_appointments("completed")] == ["1"]
    assert [a.id for a in uc.list_appointments("cancelled")] == ["5"]


def test_unknown_filter_raises():
    uc, _, _ = _use_case(_store())
    with pytest.raises(ValueError):
        uc.list_appointments("someday")


def test_list_requires_login():
    uc, notifications, navigator = _use_case(_store(), user=None)

    with pytest.raises(NotAuthenticatedError):
        uc.list_appointments()

    assert navigator.routes == ["/login"]
    assert notifications.items == [{"level": "error", "message": "Please login to view appointments"}]


def test_cancel_confirmed_appointment():
    store = _store()
    uc, notifications, _ = _use_case(store)

    cancelled = uc.cancel("2")

    assert cancelled.status == AppointmentStatus.CANCELLED
    assert store.get("2").status == AppointmentStatus.CANCELLED
    assert notifications.items == [{"level": "success", "message": "Appointment cancelled successfully"}]


def test_cancel_rejects_non_confirmed_and_foreign_appointments():
    store = _store()
    uc, notifications, _ = _use_case(store)

    assert uc.cancel("3") is None  # pending
    assert uc.cancel("6") is None  # another user's
    assert uc.cancel("missing") is None

    assert store.get("3").status == AppointmentStatus.PENDING
    assert store.get("6").status == AppointmentStatus.CONFIRMED
    assert [n["level"] for n in notifications.items] == ["error", "error", "error"]


def test_store_assigns_fresh_ids():
    store = MemoryAppointmentStore(appointments=[_appointment("1", "2024-01-10", AppointmentStatus.PENDING)])
    new_id = store.next_id()
    assert new_id == "2"
    store.add(replace(_appointment("1", "2024-01-11", AppointmentStatus.PENDING), id=new_id))
    assert store.next_id() == "3"
    with pytest.raises(ValueError):
        store.add(_appointment("1", "2024-01-10", AppointmentStatus.PENDING))


def test_seeded_store_has_demo_appointments():
    store = MemoryAppointmentStore(seed=True)
    appointments = store.list_for_user("1")
    assert [a.doctor.name for a in appointments] == ["Dr. Sarah Johnson", "Dr. Michael Chen"]
