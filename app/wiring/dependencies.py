from functools import lru_cache
import logging
from zoneinfo import ZoneInfo

from app.core.config import settings
from app.application.ports.appointment_store import AppointmentStorePort
from app.application.ports.doctor_directory import DoctorDirectoryPort
from app.application.ports.navigation import NavigationPort
from app.application.ports.notifications import NotificationPort
from app.application.ports.payment import PaymentPort
from app.application.use_cases.appointments import AppointmentsUseCase
from app.application.use_cases.booking_wizard import BookingWizard
from app.application.use_cases.contact import ContactUseCase
from app.domain.entities.user import User
from app.infrastructure.auth.static_auth import StaticAuthProvider
from app.infrastructure.catalog.memory_directory import InMemoryDoctorDirectory
from app.infrastructure.navigation.recording_navigator import RecordingNavigator
from app.infrastructure.notifications.recording_sink import RecordingNotificationSink
from app.infrastructure.payment.mock_payment import MockPaymentGateway
from app.infrastructure.store.booking_sessions import BookingSession, BookingSessionRegistry
from app.infrastructure.store.memory_store import MemoryAppointmentStore


_appointment_store: MemoryAppointmentStore | None = None
_session_registry: BookingSessionRegistry | None = None


@lru_cache
def get_doctor_directory() -> DoctorDirectoryPort:
    return InMemoryDoctorDirectory()


@lru_cache
def get_timezone() -> ZoneInfo:
    try:
        return ZoneInfo(settings.BUSINESS_TIMEZONE)
    except Exception as e:
        logging.getLogger(__name__).warning(
            "Invalid BUSINESS_TIMEZONE, falling back to UTC", extra={"error": str(e)}
        )
        return ZoneInfo("UTC")


def get_appointment_store() -> AppointmentStorePort:
    global _appointment_store
    if _appointment_store is None:
        _appointment_store = MemoryAppointmentStore(seed=settings.ENV.lower() in {"dev", "local"})
    return _appointment_store


def get_session_registry() -> BookingSessionRegistry:
    global _session_registry
    if _session_registry is None:
        _session_registry = BookingSessionRegistry(
            idle_seconds=settings.BOOKING_SESSION_IDLE_SECONDS,
            max_sessions=settings.BOOKING_SESSION_MAX,
        )
    return _session_registry


def get_payment_gateway() -> PaymentPort:
    if settings.PAYMENT_PROVIDER.lower() == "mock":
        return MockPaymentGateway(
            delay_seconds=settings.MOCK_PAYMENT_DELAY_SECONDS,
            fail=settings.MOCK_PAYMENT_FAIL,
        )
    raise ValueError(f"Unsupported PAYMENT_PROVIDER: {settings.PAYMENT_PROVIDER}")


def build_booking_session(user: User | None) -> BookingSession:
    """Wire a fresh wizard with its own notification and navigation recorders. Not mounted yet."""
    notifications = RecordingNotificationSink()
    navigator = RecordingNavigator()
    wizard = BookingWizard(
        auth=StaticAuthProvider(user),
        directory=get_doctor_directory(),
        notifications=notifications,
        navigation=navigator,
        payment=get_payment_gateway(),
        appointments=get_appointment_store(),
        timezone=get_timezone(),
        login_route=settings.LOGIN_ROUTE,
        appointments_route=settings.APPOINTMENTS_ROUTE,
    )
    return BookingSession(
        session_id=get_session_registry().new_id(),
        user_id=user.id if user else "",
        wizard=wizard,
        notifications=notifications,
        navigator=navigator,
    )


def get_appointments_use_case(
    user: User | None,
    notifications: NotificationPort,
    navigation: NavigationPort,
) -> AppointmentsUseCase:
    return AppointmentsUseCase(
        auth=StaticAuthProvider(user),
        store=get_appointment_store(),
        notifications=notifications,
        navigation=navigation,
        timezone=get_timezone(),
        login_route=settings.LOGIN_ROUTE,
    )


def get_contact_use_case(notifications: NotificationPort) -> ContactUseCase:
    return ContactUseCase(notifications=notifications, delay_seconds=settings.MOCK_CONTACT_DELAY_SECONDS)


def reset_state() -> None:
    """Drop in-memory stores. Used by tests."""
    global _appointment_store, _session_registry
    _appointment_store = None
    _session_registry = None
