from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, replace
from datetime import date, datetime, timezone as dt_timezone
from typing import Callable
from zoneinfo import ZoneInfo

from app.application.exceptions import (
    InvalidSelectionError,
    InvalidTransitionError,
    NotAuthenticatedError,
    PaymentFailedError,
)
from app.application.ports.appointment_store import AppointmentStorePort
from app.application.ports.auth import AuthPort
from app.application.ports.doctor_directory import DoctorDirectoryPort
from app.application.ports.navigation import NavigationPort
from app.application.ports.notifications import NotificationPort
from app.application.ports.payment import PaymentPort
from app.application.utils.time_slots import is_valid_slot, parse_booking_date
from app.domain.entities.appointment import Appointment, AppointmentStatus, PaymentStatus
from app.domain.entities.booking_selection import BookingSelection, BookingStep
from app.domain.entities.doctor import Doctor
from app.domain.entities.payment import PaymentEvent, PaymentReceipt, PaymentRequest
from app.domain.entities.user import User

LOGIN_REQUIRED_MESSAGE = "Please login to book an appointment"
PAYMENT_STARTED_MESSAGE = "Redirecting to payment gateway..."
BOOKING_CONFIRMED_MESSAGE = "Appointment booked successfully!"
PAYMENT_FAILED_MESSAGE = "Payment failed. Please try again."
PAYMENT_IN_PROGRESS_MESSAGE = "Payment is already in progress"


@dataclass(frozen=True)
class WizardResult:
    action: str  # "mounted", "advanced", "went_back", "rejected", "payment_succeeded", "payment_failed", "payment_cancelled"
    selection: BookingSelection | None
    reason: str | None = None
    appointment: Appointment | None = None

    @property
    def accepted(self) -> bool:
        return self.action not in ("rejected", "payment_failed", "payment_cancelled")


def shortlist_doctors(doctors: list[Doctor], specialization: str | None) -> list[Doctor]:
    """Doctors practising the given specialization, in catalog order."""
    if not specialization:
        return []
    return [doctor for doctor in doctors if doctor.specialization == specialization]


class BookingWizard:
    """
    Five-step booking flow: specialization, doctor, date, time, confirm & pay.

    Transitions are synchronous and never raise on bad input: a failed guard
    leaves the selection untouched, emits one error notification and returns
    a rejected WizardResult. Only mount() raises, after redirecting to login.
    """

    def __init__(
        self,
        auth: AuthPort,
        directory: DoctorDirectoryPort,
        notifications: NotificationPort,
        navigation: NavigationPort,
        payment: PaymentPort,
        appointments: AppointmentStorePort | None = None,
        timezone: ZoneInfo | None = None,
        today: Callable[[], date] | None = None,
        login_route: str = "/login",
        appointments_route: str = "/appointments",
        on_payment_event: Callable[[PaymentEvent], None] | None = None,
    ) -> None:
        self._auth = auth
        self._directory = directory
        self._notifications = notifications
        self._navigation = navigation
        self._payment = payment
        self._appointments = appointments
        self._timezone = timezone or ZoneInfo("UTC")
        self._today = today or (lambda: datetime.now(self._timezone).date())
        self._login_route = login_route
        self._appointments_route = appointments_route
        self._on_payment_event = on_payment_event
        self._logger = logging.getLogger(__name__)

        self._user: User | None = None
        self._selection: BookingSelection | None = None
        self._mounted = False
        self._payment_task: asyncio.Future[PaymentReceipt] | None = None
        self._payment_events: list[PaymentEvent] = []

    @property
    def selection(self) -> BookingSelection | None:
        return self._selection

    @property
    def is_mounted(self) -> bool:
        return self._mounted

    @property
    def user(self) -> User | None:
        return self._user

    @property
    def payment_in_flight(self) -> bool:
        return self._payment_task is not None and not self._payment_task.done()

    @property
    def payment_events(self) -> tuple[PaymentEvent, ...]:
        return tuple(self._payment_events)

    @property
    def shortlist(self) -> list[Doctor]:
        # Recomputed on every read so it can never go stale.
        if self._selection is None:
            return []
        return shortlist_doctors(self._directory.list_doctors(), self._selection.specialization)

    def mount(self) -> WizardResult:
        if self.payment_in_flight:
            return self._reject(PAYMENT_IN_PROGRESS_MESSAGE)
        user = self._auth.current_user()
        if user is None:
            self._logger.info("Booking wizard opened without a user", extra={"reason": "unauthenticated"})
            self._navigation.go_to(self._login_route)
            self._notifications.notify_error(LOGIN_REQUIRED_MESSAGE)
            raise NotAuthenticatedError(LOGIN_REQUIRED_MESSAGE, redirect_to=self._login_route)

        self._user = user
        self._selection = BookingSelection()
        self._mounted = True
        self._payment_events = []
        self._logger.info("Booking wizard mounted", extra={"user_id": user.id})
        return WizardResult(action="mounted", selection=self._selection)

    def unmount(self) -> None:
        """Discard the selection and cancel any payment still running."""
        self._mounted = False
        self._selection = None
        if self.payment_in_flight:
            self._logger.info("Cancelling in-flight payment on unmount")
            self._payment_task.cancel()

    def select_specialization(self, name: str) -> WizardResult:
        def apply(current: BookingSelection) -> BookingSelection:
            names = {spec.name for spec in self._directory.list_specializations()}
            if name not in names:
                raise InvalidSelectionError("Please select a valid specialization")
            return replace(current, specialization=name, step=BookingStep.SELECT_DOCTOR)

        return self._advance(BookingStep.SELECT_SPECIALIZATION, apply)

    def select_doctor(self, doctor_id: str) -> WizardResult:
        def apply(current: BookingSelection) -> BookingSelection:
            # Never trust the caller's id: it must be in the shortlist for the current specialization.
            candidates = shortlist_doctors(self._directory.list_doctors(), current.specialization)
            doctor = next((d for d in candidates if d.id == doctor_id), None)
            if doctor is None:
                raise InvalidSelectionError("Please select a doctor from the list")
            return replace(current, doctor=doctor, step=BookingStep.SELECT_DATE)

        return self._advance(BookingStep.SELECT_DOCTOR, apply)

    def select_date(self, value: str) -> WizardResult:
        def apply(current: BookingSelection) -> BookingSelection:
            parsed = parse_booking_date(value)
            if parsed is None:
                raise InvalidSelectionError("Please choose a valid date (YYYY-MM-DD)")
            self._require_not_past(parsed)
            return replace(current, date=parsed.isoformat(), step=BookingStep.SELECT_TIME)

        return self._advance(BookingStep.SELECT_DATE, apply)

    def select_time(self, value: str) -> WizardResult:
        def apply(current: BookingSelection) -> BookingSelection:
            if not is_valid_slot(value):
                raise InvalidSelectionError("Please choose one of the available time slots")
            self._require_not_past(parse_booking_date(current.date or ""))
            return replace(current, time=value, step=BookingStep.CONFIRM_AND_PAY)

        return self._advance(BookingStep.SELECT_TIME, apply)

    def go_back(self) -> WizardResult:
        if not self._mounted or self._selection is None:
            return self._reject("Booking wizard is not open")
        if self.payment_in_flight:
            return self._reject(PAYMENT_IN_PROGRESS_MESSAGE)
        if self._selection.step == BookingStep.SELECT_SPECIALIZATION:
            return self._reject("Already at the first step", notify=False)

        # Later selections are kept so they can be shown again.
        self._selection = replace(self._selection, step=BookingStep(self._selection.step - 1))
        self._logger.info("Booking wizard went back", extra={"step": int(self._selection.step)})
        return WizardResult(action="went_back", selection=self._selection)

    async def confirm_and_pay(self) -> WizardResult:
        if self.payment_in_flight:
            return self._reject(PAYMENT_IN_PROGRESS_MESSAGE)
        try:
            selection = self._require_step(BookingStep.CONFIRM_AND_PAY)
            if not selection.is_complete:
                raise InvalidTransitionError("Please complete your doctor, date and time selection")
            # The clock may have moved on since the date was chosen.
            self._require_not_past(parse_booking_date(selection.date))
        except (InvalidTransitionError, InvalidSelectionError) as e:
            return self._reject(str(e))

        doctor = selection.doctor
        user = self._user
        request = PaymentRequest(
            user_id=user.id,
            doctor_id=doctor.id,
            amount=doctor.fee,
            description=f"Consultation with {doctor.name} on {selection.date} at {selection.time}",
        )

        self._publish(PaymentEvent(kind="started", message=PAYMENT_STARTED_MESSAGE))
        task = asyncio.ensure_future(self._payment.charge(request))
        self._payment_task = task
        try:
            receipt = await task
        except asyncio.CancelledError:
            if self._mounted:
                # Cancelled from outside, not by unmount().
                raise
            self._publish(PaymentEvent(kind="settled", outcome="cancelled"))
            return WizardResult(action="payment_cancelled", selection=None, reason="Booking closed during payment")
        except PaymentFailedError as e:
            self._logger.warning("Payment failed", extra={"user_id": user.id, "reason": str(e)})
            self._publish(PaymentEvent(kind="settled", outcome="failed", message=str(e)))
            if not self._mounted:
                return WizardResult(action="payment_cancelled", selection=None, reason=str(e))
            self._notifications.notify_error(PAYMENT_FAILED_MESSAGE)
            return WizardResult(action="payment_failed", selection=self._selection, reason=str(e))
        finally:
            self._payment_task = None

        self._publish(
            PaymentEvent(kind="settled", outcome="succeeded", message=BOOKING_CONFIRMED_MESSAGE, payment_id=receipt.payment_id)
        )
        appointment = self._record_appointment(user, selection, receipt)

        if not self._mounted:
            self._logger.info(
                "Payment settled after unmount; skipping notification",
                extra={"user_id": user.id, "payment_id": receipt.payment_id},
            )
            return WizardResult(action="payment_cancelled", selection=None, reason="Booking closed during payment", appointment=appointment)

        self._notifications.notify_success(BOOKING_CONFIRMED_MESSAGE)
        self._navigation.go_to(self._appointments_route)
        # Completion ends the wizard's lifetime.
        self._mounted = False
        self._selection = None
        self._logger.info(
            "Appointment booked",
            extra={"user_id": user.id, "payment_id": receipt.payment_id, "action": "payment_succeeded"},
        )
        return WizardResult(action="payment_succeeded", selection=selection, appointment=appointment)

    def _advance(
        self,
        expected: BookingStep,
        apply: Callable[[BookingSelection], BookingSelection],
    ) -> WizardResult:
        try:
            current = self._require_step(expected)
            updated = apply(current)
        except (InvalidTransitionError, InvalidSelectionError) as e:
            return self._reject(str(e))

        self._selection = updated
        self._logger.info("Booking wizard advanced", extra={"step": int(updated.step)})
        return WizardResult(action="advanced", selection=updated)

    def _require_step(self, expected: BookingStep) -> BookingSelection:
        if not self._mounted or self._selection is None:
            raise InvalidTransitionError("Booking wizard is not open")
        if self._selection.step != expected:
            raise InvalidTransitionError("This choice is not available at the current step")
        return self._selection

    def _require_not_past(self, day: date | None) -> None:
        if day is None or day < self._today():
            raise InvalidSelectionError("Appointments cannot be booked in the past")

    def _reject(self, reason: str, notify: bool = True) -> WizardResult:
        self._logger.warning("Booking wizard rejected input", extra={"reason": reason})
        if notify:
            self._notifications.notify_error(reason)
        return WizardResult(action="rejected", selection=self._selection, reason=reason)

    def _publish(self, event: PaymentEvent) -> None:
        self._payment_events.append(event)
        if self._on_payment_event is not None:
            self._on_payment_event(event)

    def _record_appointment(
        self,
        user: User,
        selection: BookingSelection,
        receipt: PaymentReceipt,
    ) -> Appointment | None:
        if self._appointments is None:
            return None
        appointment = Appointment(
            id=self._appointments.next_id(),
            user_id=user.id,
            doctor_id=selection.doctor.id,
            appointment_date=selection.date,
            appointment_time=selection.time,
            status=AppointmentStatus.PENDING,
            payment_status=PaymentStatus.COMPLETED,
            created_at=datetime.now(dt_timezone.utc).isoformat(),
            payment_id=receipt.payment_id,
            doctor=selection.doctor,
        )
        self._appointments.add(appointment)
        return appointment
