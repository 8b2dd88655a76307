from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from app.domain.entities.doctor import Doctor


class BookingStep(IntEnum):
    SELECT_SPECIALIZATION = 1
    SELECT_DOCTOR = 2
    SELECT_DATE = 3
    SELECT_TIME = 4
    CONFIRM_AND_PAY = 5


@dataclass(frozen=True)
class BookingSelection:
    step: BookingStep = BookingStep.SELECT_SPECIALIZATION
    specialization: str | None = None
    doctor: Doctor | None = None
    date: str | None = None  # YYYY-MM-DD
    time: str | None = None  # HH:MM, 24h

    @property
    def is_complete(self) -> bool:
        return self.doctor is not None and self.date is not None and self.time is not None
