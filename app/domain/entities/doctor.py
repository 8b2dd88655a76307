from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Tuple

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


@dataclass(frozen=True)
class Doctor:
    id: str
    name: str
    specialization: str  # specialization name, not id
    experience: int
    rating: float
    image: str
    availability: Tuple[str, ...] = ()
    fee: float = 0
    location: str = ""

    def __post_init__(self) -> None:
        if self.experience < 0:
            raise ValueError(f"experience must be >= 0, got {self.experience}")
        if not 0 <= self.rating <= 5:
            raise ValueError(f"rating must be between 0 and 5, got {self.rating}")
        if self.fee < 0:
            raise ValueError(f"fee must be >= 0, got {self.fee}")
        unknown = [day for day in self.availability if day not in WEEKDAYS]
        if unknown:
            raise ValueError(f"unknown weekday names: {unknown}")

    def is_available_on(self, day: date) -> bool:
        """Informational only; the wizard does not reject dates outside availability."""
        return WEEKDAYS[day.weekday()] in self.availability
