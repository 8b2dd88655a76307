from __future__ import annotations

from datetime import date, datetime

# Fixed half-hour slots offered for every doctor and date.
TIME_SLOTS: tuple[str, ...] = (
    "09:00",
    "09:30",
    "10:00",
    "10:30",
    "11:00",
    "11:30",
    "14:00",
    "14:30",
    "15:00",
    "15:30",
    "16:00",
    "16:30",
)


def is_valid_slot(value: str) -> bool:
    return value in TIME_SLOTS


def format_slot_label(value: str) -> str:
    """Render a 24h slot the way the booking page shows it, e.g. "14:30" -> "02:30 PM"."""
    return datetime.strptime(value, "%H:%M").strftime("%I:%M %p")


def parse_booking_date(value: str) -> date | None:
    """Parse a strict YYYY-MM-DD string. Returns None when malformed."""
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except (AttributeError, ValueError):
        return None
