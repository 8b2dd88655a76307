from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PaymentRequest:
    user_id: str
    doctor_id: str
    amount: float
    description: str


@dataclass(frozen=True)
class PaymentReceipt:
    payment_id: str
    amount: float


@dataclass(frozen=True)
class PaymentEvent:
    kind: str  # "started", "settled"
    outcome: str | None = None  # "succeeded", "failed", "cancelled" once settled
    message: str | None = None
    payment_id: str | None = None
