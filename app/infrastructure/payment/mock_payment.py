from __future__ import annotations

import asyncio
import logging
import uuid

from app.application.exceptions import PaymentFailedError
from app.application.ports.payment import PaymentPort
from app.domain.entities.payment import PaymentReceipt, PaymentRequest


class MockPaymentGateway(PaymentPort):
    """Simulated checkout: waits, then succeeds (or fails when configured to)."""

    def __init__(self, delay_seconds: float = 2.0, fail: bool = False) -> None:
        self._delay_seconds = delay_seconds
        self._fail = fail
        self._logger = logging.getLogger(__name__)

    async def charge(self, request: PaymentRequest) -> PaymentReceipt:
        self._logger.info(
            "Mock payment started",
            extra={"user_id": request.user_id, "doctor_id": request.doctor_id, "amount": request.amount},
        )
        if self._delay_seconds > 0:
            await asyncio.sleep(self._delay_seconds)
        if self._fail:
            raise PaymentFailedError("Mock payment declined")

        receipt = PaymentReceipt(payment_id=f"mock_pay_{uuid.uuid4().hex[:12]}", amount=request.amount)
        self._logger.info("Mock payment completed", extra={"payment_id": receipt.payment_id})
        return receipt
