from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.entities.payment import PaymentReceipt, PaymentRequest


class PaymentPort(ABC):
    @abstractmethod
    async def charge(self, request: PaymentRequest) -> PaymentReceipt:
        """
        Charge the consultation fee.

        Raises PaymentFailedError when the charge is declined.
        Must be safe to cancel: a cancelled charge has no side effects.
        """
        raise NotImplementedError
