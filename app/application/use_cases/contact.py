from __future__ import annotations

import asyncio
import logging

from app.application.ports.notifications import NotificationPort
from app.domain.entities.contact_message import ContactMessage

CONTACT_SENT_MESSAGE = "Message sent successfully! We'll get back to you soon."


class ContactUseCase:
    def __init__(self, notifications: NotificationPort, delay_seconds: float = 0.0) -> None:
        self._notifications = notifications
        self._delay_seconds = delay_seconds
        self._logger = logging.getLogger(__name__)

    async def submit(self, message: ContactMessage) -> None:
        if self._delay_seconds > 0:
            await asyncio.sleep(self._delay_seconds)
        self._logger.info(
            "Contact message received",
            extra={"email": message.email, "subject": message.subject},
        )
        self._notifications.notify_success(CONTACT_SENT_MESSAGE)
