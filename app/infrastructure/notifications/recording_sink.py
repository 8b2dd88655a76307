from __future__ import annotations

import logging

from app.application.ports.notifications import NotificationPort


class RecordingNotificationSink(NotificationPort):
    """Keeps notifications in order so the caller can drain and render them."""

    def __init__(self) -> None:
        self._items: list[dict[str, str]] = []
        self._logger = logging.getLogger(__name__)

    def notify_success(self, message: str) -> None:
        self._logger.info("Notify success", extra={"notification": message})
        self._items.append({"level": "success", "message": message})

    def notify_error(self, message: str) -> None:
        self._logger.info("Notify error", extra={"notification": message})
        self._items.append({"level": "error", "message": message})

    @property
    def items(self) -> list[dict[str, str]]:
        return list(self._items)

    def drain(self) -> list[dict[str, str]]:
        items, self._items = self._items, []
        return items
