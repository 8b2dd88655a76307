from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import Callable

from app.application.exceptions import BookingSessionNotFoundError
from app.application.use_cases.booking_wizard import BookingWizard
from app.infrastructure.navigation.recording_navigator import RecordingNavigator
from app.infrastructure.notifications.recording_sink import RecordingNotificationSink


@dataclass
class BookingSession:
    session_id: str
    user_id: str
    wizard: BookingWizard
    notifications: RecordingNotificationSink
    navigator: RecordingNavigator
    last_seen_at: float = field(default=0.0)


class BookingSessionRegistry:
    """
    One wizard per open booking session, kept in process memory.

    Sessions idle for longer than ``idle_seconds`` are unmounted and dropped.
    When ``max_sessions`` is reached the least recently used idle session is
    evicted; sessions with a payment in flight are never evicted.
    """

    def __init__(
        self,
        idle_seconds: float = 1800.0,
        max_sessions: int = 1000,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._sessions: dict[str, BookingSession] = {}
        self._idle_seconds = idle_seconds
        self._max_sessions = max_sessions
        self._clock = clock or time.monotonic
        self._logger = logging.getLogger(__name__)

    def new_id(self) -> str:
        return uuid.uuid4().hex

    def add(self, session: BookingSession) -> None:
        self.purge_idle()
        while len(self._sessions) >= self._max_sessions:
            if not self._evict_oldest():
                break
        session.last_seen_at = self._clock()
        self._sessions[session.session_id] = session

    def get(self, session_id: str, user_id: str | None) -> BookingSession:
        self.purge_idle()
        session = self._sessions.get(session_id)
        if session is None or session.user_id != user_id:
            raise BookingSessionNotFoundError(f"Booking session {session_id} not found")
        session.last_seen_at = self._clock()
        return session

    def remove(self, session_id: str) -> BookingSession | None:
        return self._sessions.pop(session_id, None)

    def purge_idle(self) -> int:
        cutoff = self._clock() - self._idle_seconds
        expired = [
            s for s in self._sessions.values()
            if s.last_seen_at < cutoff and not s.wizard.payment_in_flight
        ]
        for session in expired:
            self._drop(session, reason="idle")
        return len(expired)

    def _evict_oldest(self) -> bool:
        candidates = [s for s in self._sessions.values() if not s.wizard.payment_in_flight]
        if not candidates:
            return False
        self._drop(min(candidates, key=lambda s: s.last_seen_at), reason="capacity")
        return True

    def _drop(self, session: BookingSession, reason: str) -> None:
        session.wizard.unmount()
        self._sessions.pop(session.session_id, None)
        self._logger.info(
            "Booking session evicted",
            extra={"session_id": session.session_id, "user_id": session.user_id, "reason": reason},
        )

    def __len__(self) -> int:
        return len(self._sessions)
