from __future__ import annotations

from app.application.ports.auth import AuthPort
from app.domain.entities.user import User

MOCK_USERS: dict[str, User] = {
    "1": User(
        id="1",
        email="patient@example.com",
        full_name="Demo Patient",
        phone="+1 (555) 010-0001",
        created_at="2024-01-01T09:00:00Z",
    ),
}


class StaticAuthProvider(AuthPort):
    """Auth provider pinned to a single (possibly absent) user."""

    def __init__(self, user: User | None = None) -> None:
        self._user = user

    def current_user(self) -> User | None:
        return self._user


def resolve_user(user_id: str | None, users: dict[str, User] | None = None) -> User | None:
    if not user_id:
        return None
    return (users if users is not None else MOCK_USERS).get(user_id.strip())
