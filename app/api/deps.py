from __future__ import annotations

from fastapi import Header

from app.domain.entities.user import User
from app.infrastructure.auth.static_auth import resolve_user


def get_current_user(x_user_id: str | None = Header(None, alias="X-User-Id")) -> User | None:
    return resolve_user(x_user_id)
