from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    id: str
    email: str
    full_name: str
    created_at: str
    phone: str | None = None
