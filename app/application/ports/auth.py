from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.entities.user import User


class AuthPort(ABC):
    @abstractmethod
    def current_user(self) -> User | None:
        """Return the signed-in user, or None when nobody is signed in."""
        raise NotImplementedError
