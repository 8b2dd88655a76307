from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.entities.doctor import Doctor
from app.domain.entities.specialization import Specialization


class DoctorDirectoryPort(ABC):
    @abstractmethod
    def list_doctors(self) -> list[Doctor]:
        """Full doctor catalog in stable order."""
        raise NotImplementedError

    @abstractmethod
    def list_specializations(self) -> list[Specialization]:
        raise NotImplementedError
