from __future__ import annotations

from app.application.ports.doctor_directory import DoctorDirectoryPort
from app.domain.entities.doctor import Doctor
from app.domain.entities.specialization import Specialization
from app.infrastructure.catalog.catalog_data import DOCTORS, SPECIALIZATIONS


class InMemoryDoctorDirectory(DoctorDirectoryPort):
    def __init__(
        self,
        doctors: list[Doctor] | tuple[Doctor, ...] | None = None,
        specializations: list[Specialization] | tuple[Specialization, ...] | None = None,
    ) -> None:
        self._doctors = tuple(DOCTORS if doctors is None else doctors)
        self._specializations = tuple(SPECIALIZATIONS if specializations is None else specializations)

    def list_doctors(self) -> list[Doctor]:
        return list(self._doctors)

    def list_specializations(self) -> list[Specialization]:
        return list(self._specializations)
