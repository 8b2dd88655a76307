from fastapi import APIRouter, Depends

from app.api.v1.presenters import doctor_to_schema, specialization_to_schema
from app.api.v1.schemas import DoctorSchema, SpecializationSchema, TimeSlotSchema
from app.application.ports.doctor_directory import DoctorDirectoryPort
from app.application.use_cases.booking_wizard import shortlist_doctors
from app.application.utils.time_slots import TIME_SLOTS, format_slot_label
from app.wiring.dependencies import get_doctor_directory

router = APIRouter()


@router.get("/specializations", response_model=list[SpecializationSchema])
def list_specializations(directory: DoctorDirectoryPort = Depends(get_doctor_directory)):
    return [specialization_to_schema(s) for s in directory.list_specializations()]


@router.get("/doctors", response_model=list[DoctorSchema])
def list_doctors(
    specialization: str | None = None,
    directory: DoctorDirectoryPort = Depends(get_doctor_directory),
):
    doctors = directory.list_doctors()
    if specialization:
        doctors = shortlist_doctors(doctors, specialization)
    return [doctor_to_schema(d) for d in doctors]


@router.get("/time-slots", response_model=list[TimeSlotSchema])
def list_time_slots():
    return [TimeSlotSchema(value=slot, label=format_slot_label(slot)) for slot in TIME_SLOTS]
