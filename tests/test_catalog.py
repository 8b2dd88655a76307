"""
Tests for catalog data, time slots and entity validation.
"""

from __future__ import annotations

from datetime import date

import pytest

from app.application.utils.time_slots import TIME_SLOTS, format_slot_label, is_valid_slot, parse_booking_date
from app.infrastructure.catalog.memory_directory import InMemoryDoctorDirectory
from tests.fakes import make_doctor


def test_time_slot_catalog_is_exact():
    assert TIME_SLOTS == (
        "09:00", "09:30", "10:00", "10:30", "11:00", "11:30",
        "14:00", "14:30", "15:00", "15:30", "16:00", "16:30",
    )
    assert is_valid_slot("16:30")
    assert not is_valid_slot("12:00")
    assert not is_valid_slot("17:00")


def test_slot_labels_use_twelve_hour_form():
    assert format_slot_label("09:00") == "09:00 AM"
    assert format_slot_label("14:30") == "02:30 PM"


def test_parse_booking_date_is_strict():
    assert parse_booking_date("2024-01-20") == date(2024, 1, 20)
    assert parse_booking_date(" 2024-01-20 ") == date(2024, 1, 20)
    assert parse_booking_date("20240120") is None
    assert parse_booking_date("2024-02-30") is None
    assert parse_booking_date("") is None


def test_default_directory_matches_demo_catalog():
    directory = InMemoryDoctorDirectory()
    names = [s.name for s in directory.list_specializations()]
    assert names == ["General Medicine", "Cardiology", "Dermatology", "Orthopedics", "Pediatrics", "Neurology"]
    assert [d.name for d in directory.list_doctors()] == [
        "Dr. Sarah Johnson",
        "Dr. Michael Chen",
        "Dr. Emily Rodriguez",
        "Dr. James Wilson",
    ]


def test_directory_accepts_injected_catalog():
    doctors = [make_doctor("x", "Dr. X", "Neurology")]
    directory = InMemoryDoctorDirectory(doctors=doctors, specializations=[])
    assert directory.list_doctors() == doctors
    assert directory.list_specializations() == []


def test_doctor_rejects_out_of_range_values():
    with pytest.raises(ValueError):
        make_doctor("x", "Dr. X", "Neurology", fee=-1)
    doctor = make_doctor("y", "Dr. Y", "Neurology")
    with pytest.raises(ValueError):
        type(doctor)(**{**doctor.__dict__, "rating": 5.5})
    with pytest.raises(ValueError):
        type(doctor)(**{**doctor.__dict__, "availability": ("Funday",)})


def test_doctor_availability_is_informational():
    doctor = make_doctor("y", "Dr. Y", "Neurology")  # Monday, Friday
    assert doctor.is_available_on(date(2024, 1, 15))  # Monday
    assert not doctor.is_available_on(date(2024, 1, 20))  # Saturday
