from __future__ import annotations

from app.domain.entities.doctor import Doctor
from app.domain.entities.specialization import Specialization

SPECIALIZATIONS: tuple[Specialization, ...] = (
    Specialization(id="1", name="General Medicine", description="Primary healthcare and general consultation", icon="stethoscope"),
    Specialization(id="2", name="Cardiology", description="Heart and cardiovascular health", icon="heart"),
    Specialization(id="3", name="Dermatology", description="Skin, hair, and nail conditions", icon="user"),
    Specialization(id="4", name="Orthopedics", description="Bone, joint, and muscle issues", icon="bone"),
    Specialization(id="5", name="Pediatrics", description="Child and infant healthcare", icon="baby"),
    Specialization(id="6", name="Neurology", description="Brain and nervous system disorders", icon="brain"),
)

_IMAGE_BASE = "https://images.pexels.com/photos"
_IMAGE_PARAMS = "?auto=compress&cs=tinysrgb&w=400"

DOCTORS: tuple[Doctor, ...] = (
    Doctor(
        id="1",
        name="Dr. Sarah Johnson",
        specialization="General Medicine",
        experience=8,
        rating=4.8,
        image=f"{_IMAGE_BASE}/5407206/pexels-photo-5407206.jpeg{_IMAGE_PARAMS}",
        availability=("Monday", "Tuesday", "Wednesday", "Friday"),
        fee=150,
        location="Downtown Medical Center",
    ),
    Doctor(
        id="2",
        name="Dr. Michael Chen",
        specialization="Cardiology",
        experience=12,
        rating=4.9,
        image=f"{_IMAGE_BASE}/6749773/pexels-photo-6749773.jpeg{_IMAGE_PARAMS}",
        availability=("Monday", "Wednesday", "Thursday", "Friday"),
        fee=200,
        location="Heart Specialty Clinic",
    ),
    Doctor(
        id="3",
        name="Dr. Emily Rodriguez",
        specialization="Dermatology",
        experience=6,
        rating=4.7,
        image=f"{_IMAGE_BASE}/5407764/pexels-photo-5407764.jpeg{_IMAGE_PARAMS}",
        availability=("Tuesday", "Wednesday", "Thursday", "Saturday"),
        fee=175,
        location="Skin Care Institute",
    ),
    Doctor(
        id="4",
        name="Dr. James Wilson",
        specialization="Orthopedics",
        experience=15,
        rating=4.6,
        image=f"{_IMAGE_BASE}/6749777/pexels-photo-6749777.jpeg{_IMAGE_PARAMS}",
        availability=("Monday", "Tuesday", "Thursday", "Friday"),
        fee=225,
        location="Orthopedic Surgery Center",
    ),
)
