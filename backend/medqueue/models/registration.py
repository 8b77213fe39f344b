"""
Hospital and doctor registration models.
"""

from pydantic import BaseModel, Field
from typing import List
from enum import Enum


class Department(str, Enum):
    """Departments a doctor can be registered under."""
    CARDIOLOGY = "Cardiology"
    PEDIATRICS = "Pediatrics"
    GYNECOLOGY = "Gynecology"
    ORTHOPEDICS = "Orthopedics"
    NEUROLOGY = "Neurology"
    DERMATOLOGY = "Dermatology"
    OPHTHALMOLOGY = "Ophthalmology"
    GENERAL_MEDICINE = "General Medicine"


class DoctorCreate(BaseModel):
    """Doctor profile submitted with a hospital registration."""
    name: str = Field(..., min_length=1, max_length=100)
    department: Department
    available_from: str = Field(default="09:00", pattern=r"^([01]\d|2[0-3]):[0-5]\d$")
    available_to: str = Field(default="17:00", pattern=r"^([01]\d|2[0-3]):[0-5]\d$")
    avg_serving_time: int = Field(default=15, gt=0, le=240, description="Minutes per patient")


class HospitalCreate(BaseModel):
    """Hospital registration request."""
    hospital_name: str = Field(..., min_length=1, max_length=200)
    address: str = Field(..., min_length=1, max_length=500)
    phone: str = Field(..., min_length=1, max_length=20)
    doctors: List[DoctorCreate] = Field(..., min_length=1)


class DoctorOnboarding(BaseModel):
    """Entry code and QR payload generated for one doctor."""
    doctor_name: str
    department: Department
    entry_code: str
    qr_payload: dict
    qr_png_base64: str


class HospitalRegistration(BaseModel):
    """Registration result; nothing is persisted."""
    hospital_id: str
    hospital_name: str
    doctors: List[DoctorOnboarding]
