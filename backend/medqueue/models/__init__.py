"""Pydantic models for MedQueue."""

from .queue import (
    Patient,
    PatientStatus,
    QueueStats,
    QueueDisplay,
    QueueJoinRequest,
    QueueJoinResponse,
    QueuePosition,
    QueuePauseResponse,
    CurrentPatientUpdate
)
from .registration import (
    Department,
    DoctorCreate,
    HospitalCreate,
    DoctorOnboarding,
    HospitalRegistration
)

__all__ = [
    # Queue
    "Patient", "PatientStatus", "QueueStats", "QueueDisplay",
    "QueueJoinRequest", "QueueJoinResponse", "QueuePosition",
    "QueuePauseResponse", "CurrentPatientUpdate",
    # Registration
    "Department", "DoctorCreate", "HospitalCreate",
    "DoctorOnboarding", "HospitalRegistration"
]
