"""
Queue models for patient visits.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from enum import Enum


class PatientStatus(str, Enum):
    """Patient states within the visit queue."""
    WAITING = "waiting"
    BEING_SERVED = "being-served"
    SKIPPED = "skipped"


class Patient(BaseModel):
    """A patient entry in the queue."""
    id: str
    name: str
    position: int = Field(..., ge=1, description="1-based rank among waiting patients")
    status: PatientStatus = PatientStatus.WAITING
    joined_at: str = Field(..., description="Local time of joining, HH:MM")
    entry_code: str


class QueueStats(BaseModel):
    """Derived queue statistics."""
    total_patients: int = 0
    patients_served: int = 0
    avg_wait_time: int = 0
    efficiency: int = 100


class QueueDisplay(BaseModel):
    """Queue display for the operator dashboard."""
    waiting: List[Patient] = []
    current_patient: Optional[Patient] = None
    paused: bool = False
    stats: QueueStats = QueueStats()
    next_patient: Optional[str] = None


class QueueJoinRequest(BaseModel):
    """Join the queue with an entry code."""
    name: str = Field(..., min_length=1, max_length=100, description="Patient display name")
    entry_code: str = Field(..., min_length=1, max_length=32)

    @field_validator("name", "entry_code", mode="before")
    @classmethod
    def strip_blank(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("entry_code")
    @classmethod
    def upper_code(cls, value: str) -> str:
        return value.upper()


class QueuePosition(BaseModel):
    """Position and wait estimate for a waiting patient."""
    name: str
    position: int
    patients_ahead: int
    estimated_wait_minutes: int


class QueueJoinResponse(QueuePosition):
    """Join confirmation."""
    patient: Patient


class QueuePauseResponse(BaseModel):
    """Pause toggle result."""
    paused: bool
    message: str


class CurrentPatientUpdate(BaseModel):
    """Set or clear the currently served patient."""
    patient: Optional[Patient] = None
