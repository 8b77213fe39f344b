"""
Hospital registration routes.
"""

from fastapi import APIRouter, status, Depends

from ..models.registration import HospitalCreate, HospitalRegistration
from ..services.registration_service import RegistrationService
from .dependencies import get_registration_service

router = APIRouter(prefix="/hospitals", tags=["Registration"])


@router.post("/register", response_model=HospitalRegistration, status_code=status.HTTP_201_CREATED)
async def register_hospital(
    hospital: HospitalCreate,
    service: RegistrationService = Depends(get_registration_service)
):
    """Generate entry codes and QR codes for a hospital's doctors."""
    return service.register_hospital(hospital)
