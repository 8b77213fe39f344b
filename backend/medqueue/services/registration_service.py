"""
Doctor onboarding: entry codes and QR payloads.
"""

import base64
import json
import logging
import secrets
import string
import uuid
from io import BytesIO
from typing import Callable, Optional, Set

import qrcode

from ..config import get_settings
from ..models.registration import (
    HospitalCreate,
    DoctorOnboarding,
    HospitalRegistration
)

logger = logging.getLogger(__name__)

ENTRY_CODE_ALPHABET = string.ascii_uppercase + string.digits

Encoder = Callable[[dict], bytes]


def generate_entry_code(length: Optional[int] = None) -> str:
    """Random uppercase alphanumeric entry code."""
    if length is None:
        length = get_settings().ENTRY_CODE_LENGTH
    return "".join(secrets.choice(ENTRY_CODE_ALPHABET) for _ in range(length))


def encode_qr_png(payload: dict) -> bytes:
    """Encode a JSON payload as a QR code PNG image."""
    settings = get_settings()
    qr = qrcode.QRCode(version=1, box_size=settings.QR_BOX_SIZE, border=settings.QR_BORDER)
    qr.add_data(json.dumps(payload))
    qr.make(fit=True)
    img = qr.make_image(fill_color="black", back_color="white")
    buffer = BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


class RegistrationService:
    """Generates onboarding material for a hospital's doctors."""

    def __init__(self, encoder: Encoder = encode_qr_png):
        self.encoder = encoder

    def register_hospital(self, hospital: HospitalCreate) -> HospitalRegistration:
        """Issue an entry code and QR image for every doctor. Nothing is stored."""
        hospital_id = uuid.uuid4().hex
        issued: Set[str] = set()
        doctors = []

        for doctor in hospital.doctors:
            entry_code = generate_entry_code()
            while entry_code in issued:
                entry_code = generate_entry_code()
            issued.add(entry_code)

            payload = {
                "hospitalName": hospital.hospital_name,
                "doctorName": doctor.name,
                "department": doctor.department.value,
                "entryCode": entry_code,
                "hospitalId": hospital_id
            }
            image = self.encoder(payload)

            doctors.append(DoctorOnboarding(
                doctor_name=doctor.name,
                department=doctor.department,
                entry_code=entry_code,
                qr_payload=payload,
                qr_png_base64=base64.b64encode(image).decode("ascii")
            ))

        logger.info(
            "Registered hospital %s with %d doctor(s)", hospital_id, len(doctors)
        )
        return HospitalRegistration(
            hospital_id=hospital_id,
            hospital_name=hospital.hospital_name,
            doctors=doctors
        )
