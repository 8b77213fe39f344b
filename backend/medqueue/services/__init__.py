"""Services package for MedQueue."""

from .queue_service import QueueEngine
from .registration_service import RegistrationService, generate_entry_code, encode_qr_png

__all__ = [
    "QueueEngine",
    "RegistrationService",
    "generate_entry_code",
    "encode_qr_png"
]
