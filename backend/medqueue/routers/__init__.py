"""Routers package for MedQueue API."""

from .queue import router as queue_router
from .registration import router as registration_router

__all__ = [
    "queue_router",
    "registration_router"
]
