"""
Request dependencies.

The queue engine and registration service live on `app.state`; they are
created in the application lifespan and injected into routes from there.
"""

from fastapi import Request

from ..services.queue_service import QueueEngine
from ..services.registration_service import RegistrationService


async def get_queue_engine(request: Request) -> QueueEngine:
    """The application's queue engine."""
    return request.app.state.queue_engine


async def get_registration_service(request: Request) -> RegistrationService:
    """The application's registration service."""
    return request.app.state.registration_service
