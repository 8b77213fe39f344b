"""
MedQueue - Hospital Visit-Queue Coordinator

Main FastAPI application entry point.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import Settings, get_settings
from .routers import queue_router, registration_router
from .services.queue_service import QueueEngine
from .services.registration_service import RegistrationService

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application with its own queue engine."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        # Startup
        logger.info("Starting %s v%s", settings.APP_NAME, settings.APP_VERSION)
        app.state.queue_engine = QueueEngine(
            minutes_per_patient=settings.MINUTES_PER_PATIENT,
            joined_at_format=settings.JOINED_AT_FORMAT
        )
        app.state.registration_service = RegistrationService()

        yield

        # Shutdown
        logger.info("Application shutdown complete")

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        lifespan=lifespan
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"]
    )

    # Trace Middleware
    @app.middleware("http")
    async def trace_middleware(request: Request, call_next):
        response = await call_next(request)
        logger.debug("%s %s -> %s", request.method, request.url.path, response.status_code)
        return response

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail}
        )

    # Global error handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"detail": str(exc)}
        )

    # Include routers
    app.include_router(queue_router)
    app.include_router(registration_router)

    @app.get("/", tags=["Health"])
    async def root():
        """Root endpoint - health check."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "status": "healthy",
            "docs": "/docs"
        }

    @app.get("/health", tags=["Health"])
    async def health_check(request: Request):
        """Detailed health check."""
        engine: QueueEngine = request.app.state.queue_engine
        return {
            "status": "healthy",
            "queue_length": engine.stats.total_patients,
            "paused": engine.paused,
            "version": settings.APP_VERSION
        }

    return app


app = create_app()


# Entry point for running directly
if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "medqueue.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG
    )
