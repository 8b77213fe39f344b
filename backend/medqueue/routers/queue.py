"""
Queue API routes: patient join and operator controls.
"""

from fastapi import APIRouter, HTTPException, status, Depends, Query

from ..models.queue import (
    Patient,
    QueueStats,
    QueueDisplay,
    QueueJoinRequest,
    QueueJoinResponse,
    QueuePosition,
    QueuePauseResponse,
    CurrentPatientUpdate
)
from ..services.queue_service import QueueEngine
from .dependencies import get_queue_engine

router = APIRouter(prefix="/queue", tags=["Queue"])


@router.post("/join", response_model=QueueJoinResponse, status_code=status.HTTP_201_CREATED)
async def join_queue(
    request: QueueJoinRequest,
    engine: QueueEngine = Depends(get_queue_engine)
):
    """Join the queue with an entry code and display name."""
    patient = engine.join(request.name, request.entry_code)
    return QueueJoinResponse(
        name=patient.name,
        position=patient.position,
        patients_ahead=max(0, patient.position - 1),
        estimated_wait_minutes=patient.position * engine.minutes_per_patient,
        patient=patient
    )


@router.get("/position", response_model=QueuePosition)
async def get_position(
    name: str = Query(..., min_length=1, description="Exact patient name"),
    engine: QueueEngine = Depends(get_queue_engine)
):
    """Current position and wait estimate for a waiting patient."""
    estimate = engine.estimate(name)
    if not estimate:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Patient not found in queue"
        )
    return estimate


@router.get("/display", response_model=QueueDisplay)
async def get_queue_display(engine: QueueEngine = Depends(get_queue_engine)):
    """Get current queue status for dashboard display."""
    return engine.display()


@router.get("/stats", response_model=QueueStats)
async def get_queue_stats(engine: QueueEngine = Depends(get_queue_engine)):
    """Get derived queue statistics."""
    return engine.stats


@router.post("/call", response_model=Patient)
async def call_next_patient(engine: QueueEngine = Depends(get_queue_engine)):
    """Call the next patient."""
    patient = engine.call_next()

    if not patient:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No patients waiting in queue"
        )

    return patient


@router.post("/skip", response_model=Patient)
async def skip_patient(engine: QueueEngine = Depends(get_queue_engine)):
    """Move the patient at the head of the queue to the end."""
    patient = engine.skip_patient()

    if not patient:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No patients waiting in queue"
        )

    return patient


@router.post("/pause", response_model=QueuePauseResponse)
async def toggle_pause(engine: QueueEngine = Depends(get_queue_engine)):
    """Pause or resume the queue (display signal only)."""
    paused = engine.toggle_pause()
    return QueuePauseResponse(
        paused=paused,
        message="Queue paused" if paused else "Queue resumed"
    )


@router.put("/current", response_model=QueueDisplay)
async def set_current_patient(
    request: CurrentPatientUpdate,
    engine: QueueEngine = Depends(get_queue_engine)
):
    """Set or clear the patient shown as currently serving."""
    engine.set_current_patient(request.patient)
    return engine.display()
