"""
Queue state engine.

Holds the single shared visit queue: the ordered waiting patients, the
patient currently being served, the pause flag and the served counter.
Positions are always derived from order, so every structural change
renumbers the waiting list from 1.
"""

import logging
import threading
from datetime import datetime
from typing import Callable, List, Optional

from ..config import get_settings
from ..models.queue import (
    Patient,
    PatientStatus,
    QueueDisplay,
    QueuePosition,
    QueueStats
)

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class QueueEngine:
    """In-memory visit queue for one doctor."""

    def __init__(
        self,
        clock: Clock = datetime.now,
        minutes_per_patient: Optional[int] = None,
        joined_at_format: Optional[str] = None
    ):
        settings = get_settings()
        self._clock = clock
        self.minutes_per_patient = (
            settings.MINUTES_PER_PATIENT if minutes_per_patient is None else minutes_per_patient
        )
        self.joined_at_format = joined_at_format or settings.JOINED_AT_FORMAT

        self._patients: List[Patient] = []
        self._current: Optional[Patient] = None
        self._paused = False
        self._served = 0
        self._last_id = 0
        # Guards every read and write; request handlers may run on several threads.
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    @property
    def patients(self) -> List[Patient]:
        """Waiting patients in queue order, as detached copies."""
        with self._lock:
            return [p.model_copy() for p in self._patients]

    @property
    def current_patient(self) -> Optional[Patient]:
        with self._lock:
            return self._current.model_copy() if self._current else None

    @property
    def paused(self) -> bool:
        with self._lock:
            return self._paused

    @property
    def served_count(self) -> int:
        with self._lock:
            return self._served

    @property
    def stats(self) -> QueueStats:
        """Statistics recomputed from current state on every access."""
        with self._lock:
            total = len(self._patients)
            served = self._served

        if total > 0:
            # Half-up integer rounding of served / (served + total) * 100
            denominator = served + total
            efficiency = (served * 200 + denominator) // (2 * denominator)
        else:
            efficiency = 100

        return QueueStats(
            total_patients=total,
            patients_served=served,
            avg_wait_time=total * self.minutes_per_patient,
            efficiency=efficiency
        )

    def get_patient_position(self, name: str) -> int:
        """Position of the first waiting patient named exactly `name`, or 0."""
        with self._lock:
            for patient in self._patients:
                if patient.name == name:
                    return patient.position
        return 0

    def estimate(self, name: str) -> Optional[QueuePosition]:
        """Position and wait estimate for a waiting patient, None if absent."""
        position = self.get_patient_position(name)
        if position == 0:
            return None
        return QueuePosition(
            name=name,
            position=position,
            patients_ahead=max(0, position - 1),
            estimated_wait_minutes=position * self.minutes_per_patient
        )

    def display(self) -> QueueDisplay:
        """Consistent snapshot for the operator dashboard."""
        with self._lock:
            waiting = [p.model_copy() for p in self._patients]
            current = self._current.model_copy() if self._current else None
            paused = self._paused
            stats = self.stats

        return QueueDisplay(
            waiting=waiting,
            current_patient=current,
            paused=paused,
            stats=stats,
            next_patient=waiting[0].name if waiting else None
        )

    # ------------------------------------------------------------------
    # Write side
    # ------------------------------------------------------------------

    def join(self, name: str, entry_code: str) -> Patient:
        """Append a new waiting patient at the tail of the queue."""
        with self._lock:
            now = self._clock()
            patient = Patient(
                id=self._next_id(now),
                name=name,
                position=len(self._patients) + 1,
                status=PatientStatus.WAITING,
                joined_at=now.strftime(self.joined_at_format),
                entry_code=entry_code
            )
            self._patients.append(patient)
            joined = patient.model_copy()

        logger.info("Patient %s joined at position %d", joined.id, joined.position)
        return joined

    def call_next(self) -> Optional[Patient]:
        """Move the head of the queue to the current patient slot."""
        with self._lock:
            if not self._patients:
                logger.debug("Call next on empty queue ignored")
                return None

            patient = self._patients.pop(0)
            self._current = patient
            self._renumber()
            self._served += 1
            served = self._served
            called = patient.model_copy()

        logger.info("Called patient %s (served=%d)", called.id, served)
        return called

    def skip_patient(self) -> Optional[Patient]:
        """Move the head of the queue to the tail, marked skipped."""
        with self._lock:
            if not self._patients:
                logger.debug("Skip on empty queue ignored")
                return None

            patient = self._patients.pop(0)
            self._renumber()
            patient.status = PatientStatus.SKIPPED
            patient.position = len(self._patients) + 1
            self._patients.append(patient)
            skipped = patient.model_copy()

        logger.info("Skipped patient %s to position %d", skipped.id, skipped.position)
        return skipped

    def toggle_pause(self) -> bool:
        """Flip the pause flag. Joins and calls do not consult it."""
        with self._lock:
            self._paused = not self._paused
            paused = self._paused

        logger.info("Queue %s", "paused" if paused else "resumed")
        return paused

    def set_current_patient(self, patient: Optional[Patient]) -> None:
        """Replace the current patient; the engine keeps its own copy."""
        with self._lock:
            self._current = patient.model_copy() if patient else None

    # ------------------------------------------------------------------

    def _renumber(self) -> None:
        for index, patient in enumerate(self._patients):
            patient.position = index + 1

    def _next_id(self, now: datetime) -> str:
        """Millisecond timestamp id, bumped when the clock has not advanced."""
        candidate = int(now.timestamp() * 1000)
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return str(candidate)
