"""Pytest fixtures for MedQueue tests."""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from medqueue.config import Settings
from medqueue.main import create_app
from medqueue.services.queue_service import QueueEngine


FIXED_NOW = datetime(2026, 10, 19, 9, 5, 42)


@pytest.fixture
def fixed_clock():
    """Clock that always reports FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def engine(fixed_clock) -> QueueEngine:
    """Fresh queue engine with a fixed clock and 15 minutes per patient."""
    return QueueEngine(clock=fixed_clock, minutes_per_patient=15)


@pytest.fixture
def make_engine(fixed_clock):
    """Factory for an engine pre-loaded with the given names."""
    def _make(*names: str, code: str = "DOC001") -> QueueEngine:
        queue = QueueEngine(clock=fixed_clock, minutes_per_patient=15)
        for name in names:
            queue.join(name, code)
        return queue
    return _make


@pytest.fixture
def client():
    """TestClient over a freshly created application."""
    app = create_app(Settings(LOG_LEVEL="WARNING", MINUTES_PER_PATIENT=15))
    with TestClient(app) as test_client:
        yield test_client
