from __future__ import annotations

import random
from datetime import datetime

import pytest

from src.smart_qr_check.smart_qr_check.attendance.memory_attendance_repository import InMemoryAttendanceRepository
from src.smart_qr_check.smart_qr_check.attendance.service import AttendanceService
from src.smart_qr_check.smart_qr_check.events.memory_event_repository import InMemoryEventRepository
from src.smart_qr_check.smart_qr_check.events.service import EventService
from src.smart_qr_check.smart_qr_check.main import create_app


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 11, 6, 9, 5, 0)


@pytest.fixture
def attendance_repo() -> InMemoryAttendanceRepository:
    return InMemoryAttendanceRepository()


@pytest.fixture
def attendance_service(attendance_repo, fixed_now) -> AttendanceService:
    return AttendanceService(attendance_repo, clock=lambda: fixed_now, rng=random.Random(7))


@pytest.fixture
def events_repo() -> InMemoryEventRepository:
    return InMemoryEventRepository()


@pytest.fixture
def event_service(events_repo, fixed_now) -> EventService:
    return EventService(events_repo, clock=lambda: fixed_now, rng=random.Random(7))


@pytest.fixture
def app():
    return create_app("config.testing")


@pytest.fixture
def client(app):
    return app.test_client()
