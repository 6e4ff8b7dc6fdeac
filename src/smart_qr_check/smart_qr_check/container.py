from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from .admin.service import AdminOverviewService
from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import now_local
from .core.constants import DEFAULT_SESSION_CAPACITY
from .dashboards.service import DashboardService
from .events.memory_event_repository import InMemoryEventRepository
from .events.service import EventService
from .seed.bootstrap import seed_attendance, seed_events
from .users.service import LoginService


@dataclass(frozen=True)
class Container:
    attendance_repo: InMemoryAttendanceRepository
    events_repo: InMemoryEventRepository

    login_service: LoginService
    attendance_service: AttendanceService
    event_service: EventService
    dashboard_service: DashboardService
    admin_service: AdminOverviewService


def build_container(
    *,
    seed_fixtures: bool = True,
    capacity: int = DEFAULT_SESSION_CAPACITY,
    clock: Callable[[], datetime] = now_local,
    rng: Optional[random.Random] = None,
) -> Container:
    attendance_repo = InMemoryAttendanceRepository()
    events_repo = InMemoryEventRepository()
    if seed_fixtures:
        seed_attendance(attendance_repo)
        seed_events(events_repo)

    rng = rng or random.Random()
    attendance_service = AttendanceService(attendance_repo, clock=clock, rng=rng)
    event_service = EventService(events_repo, clock=clock, rng=rng)

    return Container(
        attendance_repo=attendance_repo,
        events_repo=events_repo,
        login_service=LoginService(),
        attendance_service=attendance_service,
        event_service=event_service,
        dashboard_service=DashboardService(attendance_service, event_service, capacity=capacity),
        admin_service=AdminOverviewService(),
    )
