from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from typing import Optional, Sequence

from ..core.constants import ADMIN_LABEL_LEN
from ..core.exceptions import NotFoundError
from ..seed import data

EXPORT_FIELDS = {
    "users": ["id", "name", "role", "status"],
    "sessions": ["id", "topic", "teacher", "date", "attendance"],
    "events": ["id", "name", "organizer", "date", "participants"],
}


@dataclass(frozen=True)
class AdminOverview:
    total_teachers: int
    total_students: int
    total_organizers: int
    total_sessions: int
    total_events: int
    total_attendance: int
    users: list[dict]
    sessions: list[dict]
    events: list[dict]
    role_distribution: list[dict]
    attendance_chart: list[dict]
    trend: list[dict]


class AdminOverviewService:
    """System overview for admins, built from a static snapshot (not the live stores)."""

    def __init__(
        self,
        *,
        users: Optional[Sequence[dict]] = None,
        sessions: Optional[Sequence[dict]] = None,
        events: Optional[Sequence[dict]] = None,
        trend: Optional[Sequence[dict]] = None,
    ):
        self._users = list(users if users is not None else data.ADMIN_USERS)
        self._sessions = list(sessions if sessions is not None else data.ADMIN_SESSIONS)
        self._events = list(events if events is not None else data.ADMIN_EVENTS)
        self._trend = list(trend if trend is not None else data.ADMIN_TREND)

    def _count_role(self, role: str) -> int:
        return sum(1 for u in self._users if u["role"] == role)

    def overview(self) -> AdminOverview:
        students = self._count_role("Student")
        teachers = self._count_role("Teacher")
        organizers = self._count_role("Organizer")

        return AdminOverview(
            total_teachers=teachers,
            total_students=students,
            total_organizers=organizers,
            total_sessions=len(self._sessions),
            total_events=len(self._events),
            total_attendance=sum(int(s["attendance"]) for s in self._sessions),
            users=list(self._users),
            sessions=list(self._sessions),
            events=list(self._events),
            role_distribution=[
                {"name": "Students", "value": students, "color": "#3b82f6"},
                {"name": "Teachers", "value": teachers, "color": "#8b5cf6"},
                {"name": "Organizers", "value": organizers, "color": "#ec4899"},
            ],
            attendance_chart=[
                {"name": s["topic"][:ADMIN_LABEL_LEN], "attendance": s["attendance"]} for s in self._sessions
            ],
            trend=list(self._trend),
        )

    def export_csv(self, kind: str) -> bytes:
        """CSV export of one admin table (users, sessions or events)."""
        fields = EXPORT_FIELDS.get(kind)
        if not fields:
            raise NotFoundError(f"Unknown export: {kind}")

        rows = {"users": self._users, "sessions": self._sessions, "events": self._events}[kind]
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=fields)
        writer.writeheader()
        for row in rows:
            writer.writerow({k: row.get(k, "") for k in fields})
        return out.getvalue().encode("utf-8-sig")
