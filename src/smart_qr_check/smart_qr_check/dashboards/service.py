from __future__ import annotations

from dataclasses import dataclass

from ..attendance.model import AttendanceRecord, Session
from ..attendance.service import AttendanceService
from ..common.datetime_utils import format_display_timestamp
from ..core.constants import (
    ATTENDANCE_TARGET_PERCENT,
    CHART_ITEMS,
    DEFAULT_SESSION_CAPACITY,
    EVENT_LABEL_LEN,
    SESSION_LABEL_LEN,
)
from ..events.model import Event, EventCheckin, EventRegistration
from ..events.service import EventService
from . import metrics


@dataclass(frozen=True)
class TeacherDashboard:
    total_sessions: int
    capacity: int
    total_attended: int
    average_rate: int
    sessions: list[dict]
    chart: list[dict]
    trend: list[dict]


@dataclass(frozen=True)
class StudentDashboard:
    roll_no: str
    total_sessions: int
    attended: int
    attendance_rate: int
    meets_target: bool
    sessions_needed: int
    attendance: list[dict]
    weekly: list[dict]
    events: list[dict]
    registered: list[dict]
    checked_in: list[dict]


@dataclass(frozen=True)
class OrganizerDashboard:
    total_events: int
    total_registrations: int
    total_checkins: int
    average_rate: int
    events: list[dict]
    chart: list[dict]
    trend: list[dict]


class DashboardService:
    """Builds per-role view models straight from the stores on every call."""

    def __init__(
        self,
        attendance: AttendanceService,
        events: EventService,
        *,
        capacity: int = DEFAULT_SESSION_CAPACITY,
    ):
        self._attendance = attendance
        self._events = events
        self._capacity = int(capacity)

    def teacher(self) -> TeacherDashboard:
        sessions = self._attendance.list_sessions()
        total_attended = sum(len(s.attendees) for s in sessions)
        head = sessions[:CHART_ITEMS]

        return TeacherDashboard(
            total_sessions=len(sessions),
            capacity=self._capacity,
            total_attended=total_attended,
            average_rate=metrics.average_fill_rate(total_attended, len(sessions), self._capacity),
            sessions=[self.session_row(s) for s in sessions],
            chart=[
                {"name": s.topic[:SESSION_LABEL_LEN], "attended": len(s.attendees), "total": self._capacity}
                for s in head
            ],
            trend=[
                {"session": f"S{i + 1}", "rate": metrics.session_fill_rate(len(s.attendees), self._capacity)}
                for i, s in enumerate(head)
            ],
        )

    def student(self, roll_no: str) -> StudentDashboard:
        sessions = self._attendance.list_sessions()
        by_id = {s.session_id: s for s in sessions}
        records = self._attendance.get_student_attendance(roll_no)
        student_events = self._events.get_student_events(roll_no)
        registered_ids = {r.event_id for r in student_events.registered}
        checked_in_ids = {c.event_id for c in student_events.checked_in}
        events_by_id = {e.event_id: e for e in self._events.list_events()}

        total = len(sessions)
        attended = len(records)
        rate = metrics.attendance_rate(total, attended)

        return StudentDashboard(
            roll_no=roll_no,
            total_sessions=total,
            attended=attended,
            attendance_rate=rate,
            meets_target=rate >= ATTENDANCE_TARGET_PERCENT,
            sessions_needed=metrics.sessions_needed(total, attended),
            attendance=[self.attendance_row(r, by_id.get(r.session_id)) for r in records],
            weekly=metrics.weekly_buckets(attended),
            events=[
                {
                    **self.event_row(e),
                    "registered": e.event_id in registered_ids,
                    "checked_in": e.event_id in checked_in_ids,
                }
                for e in events_by_id.values()
            ],
            registered=[self.registration_row(r) for r in student_events.registered],
            checked_in=[self.checkin_row(c, events_by_id.get(c.event_id)) for c in student_events.checked_in],
        )

    def organizer(self) -> OrganizerDashboard:
        events = self._events.list_events()
        total_registrations = sum(len(e.registrations) for e in events)
        total_checkins = sum(len(e.checkins) for e in events)
        head = events[:CHART_ITEMS]

        return OrganizerDashboard(
            total_events=len(events),
            total_registrations=total_registrations,
            total_checkins=total_checkins,
            average_rate=metrics.checkin_rate(total_checkins, total_registrations),
            events=[self.event_row(e) for e in events],
            chart=[
                {
                    "name": e.name[:EVENT_LABEL_LEN],
                    "registrations": len(e.registrations),
                    "checkins": len(e.checkins),
                }
                for e in head
            ],
            trend=[
                {"event": f"E{i + 1}", "rate": metrics.checkin_rate(len(e.checkins), len(e.registrations))}
                for i, e in enumerate(head)
            ],
        )

    def session_row(self, s: Session) -> dict:
        return {
            "id": s.session_id,
            "topic": s.topic,
            "date": s.date,
            "time": s.time,
            "room": s.room,
            "duration": s.duration,
            "qr_code": s.qr_code,
            "attendees": list(s.attendees),
            "fill_rate": metrics.session_fill_rate(len(s.attendees), self._capacity),
        }

    @staticmethod
    def event_row(e: Event) -> dict:
        return {
            "id": e.event_id,
            "name": e.name,
            "date": e.date,
            "venue": e.venue,
            "description": e.description,
            "qr_code": e.qr_code,
            "registrations": list(e.registrations),
            "checkins": list(e.checkins),
            "checkin_rate": metrics.checkin_rate(len(e.checkins), len(e.registrations)),
        }

    @staticmethod
    def attendance_row(r: AttendanceRecord, session: Session | None = None) -> dict:
        return {
            "session_id": r.session_id,
            "topic": session.topic if session else "-",
            "roll_no": r.student_roll_no,
            "name": r.student_name,
            "timestamp": format_display_timestamp(r.timestamp),
        }

    @staticmethod
    def registration_row(r: EventRegistration) -> dict:
        return {
            "event_id": r.event_id,
            "roll_no": r.student_roll_no,
            "name": r.student_name,
            "registered_at": format_display_timestamp(r.registered_at),
        }

    @staticmethod
    def checkin_row(c: EventCheckin, event: Event | None = None) -> dict:
        return {
            "event_id": c.event_id,
            "event_name": event.name if event else "-",
            "roll_no": c.student_roll_no,
            "name": c.student_name,
            "checkin_at": format_display_timestamp(c.checkin_at),
        }
