from __future__ import annotations

import logging

from ..attendance.model import AttendanceRecord, Session
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import parse_fixture_timestamp
from ..events.model import Event, EventCheckin, EventRegistration
from ..events.repository import EventRepository
from . import data

logger = logging.getLogger(__name__)


def seed_attendance(repo: AttendanceRepository) -> None:
    """Load demo sessions and marks.

    Attendee lists are rebuilt from the records, not copied from the fixtures.
    """
    # add_session prepends, so insert oldest first to keep the fixture order.
    for s in reversed(data.SESSIONS):
        repo.add_session(
            Session(
                session_id=s["id"],
                topic=s["topic"],
                date=s["date"],
                time=s["time"],
                room=s["room"],
                duration=s["duration"],
                qr_code=s["qr_code"],
            )
        )

    for session_id, roll_no, name, ts in data.ATTENDANCE_RECORDS:
        repo.add_record(
            AttendanceRecord(
                session_id=session_id,
                student_roll_no=roll_no,
                student_name=name,
                timestamp=parse_fixture_timestamp(ts),
            )
        )

    logger.info("Seeded %d sessions, %d attendance records", len(data.SESSIONS), len(data.ATTENDANCE_RECORDS))


def seed_events(repo: EventRepository) -> None:
    for e in reversed(data.EVENTS):
        repo.add_event(
            Event(
                event_id=e["id"],
                name=e["name"],
                date=e["date"],
                venue=e["venue"],
                description=e["description"],
                qr_code=e["qr_code"],
            )
        )

    for event_id, roll_no, name, ts in data.EVENT_REGISTRATIONS:
        repo.add_registration(
            EventRegistration(
                event_id=event_id,
                student_roll_no=roll_no,
                student_name=name,
                registered_at=parse_fixture_timestamp(ts),
            )
        )

    for event_id, roll_no, name, ts in data.EVENT_CHECKINS:
        at = parse_fixture_timestamp(ts)
        repo.add_checkin(
            EventCheckin(event_id=event_id, student_roll_no=roll_no, student_name=name, checkin_at=at),
            EventRegistration(event_id=event_id, student_roll_no=roll_no, student_name=name, registered_at=at),
        )

    logger.info(
        "Seeded %d events, %d registrations, %d check-ins",
        len(data.EVENTS),
        len(data.EVENT_REGISTRATIONS),
        len(data.EVENT_CHECKINS),
    )
