from __future__ import annotations

import logging
import random
from datetime import datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.identifiers import allocate_unique, new_entity_id, new_qr_code
from ..common.validators import optional_text, require_non_empty
from ..core.constants import SESSION_QR_PREFIX_LEN
from ..core.exceptions import NotFoundError
from .model import AttendanceRecord, NewSession, Session
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Attendance store: the only entry point that mutates sessions and records."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        clock: Callable[[], datetime] = now_local,
        rng: Optional[random.Random] = None,
    ):
        self._attendance = attendance
        self._clock = clock
        self._rng = rng or random.Random()

    def create_session(self, new_session: NewSession) -> Session:
        topic = require_non_empty(new_session.topic, "Topic")
        date = require_non_empty(new_session.date, "Date")
        time = require_non_empty(new_session.time, "Time")
        room = require_non_empty(new_session.room, "Room")

        session_id = allocate_unique(new_entity_id, lambda v: self._attendance.get_session(v) is not None)
        qr_code = allocate_unique(
            lambda: new_qr_code(topic, SESSION_QR_PREFIX_LEN, rng=self._rng),
            lambda v: self._attendance.get_session_by_code(v) is not None,
        )

        session = Session(
            session_id=session_id,
            topic=topic,
            date=date,
            time=time,
            room=room,
            duration=optional_text(new_session.duration, "Duration"),
            qr_code=qr_code,
        )
        self._attendance.add_session(session)
        logger.info("Session created id=%s topic=%r code=%s", session_id, topic, qr_code)
        return session

    def mark_attendance(self, session_id: str, student_roll_no: str, student_name: str) -> bool:
        """Record one attendance mark.

        Returns False without changing anything when this student is already
        marked for the session.
        """
        roll_no = require_non_empty(student_roll_no, "Roll number")
        name = require_non_empty(student_name, "Student name")

        if not self._attendance.get_session(session_id):
            raise NotFoundError("Session not found")

        record = AttendanceRecord(
            session_id=session_id,
            student_roll_no=roll_no,
            student_name=name,
            timestamp=self._clock(),
        )
        added = self._attendance.add_record(record)
        if added:
            logger.info("Attendance marked session=%s roll_no=%s", session_id, roll_no)
        else:
            logger.debug("Duplicate attendance rejected session=%s roll_no=%s", session_id, roll_no)
        return added

    def mark_attendance_by_code(self, code: str, student_roll_no: str, student_name: str) -> tuple[Session, bool]:
        session = self.resolve_session_code(code)
        return session, self.mark_attendance(session.session_id, student_roll_no, student_name)

    def simulate_scan(self, student_roll_no: str, student_name: str) -> Optional[Session]:
        """Stand-in for reading a QR code: mark a random session not yet attended.

        Returns None when every session is already marked for the student.
        """
        roll_no = require_non_empty(student_roll_no, "Roll number")
        pending = [
            s for s in self._attendance.list_sessions() if not self._attendance.has_record(s.session_id, roll_no)
        ]
        if not pending:
            return None

        session = self._rng.choice(pending)
        self.mark_attendance(session.session_id, roll_no, student_name)
        return session

    def get_session_attendees(self, session_id: str) -> Sequence[AttendanceRecord]:
        return self._attendance.records_for_session(session_id)

    def get_student_attendance(self, student_roll_no: str) -> Sequence[AttendanceRecord]:
        return self._attendance.records_for_student(optional_text(student_roll_no, "Roll number"))

    def list_sessions(self) -> Sequence[Session]:
        return self._attendance.list_sessions()

    def get_session(self, session_id: str) -> Session:
        session = self._attendance.get_session(session_id)
        if not session:
            raise NotFoundError("Session not found")
        return session

    def find_session_by_code(self, code: str) -> Optional[Session]:
        return self._attendance.get_session_by_code(code)

    def resolve_session_code(self, code: str) -> Session:
        require_non_empty(code, "Session code")
        session = self._attendance.get_session_by_code(code)
        if not session:
            raise NotFoundError("Invalid session code")
        return session

    def all_records(self) -> Sequence[AttendanceRecord]:
        return self._attendance.all_records()
