from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..common.identifiers import normalize_code
from ..core.exceptions import ValidationError
from .model import AttendanceRecord, Session


class InMemoryAttendanceRepository:
    """Process-local storage for sessions and attendance records.

    Sessions are frozen snapshots; marking attendance swaps in a new snapshot
    with the extra roll number, so readers never see a record without its
    attendee entry or the other way round.

    Not thread-safe: callers are assumed to run one request at a time.
    """

    def __init__(self):
        self._sessions: list[Session] = []
        self._records: list[AttendanceRecord] = []
        self._marked: set[tuple[str, str]] = set()

    def list_sessions(self) -> Sequence[Session]:
        return list(self._sessions)

    def get_session(self, session_id: str) -> Optional[Session]:
        for s in self._sessions:
            if s.session_id == session_id:
                return s
        return None

    def get_session_by_code(self, code: str) -> Optional[Session]:
        wanted = normalize_code(code)
        if not wanted:
            return None
        for s in self._sessions:
            if normalize_code(s.qr_code) == wanted:
                return s
        return None

    def add_session(self, session: Session) -> None:
        if self.get_session(session.session_id):
            raise ValidationError(f"Session id already exists: {session.session_id}")
        if self.get_session_by_code(session.qr_code):
            raise ValidationError(f"Session code already exists: {session.qr_code}")
        if session.attendees:
            raise ValidationError("New sessions cannot carry attendees")

        self._sessions.insert(0, session)

    def has_record(self, session_id: str, student_roll_no: str) -> bool:
        return (session_id, student_roll_no) in self._marked

    def add_record(self, record: AttendanceRecord) -> bool:
        key = (record.session_id, record.student_roll_no)
        if key in self._marked:
            return False

        self._records.append(record)
        self._marked.add(key)

        for i, s in enumerate(self._sessions):
            if s.session_id == record.session_id and record.student_roll_no not in s.attendees:
                self._sessions[i] = replace(s, attendees=s.attendees + (record.student_roll_no,))
        return True

    def records_for_session(self, session_id: str) -> Sequence[AttendanceRecord]:
        return [r for r in self._records if r.session_id == session_id]

    def records_for_student(self, student_roll_no: str) -> Sequence[AttendanceRecord]:
        return [r for r in self._records if r.student_roll_no == student_roll_no]

    def all_records(self) -> Sequence[AttendanceRecord]:
        return list(self._records)
