from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord, Session


class AttendanceRepository(Protocol):
    def list_sessions(self) -> Sequence[Session]:
        """Most recent first."""

        raise NotImplementedError

    def get_session(self, session_id: str) -> Optional[Session]:
        raise NotImplementedError

    def get_session_by_code(self, code: str) -> Optional[Session]:
        """Exact, case-insensitive match on `qr_code`."""

        raise NotImplementedError

    def add_session(self, session: Session) -> None:
        raise NotImplementedError

    def has_record(self, session_id: str, student_roll_no: str) -> bool:
        raise NotImplementedError

    def add_record(self, record: AttendanceRecord) -> bool:
        """Store the record and update the session's attendees in one step.

        Returns False (and changes nothing) when the pair is already marked.
        """

        raise NotImplementedError

    def records_for_session(self, session_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def records_for_student(self, student_roll_no: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def all_records(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
