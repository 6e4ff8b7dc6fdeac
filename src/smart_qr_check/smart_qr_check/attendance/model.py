from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Session:
    """Domain entity: one scheduled class eligible for attendance marking.

    `attendees` caches the roll numbers of the session's attendance records.
    Only the repository rewrites it, in the same call that stores the record.
    """

    session_id: str
    topic: str
    date: str
    time: str
    room: str
    duration: str
    qr_code: str
    attendees: tuple[str, ...] = ()


@dataclass(frozen=True)
class AttendanceRecord:
    session_id: str
    student_roll_no: str
    student_name: str
    timestamp: datetime


@dataclass(frozen=True)
class NewSession:
    """Teacher form input; id and QR code are generated by the store."""

    topic: str
    date: str
    time: str
    room: str
    duration: str = ""
