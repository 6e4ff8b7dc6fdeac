from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Event:
    """Domain entity: an organizer event students register for and check in to.

    `registrations` and `checkins` cache roll numbers of the matching records
    and are only rewritten by the repository.
    """

    event_id: str
    name: str
    date: str
    venue: str
    description: str
    qr_code: str
    registrations: tuple[str, ...] = ()
    checkins: tuple[str, ...] = ()


@dataclass(frozen=True)
class EventRegistration:
    event_id: str
    student_roll_no: str
    student_name: str
    registered_at: datetime


@dataclass(frozen=True)
class EventCheckin:
    event_id: str
    student_roll_no: str
    student_name: str
    checkin_at: datetime


@dataclass(frozen=True)
class NewEvent:
    name: str
    date: str
    venue: str
    description: str = ""


@dataclass(frozen=True)
class StudentEvents:
    """Read-model: what one student registered for and checked in to."""

    registered: list[EventRegistration] = field(default_factory=list)
    checked_in: list[EventCheckin] = field(default_factory=list)
