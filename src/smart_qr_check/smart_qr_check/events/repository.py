from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Event, EventCheckin, EventRegistration


class EventRepository(Protocol):
    def list_events(self) -> Sequence[Event]:
        raise NotImplementedError

    def get_event(self, event_id: str) -> Optional[Event]:
        raise NotImplementedError

    def get_event_by_code(self, code: str) -> Optional[Event]:
        raise NotImplementedError

    def add_event(self, event: Event) -> None:
        raise NotImplementedError

    def has_registration(self, event_id: str, student_roll_no: str) -> bool:
        raise NotImplementedError

    def has_checkin(self, event_id: str, student_roll_no: str) -> bool:
        raise NotImplementedError

    def add_registration(self, registration: EventRegistration) -> bool:
        """Returns False when the pair is already registered."""

        raise NotImplementedError

    def add_checkin(self, checkin: EventCheckin, registration: EventRegistration) -> bool:
        """Store the check-in and, when the pair is not registered yet, `registration`.

        Both happen in the same call. Returns False (nothing stored) when the
        pair is already checked in.
        """

        raise NotImplementedError

    def registrations_for_event(self, event_id: str) -> Sequence[EventRegistration]:
        raise NotImplementedError

    def checkins_for_event(self, event_id: str) -> Sequence[EventCheckin]:
        raise NotImplementedError

    def registrations_for_student(self, student_roll_no: str) -> Sequence[EventRegistration]:
        raise NotImplementedError

    def checkins_for_student(self, student_roll_no: str) -> Sequence[EventCheckin]:
        raise NotImplementedError
