from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..common.identifiers import normalize_code
from ..core.exceptions import ValidationError
from .model import Event, EventCheckin, EventRegistration


class InMemoryEventRepository:
    """Process-local storage for events, registrations and check-ins.

    Same single-writer assumption as the attendance repository: no locking.
    """

    def __init__(self):
        self._events: list[Event] = []
        self._registrations: list[EventRegistration] = []
        self._checkins: list[EventCheckin] = []
        self._registered: set[tuple[str, str]] = set()
        self._checked_in: set[tuple[str, str]] = set()

    def list_events(self) -> Sequence[Event]:
        return list(self._events)

    def get_event(self, event_id: str) -> Optional[Event]:
        for e in self._events:
            if e.event_id == event_id:
                return e
        return None

    def get_event_by_code(self, code: str) -> Optional[Event]:
        wanted = normalize_code(code)
        if not wanted:
            return None
        for e in self._events:
            if normalize_code(e.qr_code) == wanted:
                return e
        return None

    def add_event(self, event: Event) -> None:
        if self.get_event(event.event_id):
            raise ValidationError(f"Event id already exists: {event.event_id}")
        if self.get_event_by_code(event.qr_code):
            raise ValidationError(f"Event code already exists: {event.qr_code}")
        if event.registrations or event.checkins:
            raise ValidationError("New events cannot carry registrations or check-ins")

        self._events.insert(0, event)

    def has_registration(self, event_id: str, student_roll_no: str) -> bool:
        return (event_id, student_roll_no) in self._registered

    def has_checkin(self, event_id: str, student_roll_no: str) -> bool:
        return (event_id, student_roll_no) in self._checked_in

    def add_registration(self, registration: EventRegistration) -> bool:
        key = (registration.event_id, registration.student_roll_no)
        if key in self._registered:
            return False

        self._registrations.append(registration)
        self._registered.add(key)
        self._update_event(registration.event_id, registration.student_roll_no, field_name="registrations")
        return True

    def add_checkin(self, checkin: EventCheckin, registration: EventRegistration) -> bool:
        key = (checkin.event_id, checkin.student_roll_no)
        if key in self._checked_in:
            return False

        self._checkins.append(checkin)
        self._checked_in.add(key)
        self._update_event(checkin.event_id, checkin.student_roll_no, field_name="checkins")

        # Auto-registration for walk-in check-ins.
        self.add_registration(registration)
        return True

    def _update_event(self, event_id: str, roll_no: str, *, field_name: str) -> None:
        for i, e in enumerate(self._events):
            current = getattr(e, field_name)
            if e.event_id == event_id and roll_no not in current:
                self._events[i] = replace(e, **{field_name: current + (roll_no,)})

    def registrations_for_event(self, event_id: str) -> Sequence[EventRegistration]:
        return [r for r in self._registrations if r.event_id == event_id]

    def checkins_for_event(self, event_id: str) -> Sequence[EventCheckin]:
        return [c for c in self._checkins if c.event_id == event_id]

    def registrations_for_student(self, student_roll_no: str) -> Sequence[EventRegistration]:
        return [r for r in self._registrations if r.student_roll_no == student_roll_no]

    def checkins_for_student(self, student_roll_no: str) -> Sequence[EventCheckin]:
        return [c for c in self._checkins if c.student_roll_no == student_roll_no]
