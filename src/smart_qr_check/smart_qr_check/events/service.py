from __future__ import annotations

import logging
import random
from datetime import datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.identifiers import allocate_unique, new_entity_id, new_qr_code
from ..common.validators import optional_text, require_non_empty
from ..core.constants import EVENT_QR_PREFIX_LEN
from ..core.exceptions import NotFoundError
from .model import Event, EventCheckin, EventRegistration, NewEvent, StudentEvents
from .repository import EventRepository

logger = logging.getLogger(__name__)


class EventService:
    """Event store: events, registrations and check-ins.

    A check-in for a student who never registered registers them in the same
    step. Duplicate registrations/check-ins are rejected with False.
    """

    def __init__(
        self,
        events: EventRepository,
        *,
        clock: Callable[[], datetime] = now_local,
        rng: Optional[random.Random] = None,
    ):
        self._events = events
        self._clock = clock
        self._rng = rng or random.Random()

    def create_event(self, new_event: NewEvent) -> Event:
        name = require_non_empty(new_event.name, "Event name")
        date = require_non_empty(new_event.date, "Date")
        venue = require_non_empty(new_event.venue, "Venue")

        event_id = allocate_unique(new_entity_id, lambda v: self._events.get_event(v) is not None)
        qr_code = allocate_unique(
            lambda: new_qr_code(name, EVENT_QR_PREFIX_LEN, rng=self._rng),
            lambda v: self._events.get_event_by_code(v) is not None,
        )

        event = Event(
            event_id=event_id,
            name=name,
            date=date,
            venue=venue,
            description=optional_text(new_event.description, "Description"),
            qr_code=qr_code,
        )
        self._events.add_event(event)
        logger.info("Event created id=%s name=%r code=%s", event_id, name, qr_code)
        return event

    def register_for_event(self, event_id: str, student_roll_no: str, student_name: str) -> bool:
        roll_no, name = self._require_student(student_roll_no, student_name)
        self.get_event(event_id)

        registration = EventRegistration(
            event_id=event_id,
            student_roll_no=roll_no,
            student_name=name,
            registered_at=self._clock(),
        )
        added = self._events.add_registration(registration)
        if added:
            logger.info("Registered event=%s roll_no=%s", event_id, roll_no)
        else:
            logger.debug("Duplicate registration rejected event=%s roll_no=%s", event_id, roll_no)
        return added

    def checkin_to_event(self, event_id: str, student_roll_no: str, student_name: str) -> bool:
        roll_no, name = self._require_student(student_roll_no, student_name)
        self.get_event(event_id)

        now = self._clock()
        auto_register = not self._events.has_registration(event_id, roll_no)
        added = self._events.add_checkin(
            EventCheckin(event_id=event_id, student_roll_no=roll_no, student_name=name, checkin_at=now),
            EventRegistration(event_id=event_id, student_roll_no=roll_no, student_name=name, registered_at=now),
        )
        if added:
            logger.info("Checked in event=%s roll_no=%s auto_registered=%s", event_id, roll_no, auto_register)
        else:
            logger.debug("Duplicate check-in rejected event=%s roll_no=%s", event_id, roll_no)
        return added

    def checkin_by_code(self, code: str, student_roll_no: str, student_name: str) -> tuple[Event, bool]:
        event = self.resolve_event_code(code)
        return event, self.checkin_to_event(event.event_id, student_roll_no, student_name)

    def get_event_checkins(self, event_id: str) -> Sequence[EventCheckin]:
        return self._events.checkins_for_event(event_id)

    def get_event_registrations(self, event_id: str) -> Sequence[EventRegistration]:
        return self._events.registrations_for_event(event_id)

    def get_student_events(self, student_roll_no: str) -> StudentEvents:
        student_roll_no = optional_text(student_roll_no, "Roll number")
        return StudentEvents(
            registered=list(self._events.registrations_for_student(student_roll_no)),
            checked_in=list(self._events.checkins_for_student(student_roll_no)),
        )

    def is_registered(self, event_id: str, student_roll_no: str) -> bool:
        return self._events.has_registration(event_id, optional_text(student_roll_no, "Roll number"))

    def is_checked_in(self, event_id: str, student_roll_no: str) -> bool:
        return self._events.has_checkin(event_id, optional_text(student_roll_no, "Roll number"))

    def list_events(self) -> Sequence[Event]:
        return self._events.list_events()

    def get_event(self, event_id: str) -> Event:
        event = self._events.get_event(event_id)
        if not event:
            raise NotFoundError("Event not found")
        return event

    def find_event_by_code(self, code: str) -> Optional[Event]:
        return self._events.get_event_by_code(code)

    def resolve_event_code(self, code: str) -> Event:
        require_non_empty(code, "Event code")
        event = self._events.get_event_by_code(code)
        if not event:
            raise NotFoundError("Invalid event code")
        return event

    @staticmethod
    def _require_student(student_roll_no: str, student_name: str) -> tuple[str, str]:
        return (
            require_non_empty(student_roll_no, "Roll number"),
            require_non_empty(student_name, "Student name"),
        )
