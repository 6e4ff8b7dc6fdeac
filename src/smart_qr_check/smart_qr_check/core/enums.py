from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Dashboard a logged-in user is routed to."""

    STUDENT = "student"
    TEACHER = "teacher"
    ORGANIZER = "organizer"
    ADMIN = "admin"


class CheckinMethod(str, Enum):
    """How a mark/check-in reached the store (only used for logging and responses)."""

    SCAN = "scan"
    CODE = "code"
    MANUAL = "manual"
