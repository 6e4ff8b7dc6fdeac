"""Rates and chart buckets shown on the dashboards.

All percentages round half up to an integer (0.5 -> 1) and are 0 when the
denominator is 0.
"""
from __future__ import annotations

import math

from ..core.constants import ATTENDANCE_TARGET_PERCENT, SESSIONS_PER_WEEK, WEEK_BUCKETS


def percent(numerator: int, denominator: int) -> int:
    if denominator <= 0:
        return 0
    return int(math.floor((numerator / denominator) * 100 + 0.5))


def attendance_rate(total_sessions: int, attended: int) -> int:
    return percent(attended, total_sessions)


def average_fill_rate(total_attendance: int, sessions: int, capacity: int) -> int:
    return percent(total_attendance, sessions * capacity)


def session_fill_rate(attendees: int, capacity: int) -> int:
    return percent(attendees, capacity)


def checkin_rate(checkins: int, registrations: int) -> int:
    return percent(checkins, registrations)


def sessions_needed(total_sessions: int, attended: int, *, target: int = ATTENDANCE_TARGET_PERCENT) -> int:
    """How many more sessions a student must attend to reach `target` percent."""
    if total_sessions <= 0 or attendance_rate(total_sessions, attended) >= target:
        return 0
    return max(0, math.ceil(total_sessions * (target / 100) - attended))


def weekly_buckets(attended: int, *, weeks: int = WEEK_BUCKETS, per_week: int = SESSIONS_PER_WEEK) -> list[dict]:
    buckets = []
    for week in range(weeks):
        present = min(attended, per_week) if week == 0 else max(0, attended - per_week * week)
        buckets.append(
            {
                "name": f"Week {week + 1}",
                "present": present,
                "absent": max(0, per_week - present),
            }
        )
    return buckets
