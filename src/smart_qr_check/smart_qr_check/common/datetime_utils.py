from __future__ import annotations

from datetime import datetime

DISPLAY_FORMAT = "%m/%d/%Y, %I:%M:%S %p"
FIXTURE_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_fixture_timestamp(value: str) -> datetime:
    """Parse 'YYYY-MM-DD HH:MM:SS' strings used by seed data."""
    return datetime.strptime(value, FIXTURE_FORMAT)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def format_display_timestamp(value: datetime) -> str:
    """en-US display form, e.g. '11/05/2025, 09:05:00 AM'."""
    return value.strftime(DISPLAY_FORMAT)
