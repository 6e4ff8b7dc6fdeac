from __future__ import annotations

import re

import pytest

from src.smart_qr_check.smart_qr_check.attendance.model import NewSession, Session
from src.smart_qr_check.smart_qr_check.core.exceptions import NotFoundError, ValidationError


def _add_scenario_session(repo) -> Session:
    session = Session(
        session_id="s-x",
        topic="X",
        date="2025-01-01",
        time="10:00",
        room="R1",
        duration="",
        qr_code="QR-X-1",
    )
    repo.add_session(session)
    return session


def test_mark_attendance_twice_keeps_one_record(attendance_repo, attendance_service):
    session = _add_scenario_session(attendance_repo)

    assert attendance_service.mark_attendance(session.session_id, "S1", "Alice") is True
    assert attendance_service.mark_attendance(session.session_id, "S1", "Alice") is False

    assert len(attendance_service.get_session_attendees(session.session_id)) == 1
    assert attendance_service.get_session(session.session_id).attendees == ("S1",)


def test_attendees_match_record_roll_numbers(attendance_repo, attendance_service):
    session = _add_scenario_session(attendance_repo)
    for roll in ["S1", "S2", "S1", "S3", "S2"]:
        attendance_service.mark_attendance(session.session_id, roll, f"Student {roll}")

    records = attendance_service.get_session_attendees(session.session_id)
    stored = attendance_service.get_session(session.session_id)
    assert [r.student_roll_no for r in records] == ["S1", "S2", "S3"]
    assert set(stored.attendees) == {r.student_roll_no for r in records}
    assert len(stored.attendees) == len(set(stored.attendees))


def test_record_uses_clock_timestamp(attendance_repo, attendance_service, fixed_now):
    session = _add_scenario_session(attendance_repo)
    attendance_service.mark_attendance(session.session_id, "S1", "Alice")

    rec = attendance_service.get_session_attendees(session.session_id)[0]
    assert rec.timestamp == fixed_now
    assert rec.student_name == "Alice"


def test_student_attendance_is_filtered_and_ordered(attendance_service):
    first = attendance_service.create_session(NewSession(topic="Networks", date="2025-01-01", time="09:00", room="R1"))
    second = attendance_service.create_session(NewSession(topic="Compilers", date="2025-01-02", time="09:00", room="R2"))

    attendance_service.mark_attendance(second.session_id, "S1", "Alice")
    attendance_service.mark_attendance(first.session_id, "S2", "Bob")
    attendance_service.mark_attendance(first.session_id, "S1", "Alice")

    records = attendance_service.get_student_attendance("S1")
    assert [r.session_id for r in records] == [second.session_id, first.session_id]
    assert all(r.student_roll_no == "S1" for r in records)


def test_create_session_generates_id_and_code_and_prepends(attendance_service):
    first = attendance_service.create_session(NewSession(topic="Data Mining", date="2025-01-01", time="09:00", room="R1"))
    second = attendance_service.create_session(
        NewSession(topic="Graphics", date="2025-01-02", time="11:00", room="R2", duration="90 min")
    )

    assert first.session_id != second.session_id
    assert re.fullmatch(r"QR-DAT-[0-9a-z]{6}", first.qr_code)
    assert re.fullmatch(r"QR-GRA-[0-9a-z]{6}", second.qr_code)
    assert second.duration == "90 min"
    assert second.attendees == ()
    assert [s.session_id for s in attendance_service.list_sessions()] == [second.session_id, first.session_id]


@pytest.mark.parametrize("field", ["topic", "date", "time", "room"])
def test_create_session_requires_fields(attendance_service, field):
    values = {"topic": "Networks", "date": "2025-01-01", "time": "09:00", "room": "R1"}
    values[field] = "  "

    with pytest.raises(ValidationError):
        attendance_service.create_session(NewSession(**values))
    assert attendance_service.list_sessions() == []


def test_mark_unknown_session_raises(attendance_service):
    with pytest.raises(NotFoundError):
        attendance_service.mark_attendance("missing", "S1", "Alice")
    assert attendance_service.all_records() == []


def test_mark_by_code_is_case_insensitive(attendance_repo, attendance_service):
    session = _add_scenario_session(attendance_repo)

    found, ok = attendance_service.mark_attendance_by_code("qr-x-1", "S1", "Alice")
    assert found.session_id == session.session_id
    assert ok is True

    _, again = attendance_service.mark_attendance_by_code("QR-X-1", "S1", "Alice")
    assert again is False


def test_invalid_code_does_not_touch_store(attendance_repo, attendance_service):
    _add_scenario_session(attendance_repo)

    with pytest.raises(NotFoundError):
        attendance_service.mark_attendance_by_code("QR-NOPE", "S1", "Alice")
    assert attendance_service.all_records() == []
    assert attendance_service.find_session_by_code("QR-NOPE") is None


def test_simulated_scan_only_picks_unattended_sessions(attendance_service):
    a = attendance_service.create_session(NewSession(topic="A", date="d", time="t", room="r"))
    b = attendance_service.create_session(NewSession(topic="B", date="d", time="t", room="r"))
    attendance_service.mark_attendance(a.session_id, "S1", "Alice")

    picked = attendance_service.simulate_scan("S1", "Alice")
    assert picked is not None
    assert picked.session_id == b.session_id

    assert attendance_service.simulate_scan("S1", "Alice") is None
    assert len(attendance_service.get_student_attendance("S1")) == 2


def test_duplicate_session_code_rejected(attendance_repo):
    _add_scenario_session(attendance_repo)

    with pytest.raises(ValidationError):
        attendance_repo.add_session(
            Session(session_id="other", topic="Y", date="d", time="t", room="r", duration="", qr_code="qr-x-1")
        )


def test_padded_code_does_not_match(attendance_repo, attendance_service):
    _add_scenario_session(attendance_repo)

    assert attendance_service.find_session_by_code("  qr-x-1 ") is None
    with pytest.raises(NotFoundError):
        attendance_service.mark_attendance_by_code("QR-X-1 ", "S1", "Alice")
    assert attendance_service.all_records() == []


def test_student_lookup_trims_roll_no_like_marking(attendance_repo, attendance_service):
    session = _add_scenario_session(attendance_repo)
    attendance_service.mark_attendance(session.session_id, " S1 ", "Alice")

    assert attendance_service.get_session_attendees(session.session_id)[0].student_roll_no == "S1"
    assert len(attendance_service.get_student_attendance(" S1 ")) == 1
    assert len(attendance_service.get_student_attendance("S1")) == 1


def test_non_text_input_is_validation_error(attendance_repo, attendance_service):
    session = _add_scenario_session(attendance_repo)

    with pytest.raises(ValidationError):
        attendance_service.mark_attendance(session.session_id, 123, "Alice")
    with pytest.raises(ValidationError):
        attendance_service.mark_attendance(session.session_id, "S1", None)
    assert attendance_service.all_records() == []


def test_has_record_tracks_marks(attendance_repo, attendance_service):
    session = _add_scenario_session(attendance_repo)
    assert not attendance_repo.has_record(session.session_id, "S1")

    attendance_service.mark_attendance(session.session_id, "S1", "Alice")
    assert attendance_repo.has_record(session.session_id, "S1")
    assert attendance_service.simulate_scan("S1", "Alice") is None
