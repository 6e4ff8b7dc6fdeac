from __future__ import annotations


def _login(client, name: str, role: str, **extra):
    resp = client.post("/login", json={"name": name, "role": role, **extra})
    assert resp.status_code == 200
    return resp.get_json()


def test_login_any_name_role(client):
    body = _login(client, "John Doe", "student")
    assert body["user"]["roll_no"] == "CS2024001"
    assert body["dashboard"] == "student"

    me = client.get("/me").get_json()
    assert me["user"]["name"] == "John Doe"

    client.post("/logout")
    assert client.get("/me").status_code == 401


def test_login_rejects_unknown_role(client):
    resp = client.post("/login", json={"name": "X", "role": "dean"})
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_anonymous_and_wrong_role(client):
    assert client.get("/api/teacher/dashboard").status_code == 401

    _login(client, "John Doe", "student")
    assert client.get("/api/teacher/dashboard").status_code == 403


def test_teacher_creates_session_and_adds_attendance(client):
    _login(client, "Jane Smith", "teacher")

    resp = client.post(
        "/api/sessions",
        json={"topic": "Operating Systems", "date": "2025-11-06", "time": "10:00 AM", "room": "Room 301"},
    )
    assert resp.status_code == 201
    session = resp.get_json()["session"]
    assert session["qr_code"].startswith("QR-OPE-")

    url = f"/api/sessions/{session['id']}/attendance"
    assert client.post(url, json={"roll_no": "CS2024007", "name": "Amy"}).status_code == 200
    assert client.post(url, json={"roll_no": "CS2024007", "name": "Amy"}).status_code == 409

    attendees = client.get(f"/api/sessions/{session['id']}/attendees").get_json()["attendees"]
    assert [a["roll_no"] for a in attendees] == ["CS2024007"]

    dash = client.get("/api/teacher/dashboard").get_json()["dashboard"]
    assert dash["total_sessions"] == 4
    assert dash["sessions"][0]["id"] == session["id"]


def test_create_session_missing_fields(client):
    _login(client, "Jane Smith", "teacher")

    resp = client.post("/api/sessions", json={"topic": "OS", "date": "", "time": "10:00", "room": "R1"})
    assert resp.status_code == 400


def test_session_qr_png(client):
    _login(client, "Jane Smith", "teacher")

    resp = client.get("/api/sessions/1/qr.png")
    assert resp.status_code == 200
    assert resp.mimetype == "image/png"
    assert resp.data[:8] == b"\x89PNG\r\n\x1a\n"


def test_student_marks_by_code(client):
    _login(client, "Sarah Wilson", "student", roll_no="CS2024004")

    ok = client.post("/api/attendance/code", json={"code": "qr-ds-001"})
    assert ok.status_code == 200
    assert "Data Structures" in ok.get_json()["message"]

    dup = client.post("/api/attendance/code", json={"code": "QR-DS-001"})
    assert dup.status_code == 409

    invalid = client.post("/api/attendance/code", json={"code": "QR-NOPE"})
    assert invalid.status_code == 404
    assert invalid.get_json()["message"] == "Invalid session code"

    dash = client.get("/api/student/dashboard").get_json()["dashboard"]
    assert dash["attended"] == 2
    assert dash["attendance_rate"] == 67


def test_student_scan_until_nothing_left(client):
    _login(client, "Sarah Wilson", "student", roll_no="CS2024004")

    assert client.post("/api/attendance/scan").status_code == 200
    assert client.post("/api/attendance/scan").status_code == 200
    resp = client.post("/api/attendance/scan")
    assert resp.status_code == 409

    dash = client.get("/api/student/dashboard").get_json()["dashboard"]
    assert dash["attendance_rate"] == 100


def test_student_event_flow(client):
    _login(client, "Jane Smith", "student", roll_no="CS2024002")

    assert client.post("/api/events/2/register").status_code == 200
    assert client.post("/api/events/2/register").status_code == 409
    assert client.post("/api/events/2/scan").status_code == 200
    assert client.post("/api/events/checkin/code", json={"code": "qr-cult-2025"}).status_code == 409
    assert client.post("/api/events/checkin/code", json={"code": "QR-HACK-2025"}).status_code == 200

    dash = client.get("/api/student/dashboard").get_json()["dashboard"]
    assert {c["event_id"] for c in dash["checked_in"]} == {"1", "2", "3"}


def test_organizer_creates_event_and_checks_in(client):
    _login(client, "Mike Johnson", "organizer")

    resp = client.post("/api/events", json={"name": "Quiz Night", "date": "2025-12-05", "venue": "Library"})
    assert resp.status_code == 201
    event = resp.get_json()["event"]

    url = f"/api/events/{event['id']}/checkins"
    assert client.post(url, json={"roll_no": "CS2024003", "name": "Mike Johnson"}).status_code == 200
    assert client.post(url, json={"roll_no": "CS2024003", "name": "Mike Johnson"}).status_code == 409

    checkins = client.get(url).get_json()["checkins"]
    assert len(checkins) == 1

    dash = client.get("/api/organizer/dashboard").get_json()["dashboard"]
    assert dash["events"][0]["registrations"] == ["CS2024003"]
    assert dash["events"][0]["checkin_rate"] == 100


def test_admin_dashboard_and_export(client):
    _login(client, "Root", "admin")

    dash = client.get("/api/admin/dashboard").get_json()["dashboard"]
    assert dash["total_attendance"] == 135

    resp = client.get("/api/admin/export/events.csv")
    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert resp.data.decode("utf-8-sig").splitlines()[0] == "id,name,organizer,date,participants"

    assert client.get("/api/admin/export/payroll.csv").status_code == 404


def test_non_text_roll_no_or_name_is_bad_request(client):
    _login(client, "Jane Smith", "teacher")

    resp = client.post("/api/sessions/1/attendance", json={"roll_no": 123, "name": "Amy"})
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False

    resp = client.post("/api/sessions/1/attendance", json={"roll_no": "CS2024007", "name": 42})
    assert resp.status_code == 400

    attendees = client.get("/api/sessions/1/attendees").get_json()["attendees"]
    assert len(attendees) == 3


def test_login_with_non_text_fields_is_bad_request(client):
    assert client.post("/login", json={"name": 42, "role": "student"}).status_code == 400
    assert client.post("/login", json={"name": "Amy", "role": 5}).status_code == 400
    assert client.post("/login", json={"name": "Amy", "role": "student", "roll_no": 7}).status_code == 400


def test_padded_code_is_invalid(client):
    _login(client, "Sarah Wilson", "student", roll_no="CS2024004")

    resp = client.post("/api/attendance/code", json={"code": " qr-ds-001 "})
    assert resp.status_code == 404
    assert resp.get_json()["message"] == "Invalid session code"

    resp = client.post("/api/events/checkin/code", json={"code": "QR-HACK-2025 "})
    assert resp.status_code == 404
    assert resp.get_json()["message"] == "Invalid event code"
