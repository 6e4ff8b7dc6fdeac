from __future__ import annotations

from flask import Flask, send_file

from ..common.http import api_endpoint, json_result, request_data, require_user, simulate_scan_delay
from ..common.qr_image import render_qr_png
from ..core.enums import CheckinMethod, Role
from ..container import Container
from .model import NewSession


def register(app: Flask, container: Container) -> None:
    attendance = container.attendance_service
    dashboards = container.dashboard_service

    # Teacher
    @app.route("/api/sessions", methods=["POST"], endpoint="create_session")
    @api_endpoint
    def create_session():
        require_user(Role.TEACHER)
        data = request_data()
        session = attendance.create_session(
            NewSession(
                topic=data.get("topic", ""),
                date=data.get("date", ""),
                time=data.get("time", ""),
                room=data.get("room", ""),
                duration=data.get("duration", ""),
            )
        )
        return json_result(True, "Session created and QR generated", 201, session=dashboards.session_row(session))

    @app.route("/api/sessions/<session_id>/attendees", methods=["GET"], endpoint="session_attendees")
    @api_endpoint
    def session_attendees(session_id: str):
        require_user(Role.TEACHER)
        session = attendance.get_session(session_id)
        rows = [dashboards.attendance_row(r, session) for r in attendance.get_session_attendees(session_id)]
        return json_result(True, session=dashboards.session_row(session), attendees=rows)

    @app.route("/api/sessions/<session_id>/attendance", methods=["POST"], endpoint="add_attendance")
    @api_endpoint
    def add_attendance(session_id: str):
        require_user(Role.TEACHER)
        data = request_data()
        name = data.get("name", "")
        if not attendance.mark_attendance(session_id, data.get("roll_no", ""), name):
            return json_result(False, "Attendance already marked for this student", 409)
        return json_result(True, f"Attendance recorded for {name.strip()}", method=CheckinMethod.MANUAL.value)

    @app.route("/api/sessions/<session_id>/qr.png", methods=["GET"], endpoint="session_qr")
    @api_endpoint
    def session_qr(session_id: str):
        require_user(Role.TEACHER)
        session = attendance.get_session(session_id)
        return send_file(render_qr_png(session.qr_code), mimetype="image/png")

    # Student
    @app.route("/api/attendance/code", methods=["POST"], endpoint="attendance_by_code")
    @api_endpoint
    def attendance_by_code():
        user = require_user(Role.STUDENT)
        session, ok = attendance.mark_attendance_by_code(request_data().get("code", ""), user.roll_no, user.name)
        if not ok:
            return json_result(False, "Attendance already marked for this session", 409)
        return json_result(True, f"Attendance marked for {session.topic}", method=CheckinMethod.CODE.value)

    @app.route("/api/attendance/scan", methods=["POST"], endpoint="attendance_scan")
    @api_endpoint
    def attendance_scan():
        user = require_user(Role.STUDENT)
        simulate_scan_delay()
        session = attendance.simulate_scan(user.roll_no, user.name)
        if not session:
            return json_result(False, "No active sessions available or already marked", 409)
        return json_result(
            True,
            f"Attendance marked for {session.topic}",
            method=CheckinMethod.SCAN.value,
            session_id=session.session_id,
        )
