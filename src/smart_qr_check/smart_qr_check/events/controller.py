from __future__ import annotations

from flask import Flask, send_file

from ..common.http import api_endpoint, json_result, request_data, require_user, simulate_scan_delay
from ..common.qr_image import render_qr_png
from ..core.enums import CheckinMethod, Role
from ..container import Container
from .model import NewEvent


def register(app: Flask, container: Container) -> None:
    events = container.event_service
    dashboards = container.dashboard_service

    # Organizer
    @app.route("/api/events", methods=["POST"], endpoint="create_event")
    @api_endpoint
    def create_event():
        require_user(Role.ORGANIZER)
        data = request_data()
        event = events.create_event(
            NewEvent(
                name=data.get("name", ""),
                date=data.get("date", ""),
                venue=data.get("venue", ""),
                description=data.get("description", ""),
            )
        )
        return json_result(True, "Event created and QR generated", 201, event=dashboards.event_row(event))

    @app.route("/api/events/<event_id>/checkins", methods=["GET"], endpoint="event_checkins")
    @api_endpoint
    def event_checkins(event_id: str):
        require_user(Role.ORGANIZER)
        event = events.get_event(event_id)
        rows = [dashboards.checkin_row(c, event) for c in events.get_event_checkins(event_id)]
        return json_result(True, event=dashboards.event_row(event), checkins=rows)

    @app.route("/api/events/<event_id>/checkins", methods=["POST"], endpoint="add_event_checkin")
    @api_endpoint
    def add_event_checkin(event_id: str):
        require_user(Role.ORGANIZER)
        data = request_data()
        name = data.get("name", "")
        if not events.checkin_to_event(event_id, data.get("roll_no", ""), name):
            return json_result(False, "Already checked in for this event", 409)
        return json_result(True, f"Check-in recorded for {name.strip()}", method=CheckinMethod.MANUAL.value)

    @app.route("/api/events/<event_id>/qr.png", methods=["GET"], endpoint="event_qr")
    @api_endpoint
    def event_qr(event_id: str):
        require_user(Role.ORGANIZER)
        event = events.get_event(event_id)
        return send_file(render_qr_png(event.qr_code), mimetype="image/png")

    # Student
    @app.route("/api/events/<event_id>/register", methods=["POST"], endpoint="register_event")
    @api_endpoint
    def register_event(event_id: str):
        user = require_user(Role.STUDENT)
        if not events.register_for_event(event_id, user.roll_no, user.name):
            return json_result(False, "Already registered for this event", 409)
        return json_result(True, "Successfully registered for event")

    @app.route("/api/events/<event_id>/scan", methods=["POST"], endpoint="event_scan")
    @api_endpoint
    def event_scan(event_id: str):
        user = require_user(Role.STUDENT)
        event = events.get_event(event_id)
        simulate_scan_delay()
        if not events.checkin_to_event(event.event_id, user.roll_no, user.name):
            return json_result(False, "Already checked in for this event", 409)
        return json_result(True, f"Check-in successful for {event.name}", method=CheckinMethod.SCAN.value)

    @app.route("/api/events/checkin/code", methods=["POST"], endpoint="event_checkin_by_code")
    @api_endpoint
    def event_checkin_by_code():
        user = require_user(Role.STUDENT)
        event, ok = events.checkin_by_code(request_data().get("code", ""), user.roll_no, user.name)
        if not ok:
            return json_result(False, "Already checked in for this event", 409)
        return json_result(True, f"Check-in successful for {event.name}", method=CheckinMethod.CODE.value)
