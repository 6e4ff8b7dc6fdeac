from __future__ import annotations

from dataclasses import asdict

from flask import Flask

from ..common.http import api_endpoint, json_result, require_user
from ..core.enums import Role
from ..container import Container


def register(app: Flask, container: Container) -> None:
    dashboards = container.dashboard_service

    @app.route("/api/teacher/dashboard", methods=["GET"], endpoint="teacher_dashboard")
    @api_endpoint
    def teacher_dashboard():
        user = require_user(Role.TEACHER)
        return json_result(True, user=user.to_session(), dashboard=asdict(dashboards.teacher()))

    @app.route("/api/student/dashboard", methods=["GET"], endpoint="student_dashboard")
    @api_endpoint
    def student_dashboard():
        user = require_user(Role.STUDENT)
        return json_result(True, user=user.to_session(), dashboard=asdict(dashboards.student(user.roll_no)))

    @app.route("/api/organizer/dashboard", methods=["GET"], endpoint="organizer_dashboard")
    @api_endpoint
    def organizer_dashboard():
        user = require_user(Role.ORGANIZER)
        return json_result(True, user=user.to_session(), dashboard=asdict(dashboards.organizer()))
