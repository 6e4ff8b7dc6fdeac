from __future__ import annotations

from flask import Flask, session

from ..common.http import api_endpoint, json_result, request_data, require_user
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    @api_endpoint
    def login():
        data = request_data()
        user = container.login_service.login(
            data.get("name", ""),
            data.get("role", ""),
            roll_no=data.get("roll_no"),
            class_name=data.get("class_name"),
        )

        session.clear()
        session.update(user.to_session())
        return json_result(True, f"Welcome, {user.name}", user=user.to_session(), dashboard=user.role.value)

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return json_result(True, "Logged out")

    @app.route("/me", methods=["GET"], endpoint="me")
    @api_endpoint
    def me():
        user = require_user()
        return json_result(True, user=user.to_session())
