from __future__ import annotations

from dataclasses import asdict

from flask import Flask

from ..common.http import api_endpoint, json_result, require_user
from ..core.enums import Role
from ..container import Container


def register(app: Flask, container: Container) -> None:
    admin = container.admin_service

    @app.route("/api/admin/dashboard", methods=["GET"], endpoint="admin_dashboard")
    @api_endpoint
    def admin_dashboard():
        user = require_user(Role.ADMIN)
        return json_result(True, user=user.to_session(), dashboard=asdict(admin.overview()))

    @app.route("/api/admin/export/<kind>.csv", methods=["GET"], endpoint="admin_export")
    @api_endpoint
    def admin_export(kind: str):
        require_user(Role.ADMIN)
        csv_bytes = admin.export_csv(kind)
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={kind}.csv"},
        )
