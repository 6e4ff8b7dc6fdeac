from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .admin.controller import register as register_admin
from .attendance.controller import register as register_attendance
from .container import build_container
from .dashboards.controller import register as register_dashboards
from .events.controller import register as register_events
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["SCAN_DELAY_SECONDS"] = float(getattr(settings, "SCAN_DELAY_SECONDS", 0))

    seed_fixtures = bool(getattr(settings, "SEED_FIXTURES", True))
    capacity = int(getattr(settings, "SESSION_CAPACITY", 50))
    container = build_container(seed_fixtures=seed_fixtures, capacity=capacity)
    app.extensions["smart_qr_check"] = container

    if app.config["DEBUG"]:
        logger.info(
            "[smart-qr-check] settings=%s seeded=%s capacity=%d sessions=%d events=%d",
            settings_module,
            seed_fixtures,
            capacity,
            len(container.attendance_service.list_sessions()),
            len(container.event_service.list_events()),
        )

    register_users(app, container)
    register_attendance(app, container)
    register_events(app, container)
    register_dashboards(app, container)
    register_admin(app, container)

    return app
