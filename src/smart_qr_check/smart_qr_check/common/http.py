from __future__ import annotations

import logging
import time
from functools import wraps

from flask import current_app, jsonify, request, session

from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from ..users.model import User

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (DomainError, 400),
)


def json_result(success: bool, message: str = "", status: int = 200, **payload):
    body = {"success": success, "message": message}
    body.update(payload)
    return jsonify(body), status


def request_data() -> dict:
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def current_user() -> User | None:
    return User.from_session(session)


def require_user(*roles: Role) -> User:
    user = current_user()
    if not user:
        raise AuthenticationError("Please log in to continue")
    if roles and user.role not in roles:
        raise AuthorizationError("You do not have access to this page")
    return user


def api_endpoint(view):
    """Map domain errors to JSON responses; unexpected errors become a 500."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except DomainError as e:
            status = next(code for err, code in _STATUS_BY_ERROR if isinstance(e, err))
            return json_result(False, str(e), status)
        except Exception:
            logger.exception("Unhandled error in %s", request.path)
            return json_result(False, "Internal server error", 500)

    return wrapper


def simulate_scan_delay() -> None:
    delay = float(current_app.config.get("SCAN_DELAY_SECONDS", 0) or 0)
    if delay > 0:
        time.sleep(delay)
