from __future__ import annotations

import logging
from typing import Optional

from ..common.validators import optional_text, require_non_empty
from ..core.constants import DEFAULT_STUDENT_ROLL_NO
from ..core.enums import Role
from ..core.exceptions import ValidationError
from .model import User

logger = logging.getLogger(__name__)


class LoginService:
    """Use case: pick a name and a role. No credential is checked."""

    def __init__(self, *, default_roll_no: str = DEFAULT_STUDENT_ROLL_NO):
        self._default_roll_no = default_roll_no

    def login(
        self,
        name: str,
        role: str,
        *,
        roll_no: Optional[str] = None,
        class_name: Optional[str] = None,
    ) -> User:
        name = require_non_empty(name, "Name")
        try:
            parsed_role = Role(optional_text(role, "Role").lower())
        except ValueError:
            raise ValidationError("Unknown role")

        roll_no = optional_text(roll_no, "Roll number") or None
        if parsed_role == Role.STUDENT and not roll_no:
            roll_no = self._default_roll_no

        logger.info("Login name=%r role=%s", name, parsed_role.value)
        return User(name=name, role=parsed_role, roll_no=roll_no, class_name=optional_text(class_name, "Class") or None)
