from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Who is using the dashboard. There is no account behind it."""

    name: str
    role: Role
    roll_no: Optional[str] = None
    class_name: Optional[str] = None

    def to_session(self) -> dict:
        return {
            "name": self.name,
            "role": self.role.value,
            "roll_no": self.roll_no,
            "class_name": self.class_name,
        }

    @classmethod
    def from_session(cls, data) -> Optional["User"]:
        if not data.get("name") or not data.get("role"):
            return None
        return cls(
            name=data["name"],
            role=Role(data["role"]),
            roll_no=data.get("roll_no"),
            class_name=data.get("class_name"),
        )
