from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.enums import Role, UserType


@dataclass(frozen=True)
class User:
    """Roster entry.

    Note: plain data object, replaced as a whole rather than edited in place.
    """

    id: str
    name: str
    type: UserType
    department: str
    role: Role = Role.USER
    email: Optional[str] = None
    phone: Optional[str] = None

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "department": self.department,
            "role": self.role.value,
        }
        if self.email:
            data["email"] = self.email
        if self.phone:
            data["phone"] = self.phone
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "User":
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            type=UserType(data.get("type", UserType.EMPLOYEE.value)),
            department=str(data.get("department", "")),
            role=Role(data.get("role", Role.USER.value)),
            email=data.get("email") or None,
            phone=data.get("phone") or None,
        )
