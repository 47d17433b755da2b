from __future__ import annotations

from typing import List

from ..core.enums import Role, UserType
from .model import User

DEPARTMENTS = [
    "Engineering",
    "Marketing",
    "Sales",
    "HR",
    "Finance",
    "Operations",
    "Computer Science",
    "Business",
]


def default_users() -> List[User]:
    """Roster used until the users collection is first written, and after a reset."""
    return [
        User(id="1", name="John Smith", type=UserType.EMPLOYEE, department="Engineering", role=Role.ADMIN, email="john@company.com"),
        User(id="2", name="Sarah Johnson", type=UserType.EMPLOYEE, department="Marketing", role=Role.MANAGER, email="sarah@company.com"),
        User(id="3", name="Mike Wilson", type=UserType.EMPLOYEE, department="Sales", role=Role.USER, email="mike@company.com"),
        User(id="4", name="Emma Davis", type=UserType.STUDENT, department="Computer Science", role=Role.USER),
        User(id="5", name="Alex Brown", type=UserType.EMPLOYEE, department="HR", role=Role.USER, email="alex@company.com"),
        User(id="6", name="Lisa Anderson", type=UserType.STUDENT, department="Business", role=Role.USER),
    ]
