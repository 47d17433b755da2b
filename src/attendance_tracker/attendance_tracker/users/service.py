from __future__ import annotations

import logging
from typing import Callable, List, Optional

from ..common.ids import new_id
from ..common.validators import optional_text, require_choice, require_non_empty
from ..core.enums import Role, UserType
from ..core.exceptions import ValidationError
from ..storage.collection import Collection
from .model import User

logger = logging.getLogger(__name__)


class UserService:
    """Use case: manage the roster (admin screens, bulk import)."""

    def __init__(self, users: Collection[User], *, id_factory: Callable[[], str] = new_id):
        self._users = users
        self._new_id = id_factory

    def get_users(self) -> List[User]:
        return self._users.load()

    def get_user(self, user_id: str) -> Optional[User]:
        return next((u for u in self._users.load() if u.id == str(user_id)), None)

    def add_user(self, user: User) -> bool:
        """Append a user; an existing id is silently ignored (returns False)."""
        users = self._users.load()
        if any(u.id == user.id for u in users):
            logger.debug("User %s already exists; ignoring add", user.id)
            return False
        users.append(user)
        self._users.save(users)
        logger.info("Added user %s (%s)", user.id, user.name)
        return True

    def create_user(
        self,
        *,
        name: str,
        user_type: str,
        department: str,
        role: Optional[str] = None,
        email: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> User:
        """Validate form input, then add a user under a fresh id."""
        user = User(
            id=self._new_id(),
            name=require_non_empty(name, "Name"),
            type=require_choice(user_type, UserType, "Type"),
            department=require_non_empty(department, "Department"),
            role=require_choice(role, Role, "Role") if optional_text(role) else Role.USER,
            email=optional_text(email),
            phone=optional_text(phone),
        )
        self.add_user(user)
        return user

    def bulk_import(self, text: str) -> List[User]:
        """Import ``name,type,department[,role]`` lines; bad lines are skipped."""
        created: List[User] = []
        for lineno, line in enumerate((text or "").splitlines(), start=1):
            if not line.strip():
                continue
            parts = [p.strip() for p in line.split(",")]
            parts += [""] * (4 - len(parts))
            name, user_type, department, role = parts[:4]
            try:
                created.append(self.create_user(name=name, user_type=user_type, department=department, role=role))
            except ValidationError as e:
                logger.warning("Skipping bulk import line %d: %s", lineno, e)
        logger.info("Bulk import created %d users", len(created))
        return created

    def delete_user(self, user_id: str) -> bool:
        """Remove a user. Their records and alerts are left in place."""
        users = self._users.load()
        remaining = [u for u in users if u.id != str(user_id)]
        if len(remaining) == len(users):
            return False
        self._users.save(remaining)
        logger.info("Deleted user %s", user_id)
        return True

    def departments(self) -> List[str]:
        return sorted({u.department for u in self._users.load() if u.department})

    def reset(self) -> None:
        self._users.clear()
