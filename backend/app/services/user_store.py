"""Registered accounts and credential checks.

The built-in admin account is seeded into the collection rather than handled
as a special case, so there is exactly one authentication path. Seeded
accounts sit ahead of stored ones and are never written back to storage.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from datetime import datetime, timezone

from app.core.errors import DuplicateEmailError, InvalidCredentialsError, WeakPasswordError
from app.models.auth import User

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"


def _now_iso() -> str:
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


class UserStore:
    def __init__(self, users: Iterable[User] = (), min_password_length: int = 6) -> None:
        self.min_password_length = min_password_length
        self._users: list[User] = []
        self.load(users)

    def load(self, users: Iterable[User]) -> None:
        builtin = [user for user in self._users if user.builtin]
        self._users = builtin + [user for user in users if not user.builtin]

    def all(self) -> list[User]:
        return list(self._users)

    def persistable(self) -> list[User]:
        return [user for user in self._users if not user.builtin]

    def find_by_email(self, email: str) -> User | None:
        for user in self._users:
            if user.email == email:
                return user
        return None

    def _next_id(self) -> str:
        taken = {user.id for user in self._users}
        stamp = int(time.time() * 1000)
        while str(stamp) in taken:
            stamp += 1
        return str(stamp)

    def seed_admin(self, email: str, password: str, full_name: str = "Admin") -> User:
        existing = self.find_by_email(email)
        if existing is not None and existing.builtin:
            return existing

        admin = User(
            id=self._next_id(),
            full_name=full_name,
            email=email,
            password=password,
            role=ADMIN_ROLE,
            created_at=_now_iso(),
            builtin=True,
        )
        if existing is not None:
            logger.warning("Stored account %s is shadowed by the built-in admin", email)
        self._users.insert(0, admin)
        return admin

    def register(self, full_name: str, email: str, password: str, role: str) -> User:
        if len(password) < self.min_password_length:
            raise WeakPasswordError(
                f"Password must be at least {self.min_password_length} characters"
            )
        if self.find_by_email(email) is not None:
            raise DuplicateEmailError("Email already registered!")

        user = User(
            id=self._next_id(),
            full_name=full_name,
            email=email,
            password=password,
            role=role,
            created_at=_now_iso(),
        )
        self._users.append(user)
        return user

    def authenticate(self, email: str, password: str) -> User:
        for user in self._users:
            if user.email == email and user.password == password:
                return user
        raise InvalidCredentialsError("Invalid credentials!")
