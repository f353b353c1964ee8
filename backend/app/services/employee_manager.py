"""Session-scoped owner of employees, accounts, the current session and theme.

One manager is built per application start and handed to the API through a
dependency. The stores stay storage-free; this layer decides what to write
and writes it only after a mutation succeeded.
"""

from __future__ import annotations

import logging

from pydantic import TypeAdapter
from pydantic import ValidationError as SchemaError

from app.core.config import Settings
from app.core.errors import InvalidCredentialsError
from app.core.storage import (
    CURRENT_USER_KEY,
    DARK_MODE_KEY,
    EMPLOYEES_KEY,
    USERS_KEY,
    KeyValueStorage,
    create_storage,
)
from app.models.auth import SessionUser, User
from app.models.employee import Employee, EmployeeFilter
from app.services.employee_store import EmployeeStore
from app.services.user_store import UserStore

logger = logging.getLogger(__name__)

_employees_adapter = TypeAdapter(list[Employee])
_users_adapter = TypeAdapter(list[User])


class EmployeeManager:
    def __init__(self, storage: KeyValueStorage, settings: Settings) -> None:
        self.storage = storage
        self.settings = settings
        self.employees = EmployeeStore(self._load(EMPLOYEES_KEY, _employees_adapter, []))
        self.users = UserStore(min_password_length=settings.MIN_PASSWORD_LENGTH)
        self.users.seed_admin(
            settings.ADMIN_EMAIL,
            settings.ADMIN_PASSWORD,
            settings.ADMIN_FULL_NAME,
        )
        self.users.load(self._load(USERS_KEY, _users_adapter, []))
        self.current_user: SessionUser | None = self._load(
            CURRENT_USER_KEY, TypeAdapter(SessionUser), None
        )
        self.dark_mode: bool = storage.get(DARK_MODE_KEY) == "true"

        logger.info(
            "EmployeeManager ready (employees=%s, users=%s, session=%s)",
            self.employees.count(),
            len(self.users.persistable()),
            self.current_user.email if self.current_user else None,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> EmployeeManager:
        return cls(create_storage(settings.STORAGE_PATH), settings)

    def _load(self, key: str, adapter: TypeAdapter, default):
        raw = self.storage.get(key)
        if raw is None:
            return default
        try:
            return adapter.validate_json(raw)
        except SchemaError:
            logger.warning("Ignoring unreadable stored value for key=%s", key)
            return default

    def _save_employees(self, previous: list[Employee]) -> None:
        payload = _employees_adapter.dump_json(self.employees.all()).decode()
        try:
            self.storage.set(EMPLOYEES_KEY, payload)
        except Exception:
            self.employees.load(previous)
            raise

    def _save_users(self, previous: list[User]) -> None:
        payload = _users_adapter.dump_json(self.users.persistable(), by_alias=True).decode()
        try:
            self.storage.set(USERS_KEY, payload)
        except Exception:
            self.users.load(previous)
            raise

    # Accounts

    def register(self, full_name: str, email: str, password: str, role: str) -> User:
        previous = self.users.persistable()
        user = self.users.register(full_name.strip(), email.strip(), password, role)
        self._save_users(previous)
        logger.info("Registered account %s (role=%s)", user.email, user.role)
        return user

    def login(self, email: str, password: str) -> SessionUser:
        try:
            user = self.users.authenticate(email.strip(), password)
        except InvalidCredentialsError:
            logger.warning("Rejected login for %s", email)
            raise
        session = user.to_session()
        self.storage.set(CURRENT_USER_KEY, session.model_dump_json(by_alias=True))
        self.current_user = session
        logger.info("Login for %s", user.email)
        return self.current_user

    def logout(self) -> None:
        if self.current_user is not None:
            logger.info("Logout for %s", self.current_user.email)
        self.storage.remove(CURRENT_USER_KEY)
        self.current_user = None

    # Employees

    def add_employee(self, id: str, name: str, contact: str, email: str | None = "") -> Employee:
        previous = self.employees.all()
        employee = self.employees.add(id, name, contact, email)
        self._save_employees(previous)
        logger.info("Added employee %s", employee.id)
        return employee

    def update_employee(self, id: str, name: str, contact: str, email: str | None = "") -> Employee:
        previous = self.employees.all()
        employee = self.employees.update(id, name, contact, email)
        self._save_employees(previous)
        logger.info("Updated employee %s", employee.id)
        return employee

    def delete_employee(self, employee_id: str) -> Employee:
        previous = self.employees.all()
        employee = self.employees.remove(employee_id)
        self._save_employees(previous)
        logger.info("Deleted employee %s", employee.id)
        return employee

    def get_employee(self, employee_id: str) -> Employee:
        return self.employees.get(employee_id)

    def filter_employees(self, criteria: EmployeeFilter | None = None) -> list[Employee]:
        return self.employees.filter(criteria)

    def quick_search(self, query: str) -> list[Employee]:
        return self.employees.quick_search(query)

    def employee_count(self) -> int:
        return self.employees.count()

    # Preferences

    def toggle_theme(self) -> bool:
        dark_mode = not self.dark_mode
        self.storage.set(DARK_MODE_KEY, "true" if dark_mode else "false")
        self.dark_mode = dark_mode
        return self.dark_mode
