"""In-memory employee records with uniqueness and required-field checks.

The store knows nothing about persistence: callers load it from whatever the
key-value storage holds and write it back after a successful mutation.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from app.core.errors import DuplicateIdError, NotFoundError, ValidationError
from app.models.employee import Employee, EmployeeFilter

logger = logging.getLogger(__name__)

# Employee attributes a filter can constrain
_FILTER_FIELDS: tuple[str, ...] = ("id", "name", "contact", "email")


def _build_employee(id: str, name: str, contact: str, email: str | None) -> Employee:
    employee = Employee(
        id=(id or "").strip(),
        name=(name or "").strip(),
        contact=(contact or "").strip(),
        email=(email or "").strip(),
    )
    if not employee.id or not employee.name or not employee.contact:
        raise ValidationError("Please fill required fields (*)")
    return employee


def _matches(employee: Employee, criteria: EmployeeFilter) -> bool:
    for field in _FILTER_FIELDS:
        query = getattr(criteria, field)
        if not query:
            continue
        value = getattr(employee, field)
        if not value or query.lower() not in value.lower():
            return False
    return True


class EmployeeStore:
    def __init__(self, employees: Iterable[Employee] = ()) -> None:
        self._employees: list[Employee] = []
        self.load(employees)

    def load(self, employees: Iterable[Employee]) -> None:
        loaded: list[Employee] = []
        seen: set[str] = set()
        for employee in employees:
            if employee.id in seen:
                logger.warning("Skipping duplicate stored employee id=%s", employee.id)
                continue
            seen.add(employee.id)
            loaded.append(employee)
        self._employees = loaded

    def _index_of(self, employee_id: str) -> int:
        for index, employee in enumerate(self._employees):
            if employee.id == employee_id:
                return index
        return -1

    def all(self) -> list[Employee]:
        return list(self._employees)

    def count(self) -> int:
        return len(self._employees)

    def get(self, employee_id: str) -> Employee:
        index = self._index_of(employee_id)
        if index == -1:
            raise NotFoundError(f"Employee '{employee_id}' not found")
        return self._employees[index]

    def add(self, id: str, name: str, contact: str, email: str | None = "") -> Employee:
        employee = _build_employee(id, name, contact, email)
        if self._index_of(employee.id) != -1:
            raise DuplicateIdError("Employee ID already exists!")
        self._employees.append(employee)
        return employee

    def update(self, id: str, name: str, contact: str, email: str | None = "") -> Employee:
        """Replace every field of an existing record, keeping its position."""
        employee = _build_employee(id, name, contact, email)
        index = self._index_of(employee.id)
        if index == -1:
            raise NotFoundError(f"Employee '{employee.id}' not found")
        self._employees[index] = employee
        return employee

    def remove(self, employee_id: str) -> Employee:
        index = self._index_of(employee_id)
        if index == -1:
            raise NotFoundError(f"Employee '{employee_id}' not found")
        return self._employees.pop(index)

    def filter(self, criteria: EmployeeFilter | None = None) -> list[Employee]:
        if criteria is None:
            return self.all()
        return [employee for employee in self._employees if _matches(employee, criteria)]

    def quick_search(self, query: str) -> list[Employee]:
        """Single search box: any field may match. Contact is matched verbatim."""
        if not query:
            return self.all()
        needle = query.lower()
        return [
            employee
            for employee in self._employees
            if needle in employee.name.lower()
            or needle in employee.id.lower()
            or query in employee.contact
            or (employee.email and needle in employee.email.lower())
        ]
