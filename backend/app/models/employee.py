"""Employee record models."""

from __future__ import annotations

from pydantic import BaseModel


class Employee(BaseModel):
    """A stored employee record, shaped exactly as persisted under ``employees``."""

    id: str
    name: str
    contact: str
    email: str = ""


class EmployeeInput(BaseModel):
    """Form payload for creating or replacing an employee."""

    id: str
    name: str
    contact: str
    email: str | None = ""


class EmployeeUpdate(BaseModel):
    """Form payload for an edit; the id comes from the path and cannot change."""

    name: str
    contact: str
    email: str | None = ""


class EmployeeFilter(BaseModel):
    """Independent substring criteria, ANDed together. ``None`` or ``""`` matches all."""

    id: str | None = None
    name: str | None = None
    contact: str | None = None
    email: str | None = None


class EmployeeCount(BaseModel):
    count: int


class LiveSearchResult(BaseModel):
    criteria: EmployeeFilter
    employees: list[Employee]
    count: int
