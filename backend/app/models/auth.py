"""Account and session models.

Field aliases keep the persisted JSON in the same camelCase shape the stored
``users`` and ``currentUser`` values have always used.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class User(_CamelModel):
    id: str
    full_name: str
    email: str
    password: str
    role: str
    created_at: str
    builtin: bool = Field(default=False, exclude=True)

    def to_session(self) -> SessionUser:
        return SessionUser(email=self.email, role=self.role, full_name=self.full_name)


class SessionUser(_CamelModel):
    """Public identity held by the current session."""

    email: str
    role: str
    full_name: str


class RegisterRequest(_CamelModel):
    full_name: str
    email: str
    password: str
    role: str = "user"


class LoginRequest(BaseModel):
    email: str
    password: str


class Preferences(_CamelModel):
    dark_mode: bool = False
