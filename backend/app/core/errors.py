"""Error taxonomy for employee and account operations.

Every store checks its invariants before touching its collection, so a raised
error always means nothing changed. The HTTP layer turns these into responses
using ``status_code``; nothing below the API knows about HTTP otherwise.
"""

from __future__ import annotations


class RecordError(Exception):
    """Base class for all recoverable record and account failures."""

    status_code: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(RecordError):
    """A required field is missing or blank."""

    status_code = 400


class WeakPasswordError(RecordError):
    status_code = 400


class DuplicateIdError(RecordError):
    status_code = 409


class DuplicateEmailError(RecordError):
    status_code = 409


class NotFoundError(RecordError):
    status_code = 404


class InvalidCredentialsError(RecordError):
    status_code = 401
