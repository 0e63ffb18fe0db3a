"""
Error types raised by the service and repository layers.

Every error carries a short machine‑readable ``code`` so that callers
(including the HTTP layer) can branch on the kind of failure without
parsing messages.
"""

from typing import Any, Optional


class UserServiceError(Exception):
    """Base class for all user management errors."""

    code: str = "user_service_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"message": self.message, "code": self.code}


class InvalidInputError(UserServiceError, ValueError):
    """A name or e‑mail does not satisfy its format rule."""

    code = "invalid_input"

    def __init__(self, field: str, value: Any, message: Optional[str] = None) -> None:
        super().__init__(message or f"Invalid {field}: {value!r}")
        self.field = field
        self.value = value

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["field"] = self.field
        return data


class DuplicateEmailError(UserServiceError):
    """The e‑mail address already belongs to a stored user."""

    code = "duplicate_email"

    def __init__(self, email: str) -> None:
        super().__init__(f"User with email {email} already exists")
        self.email = email


class UserNotFoundError(UserServiceError, LookupError):
    code = "user_not_found"

    def __init__(self, user_id: int) -> None:
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id
