"""
Domain errors raised by the services and rendered as JSON by the app.

Every error carries a client-safe ``message`` and the HTTP ``status_code``
it maps to.  Handlers are registered in ``api.middleware``.
"""

from __future__ import annotations


class APIError(Exception):
    """Base class for errors that end a single request."""

    status_code: int = 500
    headers: dict[str, str] | None = None

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class BadRequest(APIError):
    status_code = 400


class Unauthorized(APIError):
    status_code = 401
    headers = {"WWW-Authenticate": "Bearer"}


class InvalidCredentials(Unauthorized):
    def __init__(self, message: str = "Invalid email or password") -> None:
        super().__init__(message)


class NotFound(APIError):
    status_code = 404


class DuplicateEmail(APIError):
    # The tutorial reports registration conflicts as a plain bad request.
    status_code = 400

    def __init__(self, message: str = "Email already registered") -> None:
        super().__init__(message)
