"""Domain-level exceptions.

Every failure the client can hit is a subclass of DomainException so the
CLI layer can catch them uniformly and display user-friendly messages.

Three sources of failure exist:
- local input validation (``ValidationError``), raised before any network call
- backend-reported errors (``BackendError`` / ``EntityNotFoundError``)
- transport failures (``NetworkError``)
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A required field is missing or an input is malformed."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class AuthenticationError(DomainException):
    """Login was refused or no session is present."""


class BackendError(DomainException):
    """The backend answered with an error status.

    ``message`` is the server-provided ``msg`` when there was one,
    otherwise a generic fallback.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NetworkError(DomainException):
    """The backend could not be reached."""
