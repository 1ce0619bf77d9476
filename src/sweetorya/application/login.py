"""Application services: Login, Logout and the session guard.

The token is written only after the backend accepted the credentials.
A refused login leaves the stored session exactly as it was.
"""

from __future__ import annotations

import logging

from sweetorya.domain.exceptions import AuthenticationError, ValidationError
from sweetorya.domain.model.session import Session
from sweetorya.domain.repository.session_repository import AuthRepository, SessionRepository

logger = logging.getLogger(__name__)

NOT_LOGGED_IN_MESSAGE = "Not logged in. Run 'sweetorya login' first."


def require_session(session: Session) -> Session:
    """Guard for every command except login."""
    if not session.is_authenticated:
        raise AuthenticationError(NOT_LOGGED_IN_MESSAGE)
    return session


class LoginHandler:

    def __init__(self, auth_repo: AuthRepository, session_repo: SessionRepository) -> None:
        self._auth_repo = auth_repo
        self._session_repo = session_repo

    def handle(self, username: str, password: str) -> Session:
        if not username or not username.strip() or not password:
            raise ValidationError("Username and password are required")

        token = self._auth_repo.login(username.strip(), password)
        if not token:
            raise AuthenticationError("Login failed: the server did not return a token.")

        session = Session(token=token, username=username.strip())
        self._session_repo.save(session)
        logger.info("Logged in as %s", session.username)
        return session


class LogoutHandler:

    def __init__(self, session_repo: SessionRepository) -> None:
        self._session_repo = session_repo

    def handle(self) -> None:
        self._session_repo.clear()
        logger.info("Logged out")
