"""Abstract repositories for authentication and the stored session."""

from __future__ import annotations

from abc import ABC, abstractmethod

from sweetorya.domain.model.session import Session


class AuthRepository(ABC):

    @abstractmethod
    def login(self, username: str, password: str) -> str:
        """Exchange credentials for a bearer token.

        Raises AuthenticationError when the backend refuses them.
        """


class SessionRepository(ABC):

    @abstractmethod
    def load(self) -> Session:
        """Return the stored session, or an anonymous one."""

    @abstractmethod
    def save(self, session: Session) -> None:
        """Persist the session."""

    @abstractmethod
    def clear(self) -> None:
        """Forget the stored session."""
