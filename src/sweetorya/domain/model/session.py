"""Session — the logged-in state of the admin client."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Session:
    """Opaque bearer token plus the username it was issued for.

    An empty token means "logged out".  Passed explicitly to whatever needs
    it rather than read from storage at each call site.
    """

    token: str = ""
    username: str = ""

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    @property
    def current_user(self) -> str | None:
        if not self.is_authenticated:
            return None
        return self.username or None

    @staticmethod
    def anonymous() -> Session:
        return Session()
