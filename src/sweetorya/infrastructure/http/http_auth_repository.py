"""HTTP implementation of AuthRepository (``/auth/login``)."""

from __future__ import annotations

from sweetorya.domain.exceptions import AuthenticationError, BackendError
from sweetorya.domain.repository.session_repository import AuthRepository
from sweetorya.infrastructure.http.api_client import ApiClient

LOGIN_FAILED_MESSAGE = "Login failed. Check your connection."


class HttpAuthRepository(AuthRepository):

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    def login(self, username: str, password: str) -> str:
        try:
            body = self._client.post("/auth/login", {"username": username, "password": password})
        except BackendError as exc:
            raise AuthenticationError(str(exc) or LOGIN_FAILED_MESSAGE) from exc
        if not isinstance(body, dict) or not body.get("token"):
            raise AuthenticationError(LOGIN_FAILED_MESSAGE)
        return str(body["token"])
