"""Thin HTTP wrapper around the Sweetorya backend.

Applies the base URL, JSON content type and bearer token, and turns every
failure into a DomainException subclass:

- transport problems become ``NetworkError``
- 404 becomes ``EntityNotFoundError``
- 401 / 403 become ``AuthenticationError``
- any other error status becomes ``BackendError``

The server's ``msg`` field is passed through verbatim when present.
Nothing is retried.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from sweetorya.domain.exceptions import (
    AuthenticationError,
    BackendError,
    EntityNotFoundError,
    NetworkError,
)

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "Cannot reach the server. Check your connection and try again."


def error_message(response: httpx.Response) -> str:
    """Return the server-provided message, or a generic fallback."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        for key in ("msg", "message", "error"):
            if body.get(key):
                return str(body[key])
    return f"Request failed ({response.status_code})."


class ApiClient:

    def __init__(
        self,
        base_url: str,
        token: str = "",
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.Client(
            base_url=base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    def __enter__(self) -> ApiClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    # --- Requests -------------------------------------------------------------

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> httpx.Response:
        try:
            response = self._client.request(method, path, params=params, json=json)
        except httpx.TransportError as exc:
            logger.error("%s %s failed: %s", method, path, exc)
            raise NetworkError(NETWORK_ERROR_MESSAGE) from exc

        logger.debug("%s %s -> %d", method, path, response.status_code)
        if response.is_error:
            message = error_message(response)
            logger.warning("%s %s rejected (%d): %s", method, path, response.status_code, message)
            if response.status_code == 404:
                raise EntityNotFoundError(message)
            if response.status_code in (401, 403):
                raise AuthenticationError(message)
            raise BackendError(message, status_code=response.status_code)
        return response

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self.request("GET", path, params=params).json()

    def post(self, path: str, payload: Any) -> Any:
        return _json_or_none(self.request("POST", path, json=payload))

    def put(self, path: str, payload: Any) -> Any:
        return _json_or_none(self.request("PUT", path, json=payload))

    def patch(self, path: str, payload: Any) -> Any:
        return _json_or_none(self.request("PATCH", path, json=payload))

    def delete(self, path: str) -> None:
        self.request("DELETE", path)

    def get_bytes(self, path: str) -> bytes:
        return self.request("GET", path).content


def _json_or_none(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None
