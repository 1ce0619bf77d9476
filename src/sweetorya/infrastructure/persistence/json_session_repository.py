"""JSON-file-backed implementation of SessionRepository.

Holds the single piece of durable client state: the bearer token and the
username it belongs to.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from sweetorya.domain.model.session import Session
from sweetorya.domain.repository.session_repository import SessionRepository

logger = logging.getLogger(__name__)


class JsonSessionRepository(SessionRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- SessionRepository interface ------------------------------------------

    def load(self) -> Session:
        if not self._file_path.exists():
            return Session.anonymous()
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable session file %s: %s", self._file_path, exc)
            return Session.anonymous()
        return self._to_domain(raw)

    def save(self, session: Session) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(
            json.dumps(self._to_raw(session), indent=2) + "\n", encoding="utf-8"
        )
        self._file_path.chmod(0o600)

    def clear(self) -> None:
        self._file_path.unlink(missing_ok=True)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(session: Session) -> dict:
        return {"token": session.token, "username": session.username}

    @staticmethod
    def _to_domain(raw: dict) -> Session:
        if not isinstance(raw, dict):
            return Session.anonymous()
        return Session(token=raw.get("token") or "", username=raw.get("username") or "")
