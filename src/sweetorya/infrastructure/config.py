"""Runtime settings, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

DEFAULT_API_BASE_URL = "http://localhost:5001/api"
DEFAULT_SESSION_FILE = Path.home() / ".sweetorya" / "session.json"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class Settings:
    api_base_url: str = DEFAULT_API_BASE_URL
    session_file: Path = DEFAULT_SESSION_FILE
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "WARNING"

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        return Settings(
            api_base_url=env.get("SWEETORYA_API_BASE_URL", DEFAULT_API_BASE_URL).rstrip("/"),
            session_file=Path(env.get("SWEETORYA_SESSION_FILE", str(DEFAULT_SESSION_FILE))).expanduser(),
            timeout=float(env.get("SWEETORYA_TIMEOUT", DEFAULT_TIMEOUT)),
            log_level=env.get("SWEETORYA_LOG_LEVEL", "WARNING").upper(),
        )
