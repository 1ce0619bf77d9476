"""Logging setup for the command-line entry point.

Modules only ever call ``logging.getLogger(__name__)``; handlers and
levels are decided here, once, at startup.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING), format=LOG_FORMAT)
    # httpx logs every request at INFO; keep that for --verbose only.
    if logging.getLogger().level > logging.DEBUG:
        logging.getLogger("httpx").setLevel(logging.WARNING)
