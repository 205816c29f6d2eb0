"""Logging setup for command-line entry points."""

from __future__ import annotations

import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "GAMESEARCH_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging once.

    The level comes from ``level``, else the ``GAMESEARCH_LOG_LEVEL``
    environment variable, else ``INFO``.
    """
    if getattr(setup_logging, "_configured", False):
        return
    name = (level or os.environ.get(LOG_LEVEL_ENV) or "INFO").upper()
    logging.basicConfig(level=getattr(logging, name, logging.INFO), format=LOG_FORMAT)
    setup_logging._configured = True  # type: ignore[attr-defined]
