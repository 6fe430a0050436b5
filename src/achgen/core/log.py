"""Logging setup shared by the API and scripts."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process.

    Modules log through ``logging.getLogger(__name__)``. Bank data (names,
    routing and account numbers) must never reach a log record.
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
