"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """Send ``pos.*`` log records to stderr at *level*."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, force=True)
