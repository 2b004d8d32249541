"""Process logging setup."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once and (re)apply the requested level."""
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
