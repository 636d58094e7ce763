"""
Logging setup for the CLI and host applications.
One stderr handler, format: timestamp | level | logger name | message. Level from argument, LOG_LEVEL, or INFO.
"""
from __future__ import annotations

import logging
import os
import sys


def configure_logging(level: str | int | None = None) -> None:
    """Configure the jsonenvelope logger. Safe to call more than once."""
    if level is None:
        level = os.environ.get("LOG_LEVEL") or "INFO"
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    logger = logging.getLogger("jsonenvelope")
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
