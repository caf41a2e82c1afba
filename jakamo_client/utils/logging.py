"""Logging helpers for the Jakamo client and its entry points."""

from __future__ import annotations

import os
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Union

from dotenv import load_dotenv

LOGGER_NAMESPACE = "jakamo_client"
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"


def get_logger(area: str) -> logging.Logger:
    """Return the logger for one area of the client, e.g. ``get_logger("http")``."""
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{area}")


def setup_logging() -> None:
    """Configure logging for an entry point from environment variables.

    JAKAMO_LOG_LEVEL sets the level of the ``jakamo_client`` loggers only,
    so a verbose client does not turn on DEBUG for httpx and friends.
    JAKAMO_LOG_FILE adds a rotating file handler for the same loggers.
    """
    if not load_dotenv():
        env_path = Path(__file__).resolve().parent.parent.parent / ".env"
        if env_path.exists():
            load_dotenv(env_path, override=False)

    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)

    level_name = os.getenv("JAKAMO_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    namespace = logging.getLogger(LOGGER_NAMESPACE)
    namespace.setLevel(level)

    log_file = os.getenv("JAKAMO_LOG_FILE")
    if not log_file:
        return
    try:
        handler = RotatingFileHandler(log_file, maxBytes=5_000_000, backupCount=3)
    except OSError as e:
        namespace.warning("Could not open log file %s: %s", log_file, e)
        return
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    namespace.addHandler(handler)


def truncate(payload: Union[str, bytes, None], max_len: int = 2000) -> str:
    """Shorten an XML payload for a log line, decoding bytes as UTF-8."""
    if payload is None:
        return ""
    if isinstance(payload, bytes):
        payload = payload.decode("utf-8", errors="replace")
    if len(payload) > max_len:
        return f"{payload[:max_len]}... [{len(payload) - max_len} more chars]"
    return payload
