"""Centralized logging configuration for the waitlist API."""

from __future__ import annotations

import logging
from logging.config import dictConfig

_LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        }
    },
    "loggers": {
        "uvicorn": {"handlers": ["console"], "level": "INFO", "propagate": False},
        "uvicorn.error": {"handlers": ["console"], "level": "INFO", "propagate": False},
        "uvicorn.access": {"handlers": ["console"], "level": "INFO", "propagate": False},
    },
}


def configure_logging(level: str = "INFO") -> None:
    """Configure application-wide logging once.

    The ``waitlist_api`` loggers carry no handler of their own and propagate
    to the root console handler.
    """

    level = level.upper()
    config = _LOGGING_CONFIG.copy()
    config["loggers"] = {
        **_LOGGING_CONFIG["loggers"],
        "waitlist_api": {"level": level},
        "waitlist_api.request": {"level": "INFO"},
    }
    config["root"] = {"level": level, "handlers": ["console"]}
    dictConfig(config)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger within the waitlist_api hierarchy."""

    full_name = f"waitlist_api.{name}" if name else "waitlist_api"
    return logging.getLogger(full_name)
