"""Logging setup for the command line."""

from __future__ import annotations

from logging.config import dictConfig

from .config import LOG_LEVEL


def configure_logging(level: str = LOG_LEVEL) -> None:
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "plain": {
                    "format": "%(asctime)s %(levelname)-7s %(name)s: %(message)s",
                    "datefmt": "%H:%M:%S",
                }
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "plain",
                    "stream": "ext://sys.stderr",
                }
            },
            "root": {"handlers": ["default"], "level": level.upper()},
            "loggers": {
                # watchdog is chatty at DEBUG
                "watchdog": {"level": "WARNING"},
            },
        }
    )
