"""Logging setup for workday-progress.

All log records go to stderr so stdout carries only the report. The console
format is human-readable; ``--json-logs`` switches it to one JSON object per
record for collection by other tools.
"""

import logging
import logging.config
from typing import Any

PACKAGE_LOGGER = "workday_progress"
DEFAULT_LEVEL = "WARNING"

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def build_logging_config(json_output: bool = False, log_level: str = DEFAULT_LEVEL) -> dict[str, Any]:
    """Return a ``dictConfig`` mapping with a single stderr handler."""
    level = (log_level or DEFAULT_LEVEL).upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {"format": CONSOLE_FORMAT, "datefmt": "%Y-%m-%d %H:%M:%S"},
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "format": JSON_FORMAT,
                "datefmt": "%Y-%m-%dT%H:%M:%S%z",
            },
        },
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "json" if json_output else "console",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            PACKAGE_LOGGER: {"level": level, "handlers": ["stderr"], "propagate": False},
        },
        "root": {"level": DEFAULT_LEVEL, "handlers": ["stderr"]},
    }


def setup_logging(json_output: bool = False, log_level: str = DEFAULT_LEVEL) -> None:
    """Configure logging for the application.

    Args:
        json_output: If True, emit JSON records instead of the console format
        log_level: Logging level name, case-insensitive
    """
    logging.config.dictConfig(build_logging_config(json_output, log_level))


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
