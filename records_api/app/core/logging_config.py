"""
Logging setup for the service.

``build_logging_config`` describes the handlers as a ``dictConfig``
dictionary: one stream handler on stderr, plus a UTF-8 file handler
when ``LOG_FILE`` is set.  ``setup_logging`` applies it to the root
logger unless something (uvicorn, pytest, an earlier ``create_app``)
has attached handlers already, in which case that setup is left alone.
"""

import logging
import logging.config
from pathlib import Path
from typing import Any, Dict, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
VALID_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def build_logging_config(level: str = "INFO", logfile: Optional[str] = None) -> Dict[str, Any]:
    """Return a ``logging.config.dictConfig`` dictionary.

    ``level`` is case insensitive; names outside ``VALID_LEVELS`` mean
    ``INFO``.  A relative ``logfile`` is resolved against the current
    working directory.
    """
    level = level.upper() if level and level.upper() in VALID_LEVELS else "INFO"
    handlers: Dict[str, Dict[str, Any]] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
        },
    }
    if logfile:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "formatter": "default",
            "filename": str(Path(logfile).resolve()),
            "encoding": "utf-8",
        }
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": LOG_FORMAT, "datefmt": DATE_FORMAT},
        },
        "handlers": handlers,
        "root": {"level": level, "handlers": list(handlers)},
    }


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> bool:
    """Configure the root logger once; return ``True`` if this call did it."""
    if logging.getLogger().handlers:
        return False
    logging.config.dictConfig(build_logging_config(level, logfile))
    return True
