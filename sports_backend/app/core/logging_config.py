"""
Logging configuration for the backend.

``setup_logging`` prepares the root logger used by the application
modules; ``uvicorn_log_config`` produces the ``log_config`` handed to
uvicorn so that server and access logs share the application's format
and destinations.  Both are driven by the ``LOG_LEVEL`` and
``LOG_FILE`` settings.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.access")


def _level(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger.

    The level is applied on every call, even when another tool (uvicorn,
    pytest) attached handlers first.  A console handler is added only
    if the root logger has none, and a file handler only if ``logfile``
    is not already being written to, so calling this repeatedly (once
    per ``create_app``) never duplicates output.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file to append log records to.
    """
    root = logging.getLogger()
    root.setLevel(_level(level))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not root.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        already_logging = any(
            isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == log_path
            for handler in root.handlers
        )
        if not already_logging:
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)


def uvicorn_log_config(level: str = "INFO", logfile: Optional[str] = None) -> Dict[str, Any]:
    """Build a ``logging.config.dictConfig`` mapping for uvicorn's loggers.

    Pass the result as ``uvicorn.Config(log_config=...)``.  Existing
    loggers are left alone, so the application's root setup survives
    uvicorn applying it.
    """
    handlers: Dict[str, Dict[str, Any]] = {
        "console": {"class": "logging.StreamHandler", "formatter": "default"},
    }
    if logfile:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "filename": str(Path(logfile).resolve()),
            "encoding": "utf-8",
            "formatter": "default",
        }
    level_name = logging.getLevelName(_level(level))
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": {"format": LOG_FORMAT, "datefmt": DATE_FORMAT}},
        "handlers": handlers,
        "loggers": {
            name: {"handlers": list(handlers), "level": level_name, "propagate": False}
            for name in UVICORN_LOGGERS
        },
    }
