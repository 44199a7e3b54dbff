# qif_dom/utilities/config_logging.py
from __future__ import annotations

import copy
import logging.config
from pathlib import Path
from typing import Any, Optional, Union

LOG_FILE_NAME = "qif_dom.log"

LOGGING: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
        "verbose": {
            "format": "%(asctime)s %(levelname)s %(name)s "
            "[%(process)d:%(threadName)s] %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "simple",
        },
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "formatter": "verbose",
            "filename": f"logs/{LOG_FILE_NAME}",
            "maxBytes": 5_000_000,
            "backupCount": 5,
            "encoding": "utf-8",
        },
    },
    "loggers": {
        "qif_dom": {
            "level": "DEBUG",
            "handlers": ["console", "file"],
            "propagate": False,
        },
    },
}


def build_logging_config(
    log_dir: Optional[Union[str, Path]] = None, level: Optional[str] = None
) -> dict[str, Any]:
    """
    Return a copy of :data:`LOGGING` with the log directory and package level
    applied.
    """
    cfg = copy.deepcopy(LOGGING)
    if log_dir is not None:
        cfg["handlers"]["file"]["filename"] = str(Path(log_dir) / LOG_FILE_NAME)
    if level is not None:
        cfg["loggers"]["qif_dom"]["level"] = level.upper()
    return cfg


def configure_logging(
    log_dir: Optional[Union[str, Path]] = None, level: Optional[str] = None
) -> dict[str, Any]:
    """
    Apply the package logging configuration via ``logging.config.dictConfig``.

    The library never calls this itself; applications opt in.
    """
    cfg = build_logging_config(log_dir, level)
    Path(cfg["handlers"]["file"]["filename"]).parent.mkdir(parents=True, exist_ok=True)
    logging.config.dictConfig(cfg)
    return cfg
