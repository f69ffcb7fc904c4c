"""Logging setup for the tracker.

Logs go to stderr and, when the data directory is writable, to a rotating
``learning-tracker.log``. A device that cannot write files still gets a
working logger so storage failures can be reported.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from . import config
from .data_paths import log_dir

LOGGER_NAME = "learning_tracker"
LOG_FILE_NAME = "learning-tracker.log"

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _file_handler(directory: Optional[Path]) -> Optional[RotatingFileHandler]:
    try:
        target = directory if directory is not None else log_dir()
        target.mkdir(parents=True, exist_ok=True)
        return RotatingFileHandler(target / LOG_FILE_NAME, maxBytes=1_048_576, backupCount=5, encoding="utf-8")
    except OSError:
        return None


def configure_logging(directory: Optional[Path] = None, name: str = LOGGER_NAME) -> logging.Logger:
    """Return the tracker logger, attaching handlers on first use.

    ``directory`` overrides the XDG log directory.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, config.LOG_LEVEL, logging.INFO))
    formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)

    file_handler = _file_handler(directory)
    if file_handler is None:
        logger.warning("Log directory is not writable; logging to stderr only")
    else:
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        logger.debug("Writing logs to %s", file_handler.baseFilename)
    return logger
