"""Logging for dirpick.

Modules ask for ``get_logger(name)`` at any time; nothing is emitted until
``configure_logging`` (called once by the CLI) attaches a handler to the
``dirpick`` logger. Output never goes to stdout, which carries the result.
"""

import logging
import os
from typing import Optional

LOGGER_NAME = "dirpick"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_LOG_FILE = "dirpick_debug.log"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "0").lower() in {"1", "true", "yes", "on", "debug"}


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(LOGGER_NAME).getChild(name)


def configure_logging(debug: Optional[bool] = None, log_path: Optional[str] = None) -> Optional[str]:
    """Set the level and target of the ``dirpick`` logger.

    ``debug`` defaults to ``DIRPICK_DEBUG``; ``log_path`` to ``DIRPICK_LOG``,
    or ``./dirpick_debug.log`` in debug mode. Without either, records are
    dropped. A file that cannot be opened falls back to stderr. Returns the
    log file in use, if any.
    """
    if debug is None:
        debug = _env_flag("DIRPICK_DEBUG")
    if log_path is None:
        log_path = os.environ.get("DIRPICK_LOG")
    if log_path:
        log_path = os.path.expanduser(log_path)
    elif debug:
        log_path = os.path.join(os.getcwd(), DEFAULT_LOG_FILE)

    logger = reset_logger()
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    if not log_path:
        return None

    error: Optional[OSError] = None
    try:
        handler: logging.Handler = logging.FileHandler(log_path, encoding="utf-8")
    except OSError as exc:
        handler = logging.StreamHandler()
        error = exc
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    if error is not None:
        logger.warning("Failed to create log file '%s': %s. Falling back to standard error.", log_path, error)
        return None
    return log_path


def reset_logger() -> logging.Logger:
    """Drop handlers added by ``configure_logging``; returns the package logger."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, logging.NullHandler):
            continue
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    return logger
