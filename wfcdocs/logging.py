"""Logging utilities for wfcdocs commands."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "wfcdocs"

_CONSOLE_FORMAT = "[wfcdocs] %(levelname)s %(message)s"
_VERBOSE_CONSOLE_FORMAT = "[wfcdocs:%(module_name)s] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class _ModuleNameFilter(logging.Filter):
    """Expose the logger name relative to ``wfcdocs`` as ``module_name``."""

    def filter(self, record: logging.LogRecord) -> bool:
        prefix = f"{_LOGGER_NAME}."
        name = record.name
        record.module_name = name[len(prefix):] if name.startswith(prefix) else name
        return True


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the wfcdocs hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Configure the wfcdocs logger.

    The console shows INFO and above, or DEBUG with the emitting module when
    ``verbose`` is set. A ``log_file`` always receives DEBUG records so a
    generation run can be audited after the fact (which source files were
    missing, how many entries each map held).
    """
    console_level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if log_file is not None else console_level)
    logger.propagate = False

    # Repeated CLI invocations in one process must not stack handlers.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(console_level)
    if verbose:
        stream_handler.addFilter(_ModuleNameFilter())
        stream_handler.setFormatter(logging.Formatter(_VERBOSE_CONSOLE_FORMAT))
    else:
        stream_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(stream_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging", "get_logger"]
