"""Logging utilities for bruno-doc commands."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "brudoc"

VERBOSE = 15
logging.addLevelName(VERBOSE, "VERBOSE")


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the brudoc hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def console_level(*, verbose: bool = False, silent: bool = False, debug: bool = False) -> int:
    """Map the command line log options onto a console log level."""
    if verbose and silent:
        verbose = silent = False
    if debug:
        return logging.DEBUG
    if silent:
        return logging.ERROR
    if verbose:
        return VERBOSE
    return logging.INFO


def configure_logging(
    *,
    verbose: bool = False,
    silent: bool = False,
    debug: bool = False,
    log_file: Path | None = None,
    append: bool = False,
) -> logging.Logger:
    """Configure the brudoc logger with console output and optional file sink.

    The log file is truncated unless ``append`` is set, so each run starts
    with a fresh log.
    """
    level = console_level(verbose=verbose, silent=silent, debug=debug)
    file_level = logging.DEBUG if debug else VERBOSE

    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(min(level, file_level) if log_file is not None else level)
    logger.propagate = False

    # Reset handlers to avoid duplicate output when the CLI is invoked multiple times.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging.Formatter("[bruno-doc] %(levelname)s %(message)s"))
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, mode="a" if append else "w", encoding="utf-8")
        file_handler.setLevel(file_level)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] [%(filename)s:%(lineno)d] : %(message)s"
            )
        )
        logger.addHandler(file_handler)

    return logger


def log_file_path(logger: logging.Logger | None = None) -> Path | None:
    """Return the file the brudoc logger writes to, if any."""
    logger = logger or logging.getLogger(_LOGGER_NAME)
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler):
            return Path(handler.baseFilename)
    return None


__all__ = ["VERBOSE", "configure_logging", "console_level", "get_logger", "log_file_path"]
