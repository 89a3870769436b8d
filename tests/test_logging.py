"""Tests for brudoc.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from brudoc.logging import VERBOSE, configure_logging, console_level, get_logger, log_file_path


def test_get_logger_uses_brudoc_hierarchy() -> None:
    assert get_logger().name == "brudoc"
    assert get_logger("assembler").name == "brudoc.assembler"


def test_verbose_level_is_registered() -> None:
    assert logging.DEBUG < VERBOSE < logging.INFO
    assert logging.getLevelName(VERBOSE) == "VERBOSE"


def test_console_level_follows_flags() -> None:
    assert console_level() == logging.INFO
    assert console_level(verbose=True) == VERBOSE
    assert console_level(silent=True) == logging.ERROR
    assert console_level(debug=True) == logging.DEBUG
    assert console_level(verbose=True, silent=True) == logging.INFO


def test_configure_logging_writes_verbose_records_to_file(tmp_path: Path) -> None:
    log_file = tmp_path / "bruno-doc.log"

    logger = configure_logging(log_file=log_file)
    get_logger("test").log(VERBOSE, "only in the file")
    for handler in logger.handlers:
        handler.flush()

    assert log_file_path(logger) == log_file
    contents = log_file.read_text(encoding="utf-8")
    assert "[VERBOSE]" in contents
    assert "only in the file" in contents
    assert "test_logging.py" in contents


def test_configure_logging_truncates_unless_appending(tmp_path: Path) -> None:
    log_file = tmp_path / "bruno-doc.log"
    log_file.write_text("previous run\n", encoding="utf-8")

    configure_logging(log_file=log_file, append=True)
    assert "previous run" in log_file.read_text(encoding="utf-8")

    configure_logging(log_file=log_file)
    assert "previous run" not in log_file.read_text(encoding="utf-8")


def test_configure_logging_replaces_handlers() -> None:
    configure_logging()
    logger = configure_logging(verbose=True)

    assert len(logger.handlers) == 1
    assert logger.handlers[0].level == VERBOSE
    assert log_file_path(logger) is None
