"""Tests for centralized logging behavior and configuration."""

import logging
import sys
from io import StringIO

import pytest

from graphwalk.logging import (
    apply_verbosity,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    """Reset logging state before and after each test."""
    reset_logging()
    yield
    reset_logging()


def test_debug_toggle_controls_emission():
    logger = get_logger("graphwalk.test")

    capture = StringIO()
    handler = logging.StreamHandler(capture)
    handler.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.addHandler(handler)

    logger.info("info-1")
    assert "info-1" in capture.getvalue()

    logger.debug("debug-1")
    assert "debug-1" not in capture.getvalue()

    enable_debug_logging()
    logger.debug("debug-2")
    assert "debug-2" in capture.getvalue()

    apply_verbosity()
    logger.debug("debug-3")
    assert "debug-3" not in capture.getvalue()

    logger.removeHandler(handler)


@pytest.mark.parametrize(
    "verbose, quiet, expected",
    [
        (False, False, logging.INFO),
        (True, False, logging.DEBUG),
        (False, True, logging.WARNING),
        (True, True, logging.DEBUG),
    ],
)
def test_apply_verbosity_sets_root_level(verbose, quiet, expected):
    apply_verbosity(verbose=verbose, quiet=quiet)
    assert logging.getLogger("graphwalk").level == expected


def test_global_level_applies_to_existing_and_new_children():
    algo_logger = get_logger("graphwalk.algorithms.widest")
    io_logger = get_logger("graphwalk.io")
    assert algo_logger.getEffectiveLevel() == logging.INFO
    assert io_logger.getEffectiveLevel() == logging.INFO

    set_global_log_level(logging.WARNING)
    assert algo_logger.getEffectiveLevel() == logging.WARNING
    assert io_logger.getEffectiveLevel() == logging.WARNING
    assert get_logger("graphwalk.cli").getEffectiveLevel() == logging.WARNING


def test_setup_is_idempotent():
    handler = logging.StreamHandler(StringIO())
    setup_root_logger(level=logging.INFO, handler=handler)

    root_logger = logging.getLogger("graphwalk")
    assert root_logger.handlers == [handler]

    setup_root_logger(level=logging.DEBUG)
    assert root_logger.handlers == [handler]
    assert root_logger.level == logging.INFO


def test_default_handler_writes_to_stderr():
    setup_root_logger()
    (handler,) = logging.getLogger("graphwalk").handlers
    assert isinstance(handler, logging.StreamHandler)
    assert handler.stream is sys.stderr


def test_custom_format_string_applied():
    capture = StringIO()
    handler = logging.StreamHandler(capture)
    fmt = "LEVEL:%(levelname)s|NAME:%(name)s|MSG:%(message)s"
    setup_root_logger(level=logging.INFO, format_string=fmt, handler=handler)

    get_logger("graphwalk.test.format").info("hello")
    out = capture.getvalue()
    assert "LEVEL:INFO" in out
    assert "NAME:graphwalk.test.format" in out
    assert "MSG:hello" in out


def test_records_reach_caplog(caplog):
    set_global_log_level(logging.WARNING)
    lg = get_logger("graphwalk.smoke")
    assert lg.isEnabledFor(logging.WARNING)

    caplog.set_level(logging.DEBUG, logger="graphwalk.smoke")
    lg.debug("debug message")
    assert any(
        r.levelno == logging.DEBUG and r.name == "graphwalk.smoke"
        for r in caplog.records
    )
