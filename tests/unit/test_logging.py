"""
Unit tests for logging setup
"""

import logging
import warnings
import pytest
from core.logging import QUIET_LOGGERS, setup_logging


@pytest.fixture
def restore_logging():
    levels = {name: logging.getLogger(name).level for name in QUIET_LOGGERS}
    yield
    logging.captureWarnings(False)
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)


def test_level_override(restore_logging):
    assert setup_logging("debug") == logging.DEBUG
    assert setup_logging("not-a-level") == logging.INFO


def test_driver_loggers_are_quiet(restore_logging):
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG)

    setup_logging()

    for name in QUIET_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING


def test_warnings_are_logged(restore_logging, caplog):
    setup_logging()

    with caplog.at_level(logging.WARNING, logger="py.warnings"), warnings.catch_warnings():
        warnings.simplefilter("always")
        warnings.warn("Length of header or names does not match length of data")

    assert any(r.name == "py.warnings" for r in caplog.records)
