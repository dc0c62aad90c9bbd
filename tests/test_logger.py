import logging

import pytest

from utils.logger import LOGGER_NAME, LoggerSetup, app_logger


@pytest.fixture
def restore_level():
    level = app_logger.level
    yield
    app_logger.setLevel(level)


def test_single_named_logger():
    assert app_logger.name == LOGGER_NAME
    assert LoggerSetup.setup() is app_logger


def test_handlers_attached_once():
    count = len(app_logger.handlers)

    LoggerSetup.setup()

    assert len(app_logger.handlers) == count


def test_verbose(restore_level):
    LoggerSetup.set_verbosity(verbose=True)

    assert app_logger.level == logging.DEBUG


def test_quiet(restore_level):
    LoggerSetup.set_verbosity(quiet=True)

    assert app_logger.level == logging.WARNING


def test_verbose_wins_over_quiet(restore_level):
    LoggerSetup.set_verbosity(verbose=True, quiet=True)

    assert app_logger.level == logging.DEBUG
