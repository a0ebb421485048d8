import logging
import sys

import pytest

from rotkit.utils.error_handling import capture_exceptions, handle_errors
from rotkit.utils.exceptions import (
    ConfigError,
    InvalidArgumentError,
    OutOfRangeError,
    RotkitError,
)
from rotkit.utils.logging import LogLevel, get_logger, log_exception


def test_error_str_with_details():
    err = OutOfRangeError('values must contain exactly four elements', 'values', 4, 3)

    assert str(err) == 'values must contain exactly four elements [argument=values, expected=4, actual=3]'


def test_error_str_without_details():
    assert str(ConfigError('bad config')) == 'bad config'


def test_error_hierarchy():
    assert issubclass(InvalidArgumentError, RotkitError)
    assert issubclass(InvalidArgumentError, ValueError)
    assert issubclass(OutOfRangeError, RotkitError)
    assert issubclass(OutOfRangeError, ValueError)
    assert issubclass(ConfigError, RotkitError)


def test_handle_errors_logs_expected(caplog):
    @handle_errors()
    def fail() -> int:
        raise ConfigError('broken')

    with caplog.at_level(logging.ERROR):
        assert fail() is None

    assert 'Error in fail: broken' in caplog.text


def test_handle_errors_logs_unexpected_as_critical(caplog):
    @handle_errors()
    def fail() -> int:
        raise RuntimeError('boom')

    with caplog.at_level(logging.ERROR):
        assert fail() is None

    assert any(r.levelno == logging.CRITICAL for r in caplog.records)


def test_handle_errors_show_traceback(caplog):
    @handle_errors(show_traceback=True)
    def fail() -> int:
        raise InvalidArgumentError('missing', argument='values')

    with caplog.at_level(logging.ERROR):
        assert fail() is None

    assert 'Error in fail: missing [argument=values]' in caplog.text
    assert 'Traceback' in caplog.text


def test_handle_errors_unexpected_logs_traceback(caplog):
    @handle_errors()
    def fail() -> int:
        raise RuntimeError('boom')

    with caplog.at_level(logging.ERROR):
        fail()

    assert 'Unexpected error in fail: boom' in caplog.text
    assert 'Traceback' in caplog.text


def test_handle_errors_exit_on_unexpected():
    @handle_errors(exit_on_error=True)
    def fail() -> int:
        raise RuntimeError('boom')

    with pytest.raises(SystemExit) as exc_info:
        fail()

    assert exc_info.value.code == 1


def test_handle_errors_exit():
    @handle_errors(exit_on_error=True, exit_code=3)
    def fail() -> int:
        raise ConfigError('broken')

    with pytest.raises(SystemExit) as exc_info:
        fail()

    assert exc_info.value.code == 3


def test_handle_errors_passes_result():
    @handle_errors()
    def ok(value: int) -> int:
        return value * 2

    assert ok(21) == 42


def test_capture_exceptions(monkeypatch):
    monkeypatch.setattr(sys, 'excepthook', sys.excepthook)

    capture_exceptions()

    assert sys.excepthook is not sys.__excepthook__


def test_capture_exceptions_logs_uncaught(monkeypatch, caplog):
    monkeypatch.setattr(sys, 'excepthook', sys.excepthook)
    capture_exceptions()

    try:
        raise ConfigError('broken')
    except ConfigError as e:
        with caplog.at_level(logging.CRITICAL, logger='rotkit.utils.error_handling'):
            sys.excepthook(type(e), e, e.__traceback__)

    assert 'Uncaught exception' in caplog.text
    assert 'ConfigError: broken' in caplog.text


def test_log_exception(caplog):
    logger = get_logger('rotkit.test')

    try:
        raise OutOfRangeError('too short')
    except OutOfRangeError as e:
        with caplog.at_level(logging.ERROR, logger='rotkit.test'):
            log_exception(logger, 'conversion failed', e)

    assert 'conversion failed' in caplog.text
    assert 'Traceback' in caplog.text


def test_log_level_values():
    assert LogLevel('DEBUG') is LogLevel.DEBUG
    assert LogLevel.WARNING == 'WARNING'
