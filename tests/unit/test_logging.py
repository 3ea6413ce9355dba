"""
Unit tests for the logging module in cvtr.
"""

import sys
from unittest.mock import call, patch

import pytest

from cvtr.logging import configure_logger
from cvtr.settings import LoggingSettings


@pytest.mark.smoke
@patch("cvtr.logging.logger")
def test_console_logger(mock_logger):
    configure_logger(LoggingSettings(console_log_level="debug"))

    mock_logger.enable.assert_called_once_with("cvtr")
    mock_logger.remove.assert_called_once()
    mock_logger.add.assert_called_once_with(
        sys.stderr,
        level="DEBUG",
        format="{time} | {function} | {level} - {message}",
    )


@pytest.mark.sanity
@patch("cvtr.logging.logger")
def test_disabled(mock_logger):
    configure_logger(LoggingSettings(disabled=True))

    mock_logger.disable.assert_called_once_with("cvtr")
    mock_logger.add.assert_not_called()


@pytest.mark.sanity
@patch("cvtr.logging.logger")
def test_keep_existing_loggers(mock_logger):
    configure_logger(LoggingSettings(clear_loggers=False))

    mock_logger.remove.assert_not_called()


@pytest.mark.sanity
@pytest.mark.parametrize(
    ("log_file", "log_file_level", "expected"),
    [
        ("conversions.log", None, call("conversions.log", level="INFO", serialize=True)),
        (None, "debug", call("cvtr.log", level="DEBUG", serialize=True)),
        ("other.log", "error", call("other.log", level="ERROR", serialize=True)),
    ],
)
@patch("cvtr.logging.logger")
def test_file_logger(mock_logger, log_file, log_file_level, expected):
    configure_logger(
        LoggingSettings(log_file=log_file, log_file_level=log_file_level)
    )

    assert mock_logger.add.call_count == 2
    assert mock_logger.add.call_args_list[1] == expected
