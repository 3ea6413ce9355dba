import sys

from loguru import logger

from cvtr.settings import LoggingSettings, settings

__all__ = ["configure_logger", "logger"]


def configure_logger(config: LoggingSettings = settings.logging):
    """
    Configure the logger for cvtr using the provided configuration.
    Console logs go to stderr since stdout carries the conversion results.
    A log file can be added on top of the console logger.

    Note: Environment variables take precedence over the function parameters.

    :param config: The configuration for the logger to use.
    :type config: LoggingSettings
    """

    if config.disabled:
        logger.disable("cvtr")
        return

    logger.enable("cvtr")

    if config.clear_loggers:
        logger.remove()

    # log as a human readable string with the time, function, level, and message
    logger.add(
        sys.stderr,
        level=config.console_log_level.upper(),
        format="{time} | {function} | {level} - {message}",
    )

    if config.log_file or config.log_file_level:
        log_file = config.log_file or "cvtr.log"
        log_file_level = config.log_file_level or "INFO"
        # log as json to the file for easier parsing
        logger.add(log_file, level=log_file_level.upper(), serialize=True)


# invoke logger setup on import with default values
# enabling console logging with WARNING and disabling file logging
configure_logger()
