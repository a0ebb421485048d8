import logging
import sys
import traceback
from enum import Enum
from typing import Optional, TextIO, Union


class LogLevel(str, Enum):
    """Log level enum for configuration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


DEFAULT_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def setup_logging(
    level: Union[str, LogLevel] = LogLevel.INFO,
    stream: Optional[TextIO] = None,
    log_format: str = DEFAULT_FORMAT,
    date_format: str = "%Y-%m-%d %H:%M:%S",
    show_line_number: bool = False,
    capture_warnings: bool = True,
) -> None:
    """
    Configure application-wide logging.

    Does nothing if the root logger already has handlers.

    Args:
        level: The minimum logging level to display
        stream: Stream for the log output (default: stderr)
        log_format: The format string for log messages
        date_format: The format string for timestamps
        show_line_number: Whether to include filename and line number in logs
        capture_warnings: Whether to capture warnings through the warnings module
    """
    if isinstance(level, str):
        level = LogLevel(level.upper())

    numeric_level = getattr(logging, level.value)

    if show_line_number:
        log_format = "%(asctime)s | %(levelname)-7s | %(name)s | %(filename)s:%(lineno)d | %(message)s"

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)

    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        datefmt=date_format,
        handlers=[handler],
    )

    if capture_warnings:
        logging.captureWarnings(True)

    logger = logging.getLogger(__name__)
    logger.debug("Logging configured: level=%s", level.value)


def log_exception(logger: logging.Logger,
                  message: str,
                  exc_info: Optional[BaseException] = None,
                  level: int = logging.ERROR) -> None:
    """
    Log an exception with detailed traceback information.

    Args:
        logger: The logger instance to use
        message: The message to log
        exc_info: The exception (uses sys.exc_info() if None)
        level: The log level to use (default: ERROR)
    """
    if exc_info is None:
        exc_type, exc_value, exc_traceback = sys.exc_info()
    else:
        exc_type = type(exc_info)
        exc_value = exc_info
        exc_traceback = exc_info.__traceback__

    if exc_type is not None and exc_value is not None and exc_traceback is not None:
        tb_text = "".join(traceback.format_exception(exc_type, exc_value, exc_traceback))
        logger.log(level, "%s\n%s", message, tb_text)
    else:
        logger.log(level, "%s (no exception info available)", message)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name.

    Args:
        name: The logger name, typically __name__

    Returns:
        A logger instance
    """
    return logging.getLogger(name)
