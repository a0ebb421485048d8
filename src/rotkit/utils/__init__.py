from rotkit.utils.error_handling import capture_exceptions, handle_errors
from rotkit.utils.exceptions import (
    ConfigError,
    InvalidArgumentError,
    OutOfRangeError,
    RotkitError,
)
from rotkit.utils.logging import LogLevel, get_logger, log_exception, setup_logging

__all__ = [
    "RotkitError",
    "ConfigError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "LogLevel",
    "setup_logging",
    "get_logger",
    "log_exception",
    "handle_errors",
    "capture_exceptions",
]
