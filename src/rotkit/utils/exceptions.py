from typing import Any, Dict, Optional


class RotkitError(Exception):
    """Base exception for all rotkit-specific errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} [{details_str}]"
        return self.message


class ConfigError(RotkitError):
    """Raised when there's an issue with the configuration."""


class InvalidArgumentError(RotkitError, ValueError):
    """Raised when a required argument is missing or has an unusable type."""

    def __init__(self, message: str, argument: Optional[str] = None, **kwargs: Any):
        details = kwargs.copy()
        if argument:
            details["argument"] = argument
        super().__init__(message, details)


class OutOfRangeError(RotkitError, ValueError):
    """Raised when an argument has the wrong number of elements."""

    def __init__(
        self,
        message: str,
        argument: Optional[str] = None,
        expected: Optional[int] = None,
        actual: Optional[int] = None,
        **kwargs: Any,
    ):
        details = kwargs.copy()
        if argument:
            details["argument"] = argument
        if expected is not None:
            details["expected"] = expected
        if actual is not None:
            details["actual"] = actual
        super().__init__(message, details)
